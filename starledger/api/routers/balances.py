"""Read-only balance endpoints."""

import logging

from fastapi import APIRouter, Depends

from starledger.api.deps import get_handle_service, get_star_service
from starledger.core.validators import normalize_external_id
from starledger.modules.handles import HandleService
from starledger.modules.stars import StarLedgerService
from starledger.schemas import BalanceResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/user-balance", response_model=BalanceResponse, summary="Balance by account id")
async def user_balance(
    user_id: str = "",
    handles: HandleService = Depends(get_handle_service),
    stars: StarLedgerService = Depends(get_star_service),
) -> BalanceResponse:
    external_id = normalize_external_id(user_id, field="user_id")
    handle = await handles.get_handle(external_id)
    if handle is None:
        # no uid8 yet means nothing was ever deposited
        return BalanceResponse(uid8=None, stars=0)

    balance = await stars.get_balance(handle)
    logger.debug("user-balance %s -> uid8 %s, %s stars", external_id, handle, balance)
    return BalanceResponse(uid8=handle, stars=balance)


@router.get("/stars/by-uid8/{uid8}", response_model=BalanceResponse, summary="Balance by uid8")
async def stars_by_uid8(
    uid8: str,
    stars: StarLedgerService = Depends(get_star_service),
) -> BalanceResponse:
    balance = await stars.get_balance(uid8)
    return BalanceResponse(uid8=uid8.strip(), stars=balance)
