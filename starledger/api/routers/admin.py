"""Privileged endpoints called by the admin CLI."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from starledger.api.deps import get_credentials, get_db_session, get_star_service
from starledger.core.security import AdminCredentialChecker
from starledger.infrastructure.database import translate_storage_errors
from starledger.modules.stars import StarLedgerService
from starledger.schemas import AddStarsRequest, AddStarsResponse

router = APIRouter()


@router.post("/add-stars", response_model=AddStarsResponse, summary="Deposit stars to a uid8")
async def add_stars(
    payload: AddStarsRequest,
    credentials: AdminCredentialChecker = Depends(get_credentials),
    service: StarLedgerService = Depends(get_star_service),
    db: AsyncSession = Depends(get_db_session),
) -> AddStarsResponse:
    # credentials first: a bad pair never reveals whether uid8/amount were valid
    credentials.verify(payload.bot_token, payload.password)

    deposit = await service.deposit(payload.uid8, payload.amount)
    with translate_storage_errors("commit"):
        await db.commit()
    return AddStarsResponse(uid8=deposit.handle, added=deposit.added, new_balance=deposit.new_balance)
