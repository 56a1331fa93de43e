"""Handle allocation endpoint used by the mini-app on first launch."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from starledger.api.deps import get_db_session, get_handle_service
from starledger.infrastructure.database import translate_storage_errors
from starledger.modules.handles import HandleService
from starledger.schemas import Uid8Request, Uid8Response

router = APIRouter()


@router.post("/uid8", response_model=Uid8Response, summary="Get or allocate uid8")
async def allocate_uid8(
    payload: Uid8Request,
    service: HandleService = Depends(get_handle_service),
    db: AsyncSession = Depends(get_db_session),
) -> Uid8Response:
    handle = await service.allocate_handle(payload.telegram_id)
    with translate_storage_errors("commit"):
        await db.commit()
    return Uid8Response(uid8=handle)
