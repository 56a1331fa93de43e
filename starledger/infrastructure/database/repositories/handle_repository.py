"""SQLAlchemy implementation of the handle repository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from starledger.db.models import HandleBinding as HandleBindingModel
from starledger.infrastructure.database.session import translate_storage_errors, upsert_insert
from starledger.modules.handles.models import BindingInsert, HandleBinding, InsertOutcome


class SqlHandleRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_external_id(self, external_id: str) -> HandleBinding | None:
        stmt = select(HandleBindingModel).where(HandleBindingModel.external_id == external_id)
        with translate_storage_errors("handle lookup"):
            result = await self.session.execute(stmt)
        return self._to_domain(result.scalars().first())

    async def insert_binding(self, external_id: str, handle: str) -> BindingInsert:
        # DO NOTHING without a target covers both unique columns; the loser is
        # classified by looking the external id back up.
        stmt = (
            upsert_insert(self.session, HandleBindingModel)
            .values(external_id=external_id, handle=handle)
            .on_conflict_do_nothing()
            .returning(HandleBindingModel.handle)
        )
        with translate_storage_errors("handle insert"):
            result = await self.session.execute(stmt)
            inserted = result.scalar_one_or_none()

        if inserted is not None:
            return BindingInsert(InsertOutcome.INSERTED, inserted)

        winner = await self.get_by_external_id(external_id)
        if winner is not None:
            return BindingInsert(InsertOutcome.EXTERNAL_ID_TAKEN, winner.handle)
        return BindingInsert(InsertOutcome.HANDLE_TAKEN)

    @staticmethod
    def _to_domain(model: HandleBindingModel | None) -> HandleBinding | None:
        if model is None:
            return None
        return HandleBinding(
            external_id=model.external_id,
            handle=model.handle,
            created_at=model.created_at,
        )
