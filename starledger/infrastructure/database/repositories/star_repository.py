"""SQLAlchemy implementation of the star ledger repository."""

from __future__ import annotations

from sqlalchemy import BigInteger, literal, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from starledger.core.validators import MAX_AMOUNT
from starledger.db.models import StarBalance
from starledger.infrastructure.database.session import translate_storage_errors, upsert_insert


class SqlStarRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_stars(self, handle: str) -> int | None:
        stmt = select(StarBalance.stars).where(StarBalance.handle == handle)
        with translate_storage_errors("balance lookup"):
            result = await self.session.execute(stmt)
        stars = result.scalar_one_or_none()
        return int(stars) if stars is not None else None

    async def increment(self, handle: str, delta: int) -> int | None:
        """Add ``delta`` in a single statement and return the stored total.

        Returns ``None`` without touching the row when the total would pass
        ``MAX_AMOUNT``.
        """
        stmt = upsert_insert(self.session, StarBalance).values(handle=handle, stars=delta)
        stmt = (
            stmt.on_conflict_do_update(
                index_elements=[StarBalance.handle],
                set_={
                    "stars": StarBalance.stars + stmt.excluded.stars,
                    "updated_at": func.now(),
                },
                where=StarBalance.stars <= literal(MAX_AMOUNT, BigInteger) - stmt.excluded.stars,
            )
            .returning(StarBalance.stars)
        )
        with translate_storage_errors("balance increment"):
            result = await self.session.execute(stmt)
            stars = result.scalar_one_or_none()
        return int(stars) if stars is not None else None
