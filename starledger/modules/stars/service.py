"""Star ledger service."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from starledger.core.errors import InvalidInputError
from starledger.core.validators import parse_amount, validate_handle
from starledger.infrastructure.database.repositories.star_repository import SqlStarRepository

from .models import StarDeposit
from .repository import StarRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class StarLedgerService:
    repository: StarRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "StarLedgerService":
        return cls(SqlStarRepository(session))

    async def get_balance(self, handle: str) -> int:
        handle = validate_handle(handle)
        stars = await self.repository.get_stars(handle)
        return stars if stars is not None else 0

    async def deposit(self, handle: str, amount: Any) -> StarDeposit:
        handle = validate_handle(handle)
        delta = parse_amount(amount)
        new_balance = await self.repository.increment(handle, delta)
        if new_balance is None:
            logger.warning("Deposit of %s stars to uid8 %s would overflow the balance", delta, handle)
            raise InvalidInputError("Balance limit exceeded")
        logger.info("Deposited %s stars to uid8 %s -> %s", delta, handle, new_balance)
        return StarDeposit(handle=handle, added=delta, new_balance=new_balance)
