"""Handle allocation service."""

from __future__ import annotations

import logging
import secrets
from typing import Callable

from sqlalchemy.ext.asyncio import AsyncSession

from starledger.core.errors import AllocationExhaustedError
from starledger.core.validators import HANDLE_DIGITS, normalize_external_id
from starledger.infrastructure.database.repositories.handle_repository import SqlHandleRepository

from .models import InsertOutcome
from .repository import HandleRepository

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 10


def generate_handle() -> str:
    """Draw a handle uniformly from the 10**8 space, zero padded."""
    return f"{secrets.randbelow(10 ** HANDLE_DIGITS):0{HANDLE_DIGITS}d}"


class HandleService:
    """Maps external account ids to stable handles, creating them on first use."""

    def __init__(
        self,
        repository: HandleRepository,
        *,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        generate: Callable[[], str] = generate_handle,
    ) -> None:
        self._repository = repository
        self._max_attempts = max_attempts
        self._generate = generate

    @classmethod
    def with_session(cls, session: AsyncSession, *, max_attempts: int = DEFAULT_MAX_ATTEMPTS) -> "HandleService":
        return cls(SqlHandleRepository(session), max_attempts=max_attempts)

    async def get_handle(self, external_id: str) -> str | None:
        """Return the bound handle without allocating one."""
        external_id = normalize_external_id(external_id)
        binding = await self._repository.get_by_external_id(external_id)
        return binding.handle if binding else None

    async def allocate_handle(self, external_id: str) -> str:
        """Return the handle for ``external_id``, creating the binding if needed.

        Repeated calls return the same handle. A concurrent caller that wins the
        insert for the same id is treated as success and its handle returned.
        Handle collisions are retried up to ``max_attempts`` times before
        ``AllocationExhaustedError`` is raised.
        """
        external_id = normalize_external_id(external_id)

        existing = await self._repository.get_by_external_id(external_id)
        if existing is not None:
            return existing.handle

        for attempt in range(1, self._max_attempts + 1):
            candidate = self._generate()
            result = await self._repository.insert_binding(external_id, candidate)

            if result.outcome is InsertOutcome.INSERTED:
                logger.info("Allocated uid8 %s for account %s", result.handle, external_id)
                return result.handle
            if result.outcome is InsertOutcome.EXTERNAL_ID_TAKEN:
                logger.info("Account %s bound concurrently, reusing uid8 %s", external_id, result.handle)
                return result.handle

            logger.debug("uid8 candidate collision on attempt %s", attempt, extra={"attempt": attempt})

        logger.error(
            "Could not allocate uid8 for account %s after %s attempts",
            external_id,
            self._max_attempts,
        )
        raise AllocationExhaustedError()


__all__ = ["HandleService", "generate_handle", "DEFAULT_MAX_ATTEMPTS"]
