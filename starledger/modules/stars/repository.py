"""Repository protocol for star balances."""

from __future__ import annotations

from typing import Protocol


class StarRepository(Protocol):
    async def get_stars(self, handle: str) -> int | None:
        ...

    async def increment(self, handle: str, delta: int) -> int | None:
        """Atomically add ``delta`` (creating the record at 0 first) and return the total.

        ``None`` means the total would overflow and nothing was written.
        """
        ...
