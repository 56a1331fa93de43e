"""Repository protocol for account-handle bindings."""

from __future__ import annotations

from typing import Protocol

from .models import BindingInsert, HandleBinding


class HandleRepository(Protocol):
    async def get_by_external_id(self, external_id: str) -> HandleBinding | None:
        ...

    async def insert_binding(self, external_id: str, handle: str) -> BindingInsert:
        """Insert atomically, reporting which uniqueness constraint (if any) was hit."""
        ...
