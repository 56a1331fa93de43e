"""Domain models for account-handle bindings."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional


@dataclass(slots=True)
class HandleBinding:
    external_id: str
    handle: str
    created_at: Optional[datetime] = None


class InsertOutcome(str, Enum):
    INSERTED = "inserted"
    EXTERNAL_ID_TAKEN = "external_id_taken"
    HANDLE_TAKEN = "handle_taken"


@dataclass(slots=True)
class BindingInsert:
    """Result of a single insert attempt.

    ``handle`` is the stored handle for ``INSERTED`` and ``EXTERNAL_ID_TAKEN``
    and ``None`` when the candidate handle collided.
    """

    outcome: InsertOutcome
    handle: Optional[str] = None
