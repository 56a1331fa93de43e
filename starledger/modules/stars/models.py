"""Domain models for star balances."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class StarDeposit:
    handle: str
    added: int
    new_balance: int
