"""Star balances keyed by exchange handle."""

from .models import StarDeposit
from .service import StarLedgerService

__all__ = [
    "StarDeposit",
    "StarLedgerService",
]
