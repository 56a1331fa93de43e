"""Handle allocation: external account id -> 8-digit exchange handle."""

from .models import BindingInsert, HandleBinding, InsertOutcome
from .service import HandleService, generate_handle

__all__ = [
    "BindingInsert",
    "HandleBinding",
    "InsertOutcome",
    "HandleService",
    "generate_handle",
]
