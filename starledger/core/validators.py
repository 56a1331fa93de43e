"""Boundary validation for external ids, handles and deposit amounts."""

from __future__ import annotations

import math
import re
from typing import Any

from starledger.core.errors import InvalidInputError

HANDLE_DIGITS = 8
# stars are stored as BIGINT
MAX_AMOUNT = 2**63 - 1
_MAX_AMOUNT_DIGITS = len(str(MAX_AMOUNT))

_EXTERNAL_ID_RE = re.compile(r"^[0-9]+$")
_HANDLE_RE = re.compile(rf"^[0-9]{{{HANDLE_DIGITS}}}$")
_AMOUNT_RE = re.compile(r"^\+?[0-9]+$")


def normalize_external_id(value: Any, field: str = "telegram_id") -> str:
    """Return the canonical digit string for an external account id.

    Leading zeros are dropped so ``"0042"`` and ``"42"`` name the same account.
    """
    if not isinstance(value, str):
        raise InvalidInputError(f"Bad {field}")
    cleaned = value.strip()
    if not _EXTERNAL_ID_RE.fullmatch(cleaned):
        raise InvalidInputError(f"Bad {field}")
    return cleaned.lstrip("0") or "0"


def validate_handle(value: Any) -> str:
    if not isinstance(value, str):
        raise InvalidInputError("Bad uid8")
    cleaned = value.strip()
    if not _HANDLE_RE.fullmatch(cleaned):
        raise InvalidInputError("Bad uid8")
    return cleaned


def parse_amount(value: Any) -> int:
    """Coerce a deposit amount to a positive ``int``.

    Accepts ints, integral finite floats and decimal digit strings.
    """
    if isinstance(value, bool):
        raise InvalidInputError("Bad amount")
    if isinstance(value, int):
        amount = value
    elif isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise InvalidInputError("Bad amount")
        amount = int(value)
    elif isinstance(value, str):
        cleaned = value.strip()
        if not _AMOUNT_RE.fullmatch(cleaned) or len(cleaned.lstrip("+0")) > _MAX_AMOUNT_DIGITS:
            raise InvalidInputError("Bad amount")
        amount = int(cleaned)
    else:
        raise InvalidInputError("Bad amount")

    if amount <= 0 or amount > MAX_AMOUNT:
        raise InvalidInputError("Bad amount")
    return amount


__all__ = ["HANDLE_DIGITS", "MAX_AMOUNT", "normalize_external_id", "validate_handle", "parse_amount"]
