"""Shared-secret check guarding the deposit endpoint."""

from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass
from typing import Any

from starledger.core.config import AdminSettings
from starledger.core.errors import UnauthorizedError

logger = logging.getLogger(__name__)


def _matches(supplied: Any, expected: str) -> bool:
    if not expected or not isinstance(supplied, str) or not supplied:
        return False
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))


@dataclass(slots=True)
class AdminCredentialChecker:
    bot_token: str
    password: str

    @classmethod
    def from_settings(cls, settings: AdminSettings) -> "AdminCredentialChecker":
        return cls(
            bot_token=settings.bot_token.get_secret_value(),
            password=settings.password.get_secret_value(),
        )

    def verify(self, bot_token: Any, password: Any) -> None:
        """Raise ``UnauthorizedError`` unless both secrets match.

        Both comparisons always run so timing does not reveal which one failed.
        """
        token_ok = _matches(bot_token, self.bot_token)
        password_ok = _matches(password, self.password)
        if not (token_ok and password_ok):
            logger.warning("Rejected admin credentials")
            raise UnauthorizedError()


__all__ = ["AdminCredentialChecker"]
