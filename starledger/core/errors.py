"""Error hierarchy shared by the handle allocator, the star ledger and the HTTP layer.

Every error carries a stable ``code`` (the failure kind surfaced to callers),
the HTTP status it maps to, and a public message that never contains storage
internals.
"""

from __future__ import annotations


class StarledgerError(Exception):
    """Base class for all failures surfaced to callers."""

    code = "internal_error"
    http_status = 500
    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_response(self) -> dict:
        return {"ok": False, "error": self.code, "message": self.message}


class InvalidInputError(StarledgerError):
    """Malformed external id, handle or amount."""

    code = "invalid_input"
    http_status = 400
    default_message = "Invalid input"


class UnauthorizedError(StarledgerError):
    """Credential pair did not match; deliberately silent about which half failed."""

    code = "unauthorized"
    http_status = 401
    default_message = "Invalid credentials"


class AllocationExhaustedError(StarledgerError):
    """No free handle found within the retry bound."""

    code = "allocation_exhausted"
    http_status = 503
    default_message = "Could not allocate uid8"


class StorageError(StarledgerError):
    """Underlying persistence failure."""

    code = "storage_error"
    http_status = 500
    default_message = "Server error"


__all__ = [
    "StarledgerError",
    "InvalidInputError",
    "UnauthorizedError",
    "AllocationExhaustedError",
    "StorageError",
]
