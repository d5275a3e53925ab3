"""Errors raised by the scheduling core."""

from typing import Any


class InvalidRequest(ValueError):
    """Raised when a booking request cannot be evaluated.

    Covers an empty service list and a missing or unparseable requested
    date. Callers surface it as a validation message before any booking
    call is attempted.
    """

    def __init__(self, message: str, *, errors: list[dict[str, Any]] | None = None):
        super().__init__(message)
        self.errors = errors or []

    @property
    def fields(self) -> list[str]:
        """Names of the request fields that failed validation."""
        return [".".join(str(part) for part in err.get("loc", ())) for err in self.errors]
