from __future__ import annotations

from typing import Optional


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``errors`` maps form field names to messages when the failure is
    field-level.
    """

    def __init__(self, message: str, errors: Optional[dict[str, str]] = None):
        super().__init__(message)
        self.errors: dict[str, str] = dict(errors or {})


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class BackendError(DomainError):
    """Raised when the payroll backend rejects a call or cannot be reached."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
