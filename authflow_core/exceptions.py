"""
AuthFlow Exceptions
===================
Exception classes raised past the engine boundary.

User-facing OTP failures are never raised; they are returned as
``ValidationResult`` values.
"""

from typing import Optional


class AuthFlowError(Exception):
    """Base exception for all authflow errors."""
    pass


class StorageUnavailable(AuthFlowError):
    """Raised when the key-value store cannot be read or written."""

    def __init__(self, message: str, key: Optional[str] = None, cause: Optional[Exception] = None):
        super().__init__(message)
        self.key = key
        self.cause = cause


class InvalidIdentity(AuthFlowError):
    """Raised when an OTP is requested for an empty identity."""
    pass
