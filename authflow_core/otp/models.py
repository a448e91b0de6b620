"""
OTP Models
==========
Data models and enums for OTP issuance and validation.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any, Dict, Optional

from ..clock import from_epoch_ms, to_epoch_ms


class FailureReason(str, Enum):
    """Why a submitted code was rejected."""
    NO_DATA = "NO_DATA"
    EXPIRED = "EXPIRED"
    MAX_ATTEMPTS_EXCEEDED = "MAX_ATTEMPTS_EXCEEDED"
    INCORRECT_VALUE = "INCORRECT_VALUE"


NoPendingCode = FailureReason.NO_DATA
CodeExpired = FailureReason.EXPIRED
AttemptsExhausted = FailureReason.MAX_ATTEMPTS_EXCEEDED
CodeIncorrect = FailureReason.INCORRECT_VALUE


@dataclass
class OtpRecord:
    """The single live code for an identity."""
    identity: str
    code: str
    expires_at: datetime
    attempts: int = 0
    consumed: bool = False

    def is_expired(self, now: datetime) -> bool:
        return now > self.expires_at

    def seconds_remaining(self, now: datetime) -> int:
        """Whole seconds until expiry, rounded up, never negative."""
        return max(0, math.ceil((self.expires_at - now).total_seconds()))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identity": self.identity,
            "code": self.code,
            "expiresAt": to_epoch_ms(self.expires_at),
            "attempts": self.attempts,
            "consumed": self.consumed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "OtpRecord":
        """
        Rebuild a record from its persisted shape.

        Raises:
            KeyError, TypeError, ValueError: if the data is malformed
        """
        attempts = int(data.get("attempts", 0))
        if attempts < 0:
            raise ValueError("attempts must be >= 0")
        return cls(
            identity=str(data["identity"]),
            code=str(data["code"]),
            expires_at=from_epoch_ms(int(data["expiresAt"])),
            attempts=attempts,
            consumed=bool(data.get("consumed", False)),
        )


@dataclass
class ValidationResult:
    """Outcome of checking a submitted code."""
    success: bool
    reason: Optional[FailureReason] = None
    message: Optional[str] = None
    attempts_remaining: Optional[int] = None

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(success=True)

    @classmethod
    def failure(
        cls,
        reason: FailureReason,
        message: str,
        attempts_remaining: Optional[int] = None,
    ) -> "ValidationResult":
        return cls(
            success=False,
            reason=reason,
            message=message,
            attempts_remaining=attempts_remaining,
        )

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {"success": self.success}
        if self.message is not None:
            result["message"] = self.message
        return result
