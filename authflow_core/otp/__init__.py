"""
OTP Generation and Verification
================================
Time-boxed numeric codes with attempt limiting and burn-after-use.
"""

from .models import (
    FailureReason,
    OtpRecord,
    ValidationResult,
    NoPendingCode,
    CodeExpired,
    AttemptsExhausted,
    CodeIncorrect,
)
from .codes import generate_code, CODE_MIN, CODE_MAX
from .engine import OtpEngine

__all__ = [
    # Models
    "FailureReason",
    "OtpRecord",
    "ValidationResult",
    "NoPendingCode",
    "CodeExpired",
    "AttemptsExhausted",
    "CodeIncorrect",
    # Codes
    "generate_code",
    "CODE_MIN",
    "CODE_MAX",
    # Engine
    "OtpEngine",
]
