"""
Audit Event Types
=================
Names of the events written to the append-only log.
"""

from enum import Enum


class EventName(str, Enum):
    """Audit event names emitted by the OTP engine and session manager."""
    # OTP
    OTP_GENERATED = "OTP_GENERATED"
    OTP_VALIDATED = "OTP_VALIDATED"
    OTP_VALIDATION_FAILED = "OTP_VALIDATION_FAILED"

    # Session
    SESSION_START = "SESSION_START"
    SESSION_END = "SESSION_END"
