"""
AuthFlow Core Library
=====================
Passwordless email OTP login: code issuance, validation and sessions.
"""

__version__ = "0.1.0"

# Config
from authflow_core.config import AuthFlowConfig
from authflow_core.clock import Clock, ManualClock, system_clock
from authflow_core.logging_config import setup_logging

# Errors
from authflow_core.exceptions import AuthFlowError, StorageUnavailable, InvalidIdentity

# Storage
from authflow_core.storage import (
    StorageAdapter,
    InMemoryStorage,
    JsonFileStorage,
    RedisStorage,
    AuthStore,
)

# Audit
from authflow_core.audit import EventName, Event, EventLog

# OTP
from authflow_core.otp import (
    FailureReason,
    OtpRecord,
    ValidationResult,
    NoPendingCode,
    CodeExpired,
    AttemptsExhausted,
    CodeIncorrect,
    generate_code,
    OtpEngine,
)

# Session
from authflow_core.session import Session, SessionManager, format_duration

# Flow
from authflow_core.flow import FlowStep, FlowState, FlowController

# Wiring
from authflow_core.locking import KeyedLock
from authflow_core.factory import AuthFlow, create_auth_flow

__all__ = [
    # Config
    "AuthFlowConfig",
    "Clock",
    "ManualClock",
    "system_clock",
    "setup_logging",
    # Errors
    "AuthFlowError",
    "StorageUnavailable",
    "InvalidIdentity",
    # Storage
    "StorageAdapter",
    "InMemoryStorage",
    "JsonFileStorage",
    "RedisStorage",
    "AuthStore",
    # Audit
    "EventName",
    "Event",
    "EventLog",
    # OTP
    "FailureReason",
    "OtpRecord",
    "ValidationResult",
    "NoPendingCode",
    "CodeExpired",
    "AttemptsExhausted",
    "CodeIncorrect",
    "generate_code",
    "OtpEngine",
    # Session
    "Session",
    "SessionManager",
    "format_duration",
    # Flow
    "FlowStep",
    "FlowState",
    "FlowController",
    # Wiring
    "KeyedLock",
    "AuthFlow",
    "create_auth_flow",
]
