"""
AuthFlow Configuration
======================
Configuration for OTP lifetimes, attempt limits and storage keys.
"""

import os
from dataclasses import dataclass, field


def _env_bool(name: str, default: bool = False) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class AuthFlowConfig:
    """Configuration for the OTP login flow."""
    otp_validity_seconds: int = field(
        default_factory=lambda: int(os.environ.get("AUTHFLOW_OTP_VALIDITY_SECONDS", "60"))
    )
    max_attempts: int = field(
        default_factory=lambda: int(os.environ.get("AUTHFLOW_OTP_MAX_ATTEMPTS", "3"))
    )
    key_prefix: str = field(
        default_factory=lambda: os.environ.get("AUTHFLOW_KEY_PREFIX", "pa")
    )
    log_level: str = field(
        default_factory=lambda: os.environ.get("AUTHFLOW_LOG_LEVEL", "INFO")
    )
    log_json: bool = field(
        default_factory=lambda: _env_bool("AUTHFLOW_LOG_JSON")
    )

    @classmethod
    def from_env(cls) -> "AuthFlowConfig":
        """Build a config from the current environment."""
        return cls()

    @property
    def session_key(self) -> str:
        return f"{self.key_prefix}_sessions"

    @property
    def otp_key(self) -> str:
        return f"{self.key_prefix}_otp_data"

    @property
    def events_key(self) -> str:
        return f"{self.key_prefix}_events"

    @property
    def pending_key(self) -> str:
        return f"{self.key_prefix}_pending_email"
