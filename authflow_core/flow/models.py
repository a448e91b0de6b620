"""
Flow Models
===========
Login flow steps and the snapshot handed to the presentation layer.
"""

import math
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from ..otp.models import ValidationResult
from ..session.models import Session


class FlowStep(str, Enum):
    """Where the user is in the login flow."""
    AWAITING_EMAIL = "email"
    AWAITING_CODE = "otp"
    AUTHENTICATED = "session"


@dataclass
class FlowState:
    """What the UI needs to render the current step."""
    step: FlowStep = FlowStep.AWAITING_EMAIL
    identity: Optional[str] = None
    expires_at: Optional[datetime] = None
    attempts: int = 0
    session: Optional[Session] = None
    error: Optional[str] = None
    last_result: Optional[ValidationResult] = None

    def seconds_remaining(self, now: datetime) -> int:
        """Countdown for the resend timer; 0 once the code has expired."""
        if self.expires_at is None:
            return 0
        return max(0, math.ceil((self.expires_at - now).total_seconds()))
