"""
Login Flow
==========
Step orchestration on top of the OTP engine and session manager.
"""

from .models import FlowStep, FlowState
from .validation import is_valid_email, is_well_formed_code
from .controller import FlowController

__all__ = [
    "FlowStep",
    "FlowState",
    "is_valid_email",
    "is_well_formed_code",
    "FlowController",
]
