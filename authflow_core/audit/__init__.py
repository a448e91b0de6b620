"""
Audit Logging Module
====================
Append-only event log for OTP and session activity.
"""

from .event_types import EventName
from .models import Event
from .logger import EventLog

__all__ = [
    "EventName",
    "Event",
    "EventLog",
]
