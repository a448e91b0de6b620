"""
Session Module
==============
Authenticated session lifecycle.
"""

from .models import Session, format_duration
from .manager import SessionManager

__all__ = [
    "Session",
    "format_duration",
    "SessionManager",
]
