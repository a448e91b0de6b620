"""
Audit Models
=============
Data model for audit log entries.
"""

from datetime import datetime
from typing import Dict, Any
from dataclasses import dataclass, field


@dataclass
class Event:
    """An append-only audit log entry."""
    name: str
    timestamp: datetime
    details: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the persisted shape."""
        return {
            "name": self.name,
            "details": dict(self.details),
            "timestamp": self.timestamp.isoformat(),
        }
