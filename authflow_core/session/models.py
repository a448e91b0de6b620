"""
Session Models
==============
The authenticated session record.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict

from ..clock import from_epoch_ms, to_epoch_ms


@dataclass(frozen=True)
class Session:
    """Proof of authentication for this client. Only one exists at a time."""
    identity: str
    start_time: datetime
    active: bool = True

    def elapsed_seconds(self, now: datetime) -> float:
        return (now - self.start_time).total_seconds()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "identity": self.identity,
            "startTime": to_epoch_ms(self.start_time),
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Session":
        return cls(
            identity=str(data["identity"]),
            start_time=from_epoch_ms(int(data["startTime"])),
            active=bool(data.get("active", False)),
        )


def format_duration(total_seconds: float) -> str:
    """Render seconds as ``M:SS``; negative values show as ``0:00``."""
    seconds = max(0, int(total_seconds))
    minutes, seconds = divmod(seconds, 60)
    return f"{minutes}:{seconds:02d}"
