"""
Clock
=====
Injectable time source so expiry can be simulated without sleeping.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional

Clock = Callable[[], datetime]


def system_clock() -> datetime:
    """Current UTC time."""
    return datetime.now(timezone.utc)


def to_epoch_ms(value: datetime) -> int:
    return int(value.timestamp() * 1000)


def from_epoch_ms(value: int) -> datetime:
    """
    Convert epoch milliseconds to an aware UTC datetime.

    Raises:
        ValueError: the timestamp is outside the platform's representable range
    """
    try:
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    except (OverflowError, OSError) as e:
        raise ValueError(f"epoch-ms out of range: {value}") from e


class ManualClock:
    """
    Clock that only moves when told to.

    For development and testing only.
    """

    def __init__(self, start: Optional[datetime] = None):
        self._now = start or datetime(2026, 1, 1, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self._now

    def advance(self, seconds: float) -> datetime:
        """Move time forward and return the new now."""
        self._now = self._now + timedelta(seconds=seconds)
        return self._now

    def set(self, value: datetime) -> None:
        self._now = value
