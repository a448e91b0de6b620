"""
Event Log
=========
Append-only audit trail kept in the key-value store.
"""

from typing import Any, Dict, List, Union

import structlog

from ..clock import Clock, system_clock
from ..storage.store import AuthStore
from .event_types import EventName
from .models import Event

logger = structlog.get_logger(__name__)


class EventLog:
    """
    Write side of the audit trail.

    Persisting an event never raises; core logic does not read the log back.
    """

    def __init__(self, store: AuthStore, clock: Clock = system_clock):
        self.store = store
        self.clock = clock

    async def log(self, name: Union[EventName, str], **details: Any) -> Event:
        """
        Record an event.

        Args:
            name: Event name
            **details: Event payload

        Returns:
            The recorded Event (returned even if persisting it failed)
        """
        name_str = name.value if isinstance(name, EventName) else name
        event = Event(name=name_str, timestamp=self.clock(), details=details)

        logger.info("Event", event_name=name_str, **details)

        await self.store.append_event(event.to_dict())
        return event

    async def history(self) -> List[Dict[str, Any]]:
        """Persisted events, oldest first. Diagnostics only."""
        return await self.store.load_events()
