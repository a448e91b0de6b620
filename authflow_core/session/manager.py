"""
Session Manager
===============
Issues, reads and tears down the single client session.
"""

from typing import Optional

import structlog

from ..audit import EventLog, EventName
from ..clock import Clock, system_clock
from ..storage.store import AuthStore
from .models import Session

logger = structlog.get_logger(__name__)


class SessionManager:
    """
    Owns the one session slot in storage.

    Creating a session overwrites whatever was there before.
    """

    def __init__(self, store: AuthStore, events: EventLog, clock: Clock = system_clock):
        self.store = store
        self.events = events
        self.clock = clock

    async def create(self, identity: str) -> Session:
        """
        Start a session for identity.

        Raises:
            StorageUnavailable: the session could not be persisted
        """
        session = Session(identity=identity, start_time=self.clock(), active=True)
        await self.store.put_session(session.to_dict())
        await self.events.log(EventName.SESSION_START, identity=identity)
        return session

    async def current(self) -> Optional[Session]:
        """Active session, or None if absent, inactive or unreadable."""
        data = await self.store.load_session()
        if data is None:
            return None
        try:
            session = Session.from_dict(data)
        except (KeyError, TypeError, ValueError, OverflowError):
            logger.warning("Malformed session record, treating as absent")
            return None
        return session if session.active else None

    async def destroy(self) -> None:
        """End the session. Safe to call when none exists."""
        session = await self.current()
        if session is not None:
            await self.events.log(
                EventName.SESSION_END,
                identity=session.identity,
                durationSec=session.elapsed_seconds(self.clock()),
            )
        await self.store.delete_session()
