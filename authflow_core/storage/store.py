"""
Auth Store
==========
Typed JSON access to the persisted OTP map, session record, event log
and pending-identity marker.

Reads never raise: a storage fault or malformed JSON reads as absent.
OTP, session and marker writes raise ``StorageUnavailable``. Event log
writes are logged and swallowed so a broken audit trail never blocks
authentication.
"""

import asyncio
import json
from typing import Any, Callable, Dict, List, Optional

import structlog

from ..config import AuthFlowConfig
from ..exceptions import StorageUnavailable
from .base import StorageAdapter

logger = structlog.get_logger(__name__)


class AuthStore:
    """
    Record-level access on top of a ``StorageAdapter``.

    Every identity shares the one OTP map key, so each read-modify-write of
    the map (and of the event log) runs under a store-wide lock.
    """

    def __init__(self, adapter: StorageAdapter, config: Optional[AuthFlowConfig] = None):
        self.adapter = adapter
        self.config = config or AuthFlowConfig()
        self._otp_lock = asyncio.Lock()
        self._events_lock = asyncio.Lock()

    async def _read_json(self, key: str, strict: bool = False) -> Any:
        """
        Load and decode a JSON value.

        Args:
            key: Storage key
            strict: Propagate ``StorageUnavailable`` instead of reading as absent

        Returns:
            Decoded value, or None if absent, unreadable or malformed
        """
        try:
            raw = await self.adapter.get(key)
        except StorageUnavailable as e:
            if strict:
                raise
            logger.warning("Storage read failed, treating as absent", key=key, error=str(e))
            return None
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except (TypeError, ValueError):
            logger.warning("Malformed JSON in storage, treating as absent", key=key)
            return None

    async def _write_json(self, key: str, value: Any) -> None:
        await self.adapter.set(key, json.dumps(value))

    # --- OTP map -----------------------------------------------------------

    async def load_otp_map(self, strict: bool = False) -> Dict[str, Dict[str, Any]]:
        data = await self._read_json(self.config.otp_key, strict=strict)
        if not isinstance(data, dict):
            return {}
        return data

    async def get_otp(self, identity: str) -> Optional[Dict[str, Any]]:
        record = (await self.load_otp_map()).get(identity)
        return record if isinstance(record, dict) else None

    async def put_otp(self, identity: str, record: Dict[str, Any]) -> None:
        """Store the record for identity, replacing any previous one."""
        async with self._otp_lock:
            otp_map = await self.load_otp_map(strict=True)
            otp_map[identity] = record
            await self._write_json(self.config.otp_key, otp_map)

    async def delete_otp(self, identity: str) -> bool:
        """Remove the record for identity. Returns True if one existed."""
        async with self._otp_lock:
            otp_map = await self.load_otp_map(strict=True)
            if identity not in otp_map:
                return False
            del otp_map[identity]
            await self._write_json(self.config.otp_key, otp_map)
            return True

    async def prune_otp_map(self, keep: Callable[[Any], bool]) -> int:
        """
        Drop every record for which ``keep`` returns False.

        Returns:
            Number of records removed
        """
        async with self._otp_lock:
            otp_map = await self.load_otp_map(strict=True)
            kept = {identity: data for identity, data in otp_map.items() if keep(data)}
            removed = len(otp_map) - len(kept)
            if removed:
                await self._write_json(self.config.otp_key, kept)
            return removed

    # --- Session -----------------------------------------------------------

    async def load_session(self) -> Optional[Dict[str, Any]]:
        data = await self._read_json(self.config.session_key)
        return data if isinstance(data, dict) else None

    async def put_session(self, record: Dict[str, Any]) -> None:
        await self._write_json(self.config.session_key, record)

    async def delete_session(self) -> None:
        await self.adapter.remove(self.config.session_key)

    # --- Event log ---------------------------------------------------------

    async def append_event(self, event: Dict[str, Any]) -> bool:
        """
        Append to the event log.

        Returns:
            False if the write failed (the failure is logged, not raised)
        """
        try:
            async with self._events_lock:
                history = await self._read_json(self.config.events_key, strict=True)
                if not isinstance(history, list):
                    history = []
                history.append(event)
                await self._write_json(self.config.events_key, history)
        except StorageUnavailable as e:
            logger.error("Failed to log event", event_name=event.get("name"), error=str(e))
            return False
        return True

    async def load_events(self) -> List[Dict[str, Any]]:
        data = await self._read_json(self.config.events_key)
        return data if isinstance(data, list) else []

    # --- Pending-identity marker -------------------------------------------

    async def get_pending_identity(self) -> Optional[str]:
        try:
            value = await self.adapter.get(self.config.pending_key)
        except StorageUnavailable as e:
            logger.warning("Pending marker read failed", error=str(e))
            return None
        return value or None

    async def set_pending_identity(self, identity: str) -> None:
        await self.adapter.set(self.config.pending_key, identity)

    async def clear_pending_identity(self) -> None:
        await self.adapter.remove(self.config.pending_key)
