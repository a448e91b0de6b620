"""
In-Memory Storage
=================
Dict-backed storage adapter for development and testing.
"""

from typing import Dict, Optional, Set

from ..exceptions import StorageUnavailable
from .base import StorageAdapter


class InMemoryStorage(StorageAdapter):
    """
    Simple in-memory key-value store.

    For development and testing only.
    Set ``fail_reads`` / ``fail_writes`` to simulate a broken backend, or add
    keys to ``fail_write_keys`` to break writes for those keys only.
    """

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self.fail_reads = False
        self.fail_writes = False
        self.fail_write_keys: Set[str] = set()

    async def get(self, key: str) -> Optional[str]:
        if self.fail_reads:
            raise StorageUnavailable("Storage read failed", key=key)
        return self._data.get(key)

    async def set(self, key: str, value: str) -> None:
        if self.fail_writes or key in self.fail_write_keys:
            raise StorageUnavailable("Storage write failed", key=key)
        self._data[key] = value

    async def remove(self, key: str) -> None:
        if self.fail_writes or key in self.fail_write_keys:
            raise StorageUnavailable("Storage remove failed", key=key)
        self._data.pop(key, None)

    def snapshot(self) -> Dict[str, str]:
        """Copy of the raw stored strings."""
        return dict(self._data)
