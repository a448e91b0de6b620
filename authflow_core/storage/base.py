"""
Storage Adapter
===============
Key-value contract every backing store satisfies.
"""

from abc import ABC, abstractmethod
from typing import Optional


class StorageAdapter(ABC):
    """
    Async string key-value store.

    Values are opaque strings; encoding is the caller's concern.
    Implementations raise ``StorageUnavailable`` on backend faults.
    """

    @abstractmethod
    async def get(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""

    @abstractmethod
    async def set(self, key: str, value: str) -> None:
        """Store a value, replacing any previous one."""

    @abstractmethod
    async def remove(self, key: str) -> None:
        """Delete a key. Removing a missing key is not an error."""
