"""
Storage Module
==============
Key-value storage adapters and typed record access.
"""

from .base import StorageAdapter
from .in_memory import InMemoryStorage
from .json_file import JsonFileStorage
from .redis_storage import RedisStorage
from .store import AuthStore

__all__ = [
    # Contract
    "StorageAdapter",
    # Adapters
    "InMemoryStorage",
    "JsonFileStorage",
    "RedisStorage",
    # Records
    "AuthStore",
]
