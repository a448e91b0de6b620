"""
JSON File Storage
=================
Single-file on-disk store, the equivalent of an app's local notebook.
"""

import asyncio
import json
import os
import tempfile
from pathlib import Path
from typing import Dict, Optional, Union

import structlog

from ..exceptions import StorageUnavailable
from .base import StorageAdapter

logger = structlog.get_logger(__name__)


class JsonFileStorage(StorageAdapter):
    """
    Keeps every key in one JSON object file.

    A missing or undecodable file reads as an empty store. Writes replace
    the file atomically via a temp file in the same directory. File I/O runs
    in the default executor so the event loop is never blocked.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._lock = asyncio.Lock()

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                data = json.load(fh)
        except ValueError:
            # JSONDecodeError and UnicodeDecodeError
            logger.warning("Storage file is corrupt, treating as empty", path=str(self.path))
            return {}
        except OSError as e:
            raise StorageUnavailable(f"Cannot read {self.path}: {e}", cause=e) from e
        if not isinstance(data, dict):
            logger.warning("Storage file is not an object, treating as empty", path=str(self.path))
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _write_all(self, data: Dict[str, str]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=str(self.path.parent), suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(data, fh)
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            raise StorageUnavailable(f"Cannot write {self.path}: {e}", cause=e) from e

    def _set_sync(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        self._write_all(data)

    def _remove_sync(self, key: str) -> None:
        data = self._read_all()
        if key in data:
            del data[key]
            self._write_all(data)

    async def get(self, key: str) -> Optional[str]:
        loop = asyncio.get_running_loop()
        async with self._lock:
            data = await loop.run_in_executor(None, self._read_all)
        return data.get(key)

    async def set(self, key: str, value: str) -> None:
        loop = asyncio.get_running_loop()
        async with self._lock:
            await loop.run_in_executor(None, self._set_sync, key, value)

    async def remove(self, key: str) -> None:
        loop = asyncio.get_running_loop()
        async with self._lock:
            await loop.run_in_executor(None, self._remove_sync, key)
