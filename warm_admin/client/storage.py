# warm_admin/client/storage.py
"""
Client-local key/value storage for the admin session.

The login form and the API client only talk to the KeyValueStorage
interface, so tests swap in MemoryStorage.
"""
import json
import logging
import os
import tempfile
import threading
from pathlib import Path
from typing import Dict, Iterable, Optional

log = logging.getLogger("warm_admin.storage")

ADMIN_TOKEN_KEY = "adminToken"
ADMIN_USER_KEY = "adminUser"


class KeyValueStorage:
    """String keys to string values. `set_many` must be all-or-nothing."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        self.set_many({key: value})

    def set_many(self, items: Dict[str, str]) -> None:
        raise NotImplementedError

    def remove(self, *keys: str) -> None:
        raise NotImplementedError


class MemoryStorage(KeyValueStorage):
    """In-process storage; used in tests and short-lived scripts."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})
        self.writes = 0

    def get(self, key):
        return self._data.get(key)

    def set_many(self, items):
        self._data.update({key: str(value) for key, value in items.items()})
        self.writes += 1

    def remove(self, *keys):
        for key in keys:
            self._data.pop(key, None)

    def snapshot(self) -> Dict[str, str]:
        return dict(self._data)


class JsonFileStorage(KeyValueStorage):
    """
    Durable storage in a single JSON file.

    Every write replaces the whole file atomically (temp file + os.replace),
    so the token and profile always land together.
    """

    def __init__(self, path):
        self.path = Path(path)
        self._lock = threading.Lock()

    def _load(self) -> Dict[str, str]:
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            log.warning(f"Ignoring unreadable storage file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _dump(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_path = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, ensure_ascii=False)
            os.replace(tmp_path, self.path)
        except BaseException:
            os.unlink(tmp_path)
            raise

    def get(self, key):
        return self._load().get(key)

    def set_many(self, items):
        with self._lock:
            data = self._load()
            data.update({key: str(value) for key, value in items.items()})
            self._dump(data)

    def remove(self, *keys: str):
        with self._lock:
            data = self._load()
            if not any(key in data for key in keys):
                return
            for key in keys:
                data.pop(key, None)
            self._dump(data)

    def keys(self) -> Iterable[str]:
        return self._load().keys()
