"""Token and session storage used by the request interceptor.

The client only reads from these stores. Writing tokens and user ids is the
job of whatever handles login in the application.
"""

import json
from pathlib import Path
from typing import Protocol

AUTHORIZATION_TOKEN_KEY = "AuthorizationToken"
USER_ID_KEY = "userId"


class TokenProvider(Protocol):
    def get_token(self) -> str | None: ...


class SessionProvider(Protocol):
    def get_user_id(self) -> str | None: ...


class KeyValueStore(Protocol):
    def get_item(self, key: str) -> str | None: ...


class MemoryStore:
    """Key-value store kept in process memory (session scoped)."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._items: dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = str(value)

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()


class JsonFileStore:
    """Key-value store persisted as a JSON object on disk.

    The file is re-read on every lookup so values written by another process
    are picked up. A missing file reads as an empty store.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    def _load(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        data = json.loads(self._path.read_text(encoding="utf-8") or "{}")
        if not isinstance(data, dict):
            raise ValueError(f"Store file {self._path} does not contain a JSON object")
        return data

    def _save(self, items: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(items), encoding="utf-8")

    def get_item(self, key: str) -> str | None:
        value = self._load().get(key)
        return None if value is None else str(value)

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = str(value)
        self._save(items)

    def remove_item(self, key: str) -> None:
        items = self._load()
        if items.pop(key, None) is not None:
            self._save(items)

    def clear(self) -> None:
        self._save({})


class StoreTokenProvider:
    """Reads the auth token from a key-value store."""

    def __init__(self, store: KeyValueStore, key: str = AUTHORIZATION_TOKEN_KEY) -> None:
        self.store = store
        self.key = key

    def get_token(self) -> str | None:
        return self.store.get_item(self.key)


class StoreSessionProvider:
    """Reads the current user id from a key-value store."""

    def __init__(self, store: KeyValueStore, key: str = USER_ID_KEY) -> None:
        self.store = store
        self.key = key

    def get_user_id(self) -> str | None:
        return self.store.get_item(self.key)


# Process-wide default stores, written by the application and read by the client.
local_storage = MemoryStore()
session_storage = MemoryStore()
