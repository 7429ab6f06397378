"""Session-scoped key/value storage."""

from __future__ import annotations

import json
import logging
from typing import Any

from tasklist_mcp.errors import SessionStorageError

logger = logging.getLogger(__name__)

AUTH_KEY = "userSession"
TASKS_KEY = "tasks"


class SessionStore:
    """
    In-memory key/value store that lives as long as one session.

    Values are held as JSON-encoded strings, mirroring browser session storage:
    everything written must survive a serialization round trip, and nothing
    outlives the process.

    Args:
        quota_bytes: Maximum total size (UTF-8 bytes of keys + values), or None
    """

    def __init__(self, quota_bytes: int | None = None) -> None:
        self._items: dict[str, str] = {}
        self._quota_bytes = quota_bytes

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)

    def keys(self) -> list[str]:
        return list(self._items)

    def usage_bytes(self) -> int:
        return sum(len(k.encode("utf-8")) + len(v.encode("utf-8")) for k, v in self._items.items())

    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        if self._quota_bytes is not None:
            current = self._items.get(key)
            used = self.usage_bytes()
            if current is not None:
                used -= len(key.encode("utf-8")) + len(current.encode("utf-8"))
            needed = used + len(key.encode("utf-8")) + len(value.encode("utf-8"))
            if needed > self._quota_bytes:
                logger.error(
                    "Session store quota exceeded key=%s needed=%s quota=%s",
                    key,
                    needed,
                    self._quota_bytes,
                )
                raise SessionStorageError(
                    f"Session storage quota exceeded ({needed} > {self._quota_bytes} bytes) writing '{key}'"
                )
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()

    def get_json(self, key: str) -> Any | None:
        """Decode a stored JSON value, or None when the key is absent."""
        raw = self._items.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            raise SessionStorageError(f"Stored value for '{key}' is not valid JSON - {str(e)}") from e

    def set_json(self, key: str, value: Any) -> None:
        """Encode a value as JSON and store it under key."""
        try:
            raw = json.dumps(value, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            logger.exception("Failed to JSON-encode value for key=%s", key)
            raise SessionStorageError(f"Cannot serialize value for '{key}' - {str(e)}") from e
        self.set_item(key, raw)
