"""Local key/value storage backed by a single JSON file.

Behaves like a browser's ``localStorage``: string keys map to string
values, and every mutation rewrites the whole file.
"""

from __future__ import annotations

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_STORAGE_PATH = os.path.join(
    os.path.expanduser("~"), ".prayer-calendar-storage.json")


class LocalStorage:
    """String-to-string store persisted as one JSON object."""

    def __init__(self, path: str = DEFAULT_STORAGE_PATH) -> None:
        self.path = path
        self._items: dict[str, str] = self._read()

    def _read(self) -> dict[str, str]:
        if not os.path.exists(self.path):
            logger.debug("No storage file at %s, starting empty", self.path)
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Storage file {self.path} does not hold a JSON object")
        logger.debug("Loaded %d storage keys from %s", len(data), self.path)
        return {str(k): str(v) for k, v in data.items()}

    def _write(self) -> None:
        parent = os.path.dirname(self.path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        tmp = self.path + ".tmp"
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(self._items, f, indent=2)
        os.replace(tmp, self.path)

    # -------- localStorage API --------
    def get_item(self, key: str) -> str | None:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value
        self._write()

    def remove_item(self, key: str) -> None:
        if self._items.pop(key, None) is not None:
            self._write()

    def keys(self) -> list[str]:
        return list(self._items)
