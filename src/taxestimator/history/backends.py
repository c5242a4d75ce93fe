"""Key-value backends for persisted history."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """String key-value storage with get/set/remove by key."""

    def get(self, key: str) -> str | None:
        """Stored value, or None if the key is absent."""
        ...

    def set(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing prior content."""
        ...

    def remove(self, key: str) -> None:
        """Delete ``key``; no-op if absent."""
        ...


class InMemoryStore:
    """Dict-backed store for tests and embedding."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def __contains__(self, key: object) -> bool:
        return key in self._data


class JsonFileStore:
    """A JSON object file mapping keys to string values.

    Every write replaces the whole file through a temporary file in the
    same directory, so readers never see a partial write.
    """

    def __init__(self, path: Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text())
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable store file %s: %s", self._path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring store file %s: expected a JSON object", self._path)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=f".{self._path.name}.")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(data, f, indent=2, sort_keys=True)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get(self, key: str) -> str | None:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self._write(data)

    def remove(self, key: str) -> None:
        data = self._read()
        if key in data:
            del data[key]
            self._write(data)
