"""Bounded most-recent-first calculation history."""

from __future__ import annotations

import logging

from taxestimator.config.schema import (
    DEFAULT_HISTORY_KEY,
    MAX_HISTORY_ENTRIES,
    HistoryEntry,
    HistorySettings,
)
from taxestimator.history.backends import KeyValueStore
from taxestimator.io.serialize import dump_history, load_history

logger = logging.getLogger(__name__)


class HistoryStore:
    """In-memory history list mirrored to a key-value store.

    The list is kept most-recent-first and never exceeds ``max_entries``.
    Every mutation rewrites the whole list under ``key``.
    """

    def __init__(
        self,
        store: KeyValueStore,
        key: str = DEFAULT_HISTORY_KEY,
        max_entries: int = MAX_HISTORY_ENTRIES,
    ) -> None:
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self._store = store
        self._key = key
        self._max_entries = max_entries
        self._entries: list[HistoryEntry] = []

    @classmethod
    def open(
        cls,
        store: KeyValueStore,
        settings: HistorySettings | None = None,
    ) -> HistoryStore:
        """Create a history store and load persisted entries."""
        if settings is None:
            settings = HistorySettings()
        history = cls(store, key=settings.key, max_entries=settings.max_entries)
        history.load()
        return history

    @property
    def entries(self) -> tuple[HistoryEntry, ...]:
        """Snapshot of entries, most recent first."""
        return tuple(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def load(self) -> list[HistoryEntry]:
        """Replace the in-memory list with the persisted one.

        Absent or malformed content yields an empty history.
        """
        raw = self._store.get(self._key)
        if raw is None:
            self._entries = []
            return []
        try:
            entries = load_history(raw)
        except ValueError as exc:
            logger.warning("Discarding malformed history under %r: %s", self._key, exc)
            entries = []
        self._entries = entries[: self._max_entries]
        return list(self._entries)

    def append(self, entry: HistoryEntry) -> None:
        """Prepend ``entry``, drop the oldest beyond the cap, and persist."""
        self._entries.insert(0, entry)
        del self._entries[self._max_entries :]
        self._store.set(self._key, dump_history(self._entries))

    def clear(self) -> None:
        """Empty the history and remove it from the store."""
        self._entries = []
        self._store.remove(self._key)
