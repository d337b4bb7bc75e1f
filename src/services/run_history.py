"""Bounded in-memory log of recent run invocations."""

from __future__ import annotations

import threading
from collections import deque
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from src.models.run_history import RunHistoryEntry

DEFAULT_CAPACITY = 20


class RunHistory:
    """Keeps the most recent ``capacity`` entries, evicting the oldest first.

    Safe to share between threads running different configs.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            msg = "capacity must be at least 1"
            raise ValueError(msg)
        self.capacity = capacity
        self._entries: deque[RunHistoryEntry] = deque(maxlen=capacity)
        self._lock = threading.Lock()

    def record(self, entry: RunHistoryEntry) -> None:
        with self._lock:
            self._entries.append(entry)

    def recent(self, limit: int | None = None) -> list[RunHistoryEntry]:
        """Return up to ``limit`` entries, newest first."""
        with self._lock:
            entries = list(reversed(self._entries))
        if limit is not None:
            entries = entries[: max(limit, 0)]
        return entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
