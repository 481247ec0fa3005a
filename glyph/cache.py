"""Least-recently-used cache of font metrics."""

from __future__ import annotations

from collections import OrderedDict
from dataclasses import dataclass


@dataclass(frozen=True)
class FontMetricsEntry:
    """Cached font metrics, in Pango units."""

    ascent: int = 0
    descent: int = 0
    line_gap: int = 0


class MetricsCache:
    """LRU cache of :class:`FontMetricsEntry` keyed by integer. Not thread-safe."""

    def __init__(self, capacity: int = 256) -> None:
        self.capacity = capacity
        self._entries: OrderedDict[int, FontMetricsEntry] = OrderedDict()

    def get(self, key: int) -> FontMetricsEntry | None:
        """Return the entry for ``key`` and mark it most recent, or None."""
        entry = self._entries.get(key)
        if entry is not None:
            self._entries.move_to_end(key)
        return entry

    def put(self, key: int, entry: FontMetricsEntry) -> None:
        """Store ``entry``, evicting the least recently used one when full."""
        if key in self._entries:
            self._entries[key] = entry
            self._entries.move_to_end(key)
            return
        if len(self._entries) >= self.capacity and self._entries:
            self._entries.popitem(last=False)
        self._entries[key] = entry

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries