"""Bounded, most-recent-first list of committed conversions."""

from __future__ import annotations

from collections.abc import Iterator

from omniconvert.constants import HISTORY_CAPACITY
from omniconvert.history.records import ConversionRecord


class HistoryLedger:
    """Recent conversions, newest at index 0.

    - An entry that repeats the current head (same from value, from
      unit and to unit) is dropped. Only the head is compared, so a
      repeat of an older entry is still inserted.
    - Holds at most ``HISTORY_CAPACITY`` entries; the oldest is
      evicted when full.

    Owned by one session and never shared; no locking.
    """

    capacity = HISTORY_CAPACITY

    def __init__(self) -> None:
        self._entries: list[ConversionRecord] = []

    def record(self, entry: ConversionRecord) -> bool:
        """Insert ``entry`` at the head.

        Returns False if it was collapsed into the existing head.
        """
        if self._entries and self._entries[0].repeats(entry):
            return False
        self._entries.insert(0, entry)
        del self._entries[self.capacity:]
        return True

    def clear(self) -> None:
        self._entries.clear()

    def list(self) -> list[ConversionRecord]:
        """Snapshot of the entries, most recent first."""
        return list(self._entries)

    @property
    def head(self) -> ConversionRecord | None:
        return self._entries[0] if self._entries else None

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ConversionRecord]:
        return iter(self.list())

    def __bool__(self) -> bool:
        return bool(self._entries)
