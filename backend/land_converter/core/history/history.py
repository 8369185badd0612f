"""Session-only conversion history for the desktop form.

Entries live in memory for the lifetime of the process and are never
written to disk.

Usage:
    history = ConversionHistory(limit=100)
    history.append("1.000000 ropani is equal to 15.997484 aana")
    history.entries()
"""

from __future__ import annotations

from collections import deque
from typing import Optional


class ConversionHistory:
    """Bounded, oldest-first log of conversions the user chose to record.

    When the limit is reached the oldest entry is dropped.
    """

    def __init__(self, limit: Optional[int] = None) -> None:
        if limit is not None and limit < 1:
            raise ValueError("history limit must be a positive integer.")
        self._entries: deque[str] = deque(maxlen=limit)

    def append(self, entry: str) -> None:
        """Add a rendered conversion to the end of the history.

        Raises:
            ValueError: If the entry is empty or whitespace.
        """
        if not entry.strip():
            raise ValueError("history entry cannot be empty.")
        self._entries.append(entry)

    def entries(self) -> list[str]:
        return list(self._entries)

    def clear(self) -> None:
        self._entries.clear()

    @property
    def limit(self) -> Optional[int]:
        return self._entries.maxlen

    def __len__(self) -> int:
        return len(self._entries)
