"""In-memory membership cache for station collections."""

from __future__ import annotations


class MembershipCache:
    """Remember whether a storage key is present in a collection.

    The cache is never the system of record.  Entries are written by the
    owning store after the backend has accepted a change, or after a
    scan of the backend on a miss.
    """

    def __init__(self) -> None:
        self._entries: dict[str, bool] = {}

    def lookup(self, key: str) -> bool | None:
        """Cached presence of *key*, or ``None`` on a miss."""
        return self._entries.get(key)

    def mark(self, key: str, present: bool) -> None:
        self._entries[key] = present

    def clear(self) -> None:
        self._entries.clear()
