"""Copy-on-write mapping shared between reader and writer threads."""

from __future__ import annotations

import threading
from types import MappingProxyType
from typing import Generic, Iterator, Mapping, Optional, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class SnapshotMap(Generic[K, V]):
    """A dict that readers see as a series of immutable snapshots.

    Writers build a new dict under a lock and swap it in with a single
    reference assignment. Readers grab the current snapshot without
    locking, so they observe either the state before a write or the state
    after it, never a mixture.
    """

    def __init__(self, initial: Optional[Mapping[K, V]] = None) -> None:
        self._write_lock = threading.Lock()
        self._snapshot: Mapping[K, V] = MappingProxyType(dict(initial or {}))

    def snapshot(self) -> Mapping[K, V]:
        """Return the current read-only view."""
        return self._snapshot

    def get(self, key: K) -> Optional[V]:
        return self._snapshot.get(key)

    def insert(self, key: K, value: V) -> Optional[V]:
        """Insert or replace ``key``. Returns the value it replaced, if any."""
        with self._write_lock:
            current = self._snapshot
            updated = dict(current)
            updated[key] = value
            self._snapshot = MappingProxyType(updated)
        return current.get(key)

    def remove(self, key: K) -> Optional[V]:
        """Remove ``key`` if present. Returns the removed value, if any."""
        with self._write_lock:
            current = self._snapshot
            if key not in current:
                return None
            updated = dict(current)
            removed = updated.pop(key)
            self._snapshot = MappingProxyType(updated)
        return removed

    def __contains__(self, key: object) -> bool:
        return key in self._snapshot

    def __len__(self) -> int:
        return len(self._snapshot)

    def __iter__(self) -> Iterator[K]:
        return iter(self._snapshot)
