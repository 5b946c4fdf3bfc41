"""A thread-safe least-recently-used cache."""

from __future__ import annotations

import threading
from collections import OrderedDict
from typing import Generic, Hashable, Optional, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class LruCache(Generic[K, V]):
    """Fixed-capacity cache that evicts the least recently used item.

    All operations are guarded by a single lock, so one instance may be
    shared between threads.
    """

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self._capacity = capacity
        # Oldest entry first, most recently used entry last.
        self._store: OrderedDict[K, V] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def capacity(self) -> int:
        """The number of items the cache holds before it starts evicting."""
        return self._capacity

    def get(self, key: K) -> Optional[V]:
        """Return the value for ``key`` and mark it most recently used.

        Returns ``None`` when the key is not cached.
        """
        with self._lock:
            if key not in self._store:
                return None
            self._store.move_to_end(key)
            return self._store[key]

    def get_mru(self) -> Optional[V]:
        """Return the most recently used value, or ``None`` if the cache is empty."""
        with self._lock:
            if not self._store:
                return None
            return self._store[next(reversed(self._store))]

    def put(self, key: K, value: V) -> Optional[V]:
        """Store ``value`` under ``key`` and make it the most recently used item.

        Returns the value previously stored under ``key``, or ``None`` if the
        key is new.  Adding a new key to a full cache first evicts the least
        recently used item.
        """
        with self._lock:
            if key in self._store:
                old_value = self._store[key]
                self._store[key] = value
                self._store.move_to_end(key)
                return old_value

            if len(self._store) >= self._capacity and self._store:
                self._store.popitem(last=False)
            self._store[key] = value
            return None

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: object) -> bool:
        """Report whether ``key`` is cached without changing its recency."""
        with self._lock:
            return key in self._store

    def __repr__(self) -> str:
        return f"{type(self).__name__}(capacity={self._capacity}, size={len(self)})"