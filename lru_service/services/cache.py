import enum
import logging
from dataclasses import dataclass
from threading import Lock
from typing import Any, Dict, Hashable, Iterator, Tuple

from .recency import RecencyList

logger = logging.getLogger(__name__)


class InvalidCapacity(ValueError):
    """Raised when a cache is constructed with a capacity below 1."""


class _Missing(enum.Enum):
    MISSING = "MISSING"

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING = _Missing.MISSING


@dataclass(frozen=True)
class CacheStats:
    capacity: int
    size: int
    hits: int
    misses: int
    evictions: int


class LRUCache:
    """Threadsafe fixed-capacity LRU cache.

    Keys map to handles into a ``RecencyList``; every operation holds a single
    lock so lookup-then-promote and insert-then-evict run as one unit.
    ``get`` returns ``MISSING`` for absent keys, which cannot collide with a
    stored value.
    """

    def __init__(self, capacity: int = 256):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
            raise InvalidCapacity(f"Cache capacity must be a positive integer, got {capacity!r}")
        self._capacity = capacity
        self._index: Dict[Hashable, int] = {}
        self._entries = RecencyList()
        self._lock = Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def eviction_count(self) -> int:
        return self._evictions

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, key: Hashable) -> bool:
        with self._lock:
            return key in self._index

    def get(self, key: Hashable, default: Any = MISSING) -> Any:
        with self._lock:
            handle = self._index.get(key)
            if handle is None:
                self._misses += 1
                return default
            self._entries.move_to_front(handle)
            self._hits += 1
            return self._entries.value(handle)

    def peek(self, key: Hashable, default: Any = MISSING) -> Any:
        """Return the value for ``key`` without refreshing its recency."""

        with self._lock:
            handle = self._index.get(key)
            if handle is None:
                return default
            return self._entries.value(handle)

    def put(self, key: Hashable, value: Any) -> Any:
        if value is MISSING:
            raise ValueError("MISSING cannot be stored as a cache value")
        with self._lock:
            handle = self._index.get(key)
            if handle is not None:
                self._entries.set_value(handle, value)
                self._entries.move_to_front(handle)
                return value
            if len(self._index) >= self._capacity:
                self._evict()
            self._index[key] = self._entries.push_front(key, value)
            return value

    def items(self) -> Iterator[Tuple[Hashable, Any]]:
        """Yield ``(key, value)`` pairs from most to least recently used."""

        with self._lock:
            snapshot = list(self._entries)
        yield from snapshot

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                capacity=self._capacity,
                size=len(self._index),
                hits=self._hits,
                misses=self._misses,
                evictions=self._evictions,
            )

    def clear(self) -> None:
        with self._lock:
            self._index.clear()
            self._entries.clear()

    def _evict(self) -> None:
        handle = self._entries.back()
        key, _ = self._entries.remove(handle)
        del self._index[key]
        self._evictions += 1
        logger.debug("Evicted key %r (capacity=%d)", key, self._capacity)
