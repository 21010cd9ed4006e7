import threading
import time
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Optional

from cachetools import TLRUCache


@dataclass(frozen=True)
class CachePolicy:
    """Residency rules for a cache entry, in seconds.

    ``absolute_ttl`` is counted from insertion and never extended.
    ``sliding_ttl`` is counted from the last read; when both are set the
    entry is evicted by whichever limit is reached first.
    """

    absolute_ttl: float
    sliding_ttl: Optional[float] = None


@dataclass(frozen=True)
class _CacheEntry:
    value: Any
    expires_at: float
    sliding_ttl: Optional[float]


def _time_to_use(key: Hashable, entry: _CacheEntry, now: float) -> float:
    if entry.sliding_ttl is None:
        return entry.expires_at
    return min(entry.expires_at, now + entry.sliding_ttl)


class MemoryCache:
    """Process-local key/value cache with absolute and sliding expiration.

    Entries are kept in a ``cachetools.TLRUCache`` so the number of resident
    entries is bounded; the least recently used entry goes first when the
    cache is full. Every operation is atomic, but there is no locking around
    the load that produces a value: two concurrent misses may both compute
    and both store, and the last ``set`` wins.
    """

    def __init__(self, maxsize: int = 1024, timer: Callable[[], float] = time.monotonic):
        self._timer = timer
        self._store = TLRUCache(maxsize=maxsize, ttu=_time_to_use, timer=timer)
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            entry = self._store.get(key)
            if entry is None:
                return None
            if entry.sliding_ttl is not None:
                # re-inserting recomputes the deadline from the current time
                self._store[key] = entry
            return entry.value

    def set(self, key: str, value: Any, policy: CachePolicy) -> None:
        if value is None:
            raise ValueError("None cannot be cached")
        if policy.absolute_ttl <= 0:
            raise ValueError("absolute_ttl must be positive")
        if policy.sliding_ttl is not None and policy.sliding_ttl <= 0:
            raise ValueError("sliding_ttl must be positive")

        with self._lock:
            now = self._timer()
            self._store[key] = _CacheEntry(
                value=value,
                expires_at=now + policy.absolute_ttl,
                sliding_ttl=policy.sliding_ttl,
            )

    def remove(self, key: str) -> None:
        with self._lock:
            self._store.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._store

    def __len__(self) -> int:
        with self._lock:
            self._store.expire()
            return len(self._store)
