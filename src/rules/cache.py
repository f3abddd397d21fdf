"""Time-expiring cache for parsed model rules.

Owned by a RuleStore instance. The clock is injectable so tests can move
time forward deterministically instead of sleeping.

Entries live while ``clock() < inserted_at + ttl``. An expired entry is
never returned; it stays in place until it is overwritten by a fresh
entry or evicted explicitly.
"""

import time
from dataclasses import dataclass
from typing import Callable, Generic, Optional, TypeVar

T = TypeVar("T")

Clock = Callable[[], float]


@dataclass(frozen=True)
class CacheEntry(Generic[T]):
    """A cached value and the clock reading at insertion.

    Attributes:
        value: Cached payload
        inserted_at: Clock reading when the entry was stored
    """

    value: T
    inserted_at: float


class ExpiringCache(Generic[T]):
    """Per-key cache with a single time-to-live for all entries.

    Example:
        >>> now = [0.0]
        >>> cache = ExpiringCache(ttl_seconds=10, clock=lambda: now[0])
        >>> _ = cache.set("a", 1)
        >>> cache.get("a")
        1
        >>> now[0] = 10.0
        >>> cache.get("a") is None
        True
    """

    def __init__(self, ttl_seconds: float, clock: Clock = time.monotonic):
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be greater than 0")
        self.ttl_seconds = ttl_seconds
        self._clock = clock
        self._entries: dict[str, CacheEntry[T]] = {}

    def _is_fresh(self, entry: CacheEntry[T]) -> bool:
        return self._clock() < entry.inserted_at + self.ttl_seconds

    def get_entry(self, key: str) -> Optional[CacheEntry[T]]:
        """Get the live entry for a key, or None if absent or expired."""
        entry = self._entries.get(key)
        if entry is None or not self._is_fresh(entry):
            return None
        return entry

    def get(self, key: str) -> Optional[T]:
        """Get the live value for a key, or None if absent or expired."""
        entry = self.get_entry(key)
        return entry.value if entry is not None else None

    def set(self, key: str, value: T) -> CacheEntry[T]:
        """Store a value with a fresh timestamp, superseding any previous entry."""
        entry = CacheEntry(value=value, inserted_at=self._clock())
        self._entries[key] = entry
        return entry

    def invalidate(self, key: str) -> bool:
        """Remove one entry. Returns True if something was removed."""
        return self._entries.pop(key, None) is not None

    def clear(self) -> int:
        """Remove all entries. Returns the number removed."""
        count = len(self._entries)
        self._entries.clear()
        return count

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get_entry(key) is not None

    def __len__(self) -> int:
        return len(self._entries)
