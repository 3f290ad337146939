"""In-process result cache shared by all lookups."""

import threading
from collections import OrderedDict
from typing import Any


class ResultCache:
    """Bounded, thread-safe LRU cache of translated descriptions.

    Keys are lookup keys (normalized creature names), values are the final
    translated descriptions. The most recently used entry sits at the end
    of the underlying ``OrderedDict``; eviction pops from the front.

    The lock is held only for the duration of a single ``get`` or ``put``,
    never across an upstream call.

    Example:
        ```python
        cache = ResultCache(capacity=2)
        cache.put("pikachu", "...")
        cache.get("pikachu")  # "..."
        ```
    """

    def __init__(self, capacity: int) -> None:
        """Initialize the cache.

        Args:
            capacity: Maximum number of entries. Zero disables caching.

        Raises:
            ValueError: If capacity is negative
        """
        if capacity < 0:
            raise ValueError(f"Cache capacity must be zero or positive, got {capacity}")

        self._capacity = capacity
        self._entries: OrderedDict[str, str] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get(self, key: str) -> str | None:
        """Return the cached description and mark it most recently used.

        Args:
            key: The lookup key

        Returns:
            The cached description, or None on a miss
        """
        with self._lock:
            value = self._entries.get(key)
            if value is None:
                self._misses += 1
                return None

            self._entries.move_to_end(key)
            self._hits += 1
            return value

    def put(self, key: str, description: str) -> None:
        """Insert or overwrite an entry, evicting the LRU entry when full.

        Args:
            key: The lookup key
            description: The translated description to cache
        """
        if self._capacity == 0:
            return

        with self._lock:
            self._entries[key] = description
            self._entries.move_to_end(key)
            if len(self._entries) > self._capacity:
                self._entries.popitem(last=False)

    def hit_count(self) -> int:
        """Number of ``get`` calls served from the cache."""
        with self._lock:
            return self._hits

    def miss_count(self) -> int:
        """Number of ``get`` calls that missed."""
        with self._lock:
            return self._misses

    def stats(self) -> dict[str, Any]:
        """Get cache statistics.

        Returns:
            Dictionary with capacity, size, hits, misses and hit rate
        """
        with self._lock:
            total = self._hits + self._misses
            return {
                "capacity": self._capacity,
                "size": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": self._hits / total if total else 0.0,
            }

    @property
    def capacity(self) -> int:
        """Maximum number of entries."""
        return self._capacity

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
