"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Bounded least-recently-used response cache with optional weight accounting.

The cache runs in one of two modes fixed at construction:

- ``CountBounded``: at most ``max_items`` resident entries.
- ``WeightBounded``: resident weights sum to at most ``max_weight``; each
  value is weighed once on insertion by ``weight_fn``.

Recency is kept by an ``OrderedDict`` (hash map threaded on a doubly linked
list), so refresh and eviction of the oldest entry are both O(1).

The cache takes no lock and never performs I/O. Hosts that call it from
several threads must wrap it in ``SynchronizedCache``.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from typing import Any

from ..errors import CacheConfigError
from .base import CacheEntry, CacheStats, CapacityMode, CountBounded, WeightBounded, WeightFn
from .keys import derive_key

logger = logging.getLogger("edgechat.cache")


class WeightedLRUCache:
    """
    Process-local LRU cache keyed by conversation fingerprint.

    Values are stored and returned by reference. Callers must not mutate a
    returned value in place when weight accounting matters, since weights
    are never recomputed.

    Usage::

        cache = WeightedLRUCache(WeightBounded(max_weight=10, weight_fn=len))
        cache.set("a", "12345")
        cache.set("b", "123456")   # evicts "a"
        cache.stats().current_weight  # 6
    """

    derive_key = staticmethod(derive_key)

    def __init__(self, capacity: CapacityMode) -> None:
        if isinstance(capacity, CountBounded):
            if capacity.max_items < 1:
                raise CacheConfigError("max_items must be at least 1")
        elif isinstance(capacity, WeightBounded):
            if not capacity.max_weight > 0:
                raise CacheConfigError("max_weight must be positive")
            if not callable(capacity.weight_fn):
                raise CacheConfigError("weight_fn must be callable")
        else:
            raise CacheConfigError(
                f"Unsupported cache capacity mode: {type(capacity).__name__}"
            )

        self.capacity = capacity
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        self._current_weight: float = 0

    @classmethod
    def from_options(
        cls,
        *,
        max_items: int | None = None,
        max_weight: float | None = None,
        weight_fn: WeightFn | None = None,
    ) -> "WeightedLRUCache":
        """Build a cache from ``max_items`` or ``max_weight`` + ``weight_fn``."""
        if max_items is not None and (max_weight is not None or weight_fn is not None):
            raise CacheConfigError(
                "max_items and max_weight/weight_fn are mutually exclusive"
            )
        if max_items is not None:
            return cls(CountBounded(max_items=max_items))
        if max_weight is None or weight_fn is None:
            raise CacheConfigError(
                "Provide either max_items, or both max_weight and weight_fn"
            )
        return cls(WeightBounded(max_weight=max_weight, weight_fn=weight_fn))

    @property
    def weighted(self) -> bool:
        return isinstance(self.capacity, WeightBounded)

    @property
    def current_weight(self) -> float:
        return self._current_weight

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def has(self, key: str) -> bool:
        """Return whether ``key`` is resident without touching recency."""
        return key in self._entries

    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value and mark it most recently used."""
        entry = self._entries.get(key)
        if entry is None:
            return default
        self._entries.move_to_end(key)
        return entry.value

    def set(self, key: str, value: Any) -> None:
        """
        Store ``value`` under ``key``, evicting least recently used entries.

        In weight mode a value heavier than ``max_weight`` is refused and any
        entry already stored under ``key`` is dropped. The refusal is silent.
        """
        capacity = self.capacity
        weight: float = 0
        if isinstance(capacity, WeightBounded):
            weight = capacity.weight_fn(value)
            if weight > capacity.max_weight:
                logger.debug(
                    "Refusing oversized cache value (key_len=%d, weight=%s, max_weight=%s)",
                    len(key),
                    weight,
                    capacity.max_weight,
                )
                self._discard(key)
                return

        # Replacing a key releases its old slot and weight before fitting.
        self._discard(key)
        while self._entries and not self._fits(weight):
            self._evict_oldest()

        self._entries[key] = CacheEntry(key=key, value=value, weight=weight)
        self._current_weight += weight

    def delete(self, key: str) -> bool:
        """Remove ``key`` if resident. Returns whether an entry was removed."""
        return self._discard(key)

    def clear(self) -> None:
        """Drop every entry and reset weight accounting."""
        self._entries.clear()
        self._current_weight = 0

    def keys(self) -> list[str]:
        """Snapshot of resident keys, least recently used first."""
        return list(self._entries)

    def stats(self) -> CacheStats:
        """Return occupancy figures for the configured mode."""
        capacity = self.capacity
        if isinstance(capacity, WeightBounded):
            return CacheStats(
                count=len(self._entries),
                current_weight=self._current_weight,
                max_weight=capacity.max_weight,
            )
        return CacheStats(count=len(self._entries), max_items=capacity.max_items)

    def _fits(self, weight: float) -> bool:
        capacity = self.capacity
        if isinstance(capacity, WeightBounded):
            return self._current_weight + weight <= capacity.max_weight
        return len(self._entries) < capacity.max_items

    def _release(self, weight: float) -> None:
        # An empty cache weighs exactly 0, whatever float residue the running sum holds.
        if self._entries:
            self._current_weight -= weight
        else:
            self._current_weight = 0

    def _discard(self, key: str) -> bool:
        entry = self._entries.pop(key, None)
        if entry is None:
            return False
        self._release(entry.weight)
        return True

    def _evict_oldest(self) -> None:
        _, entry = self._entries.popitem(last=False)
        self._release(entry.weight)
        logger.debug(
            "Evicted cache entry (weight=%s, resident=%d)",
            entry.weight,
            len(self._entries),
        )
