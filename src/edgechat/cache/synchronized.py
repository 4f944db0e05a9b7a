"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/synchronized.py.
"""

from __future__ import annotations

from threading import Lock
from typing import Any

from .base import CacheStats, ResponseCache


class SynchronizedCache:
    """
    Serialize every cache operation behind one mutex.

    ``WeightedLRUCache`` assumes a single event loop. Hosts that run cache
    calls on worker threads wrap it here; ``get`` reorders entries, so reads
    are locked as well as writes.
    """

    def __init__(self, inner: ResponseCache) -> None:
        self._inner = inner
        self._lock = Lock()

    @property
    def inner(self) -> ResponseCache:
        return self._inner

    def __len__(self) -> int:
        with self._lock:
            return len(self._inner)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return self._inner.has(key)  # type: ignore[arg-type]

    def has(self, key: str) -> bool:
        with self._lock:
            return self._inner.has(key)

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._inner.get(key, default)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._inner.set(key, value)

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._inner.delete(key)

    def clear(self) -> None:
        with self._lock:
            self._inner.clear()

    def stats(self) -> CacheStats:
        with self._lock:
            return self._inner.stats()
