"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/factory.py.
"""

from __future__ import annotations

from ..errors import CacheConfigError
from ..settings import CacheSettings
from .base import CountBounded, ResponseCache, WeightBounded, WeightFn
from .lru import WeightedLRUCache
from .synchronized import SynchronizedCache
from .weights import approximate_weight


def create_response_cache(
    settings: CacheSettings | None = None,
    *,
    weight_fn: WeightFn = approximate_weight,
    thread_safe: bool = False,
) -> ResponseCache:
    """Build the response cache described by ``settings``."""
    settings = settings or CacheSettings()
    mode = str(settings.mode).strip().lower()
    if mode == "count":
        cache = WeightedLRUCache(CountBounded(max_items=settings.max_items))
    elif mode == "weight":
        cache = WeightedLRUCache(
            WeightBounded(max_weight=settings.max_weight, weight_fn=weight_fn)
        )
    else:
        raise CacheConfigError(f"Unknown cache mode '{settings.mode}'")

    if thread_safe:
        return SynchronizedCache(cache)
    return cache
