"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/__init__.py.
"""

from .base import (
    CacheEntry,
    CacheStats,
    CapacityMode,
    CountBounded,
    ResponseCache,
    WeightBounded,
    WeightFn,
)
from .factory import create_response_cache
from .keys import KEY_SEPARATOR, KEY_WINDOW, derive_key
from .lru import WeightedLRUCache
from .synchronized import SynchronizedCache
from .weights import FALLBACK_WEIGHT, approximate_weight, text_weight

__all__ = [
    "CacheEntry",
    "CacheStats",
    "CapacityMode",
    "CountBounded",
    "WeightBounded",
    "WeightFn",
    "ResponseCache",
    "WeightedLRUCache",
    "SynchronizedCache",
    "create_response_cache",
    "derive_key",
    "KEY_WINDOW",
    "KEY_SEPARATOR",
    "approximate_weight",
    "text_weight",
    "FALLBACK_WEIGHT",
]
