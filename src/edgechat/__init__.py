"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: __init__.py.
"""

from __future__ import annotations

from .cache import (
    CacheStats,
    CountBounded,
    ResponseCache,
    SynchronizedCache,
    WeightBounded,
    WeightedLRUCache,
    approximate_weight,
    create_response_cache,
    derive_key,
    text_weight,
)
from .chat import ChatModel, ChatReply, ChatService, WikipediaLookup, WikipediaResult
from .errors import CacheConfigError, ChatModelError, EdgeChatError
from .settings import CacheSettings, EdgeChatSettings
from .types import ChatTurn

__all__ = [
    "CacheStats",
    "CountBounded",
    "WeightBounded",
    "ResponseCache",
    "WeightedLRUCache",
    "SynchronizedCache",
    "create_response_cache",
    "derive_key",
    "approximate_weight",
    "text_weight",
    "ChatModel",
    "ChatReply",
    "ChatService",
    "WikipediaLookup",
    "WikipediaResult",
    "EdgeChatError",
    "CacheConfigError",
    "ChatModelError",
    "CacheSettings",
    "EdgeChatSettings",
    "ChatTurn",
]
