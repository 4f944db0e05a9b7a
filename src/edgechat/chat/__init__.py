"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: chat/__init__.py.
"""

from .contracts import ChatModel, ChatReply, WikipediaLookup, WikipediaResult
from .service import ChatService

__all__ = [
    "ChatModel",
    "ChatReply",
    "ChatService",
    "WikipediaLookup",
    "WikipediaResult",
]
