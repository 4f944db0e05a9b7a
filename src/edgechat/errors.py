"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: errors.py.
"""

from __future__ import annotations


class EdgeChatError(RuntimeError):
    """Base error for edgechat runtime failures."""


class CacheConfigError(EdgeChatError):
    """Raised when a response cache is constructed with invalid capacity settings."""


class ChatModelError(EdgeChatError):
    """Raised by model collaborators when a completion cannot be produced."""
