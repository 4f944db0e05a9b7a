"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Conversation fingerprints used as response cache keys.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from ..types import ChatTurn

KEY_WINDOW = 3
KEY_SEPARATOR = "|"


def _turn_part(turn: ChatTurn | Mapping[str, Any]) -> str:
    if isinstance(turn, Mapping):
        return f"{turn.get('role', '')}:{turn.get('content', '')}"
    return f"{turn.role}:{turn.content}"


def derive_key(turns: Iterable[ChatTurn | Mapping[str, Any]]) -> str:
    """
    Build a cache key from the most recent turns of a conversation.

    Only the last ``KEY_WINDOW`` turns participate; each contributes
    ``"<role>:<content>"`` and the parts are joined with ``KEY_SEPARATOR``
    in conversation order. Earlier history is ignored, so conversations
    that differ only further back share a key. An empty conversation
    yields ``""``.
    """
    recent = list(turns)[-KEY_WINDOW:]
    return KEY_SEPARATOR.join(_turn_part(turn) for turn in recent)
