"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

This module defines the conversation types shared by the cache and its callers.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

Role = Literal["user", "assistant", "system"]


@dataclass(frozen=True, slots=True)
class ChatTurn:
    """One conversation turn as sent by the widget."""

    role: Role
    content: str
