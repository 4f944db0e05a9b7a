"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Collaborator contracts for the chat handlers that sit behind the response cache.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from ..types import ChatTurn


@dataclass(frozen=True, slots=True)
class WikipediaResult:
    """Outcome of one encyclopedia lookup."""

    success: bool
    title: str = ""
    content: str = ""
    url: str = ""
    message: str = ""


@dataclass(frozen=True, slots=True)
class ChatReply:
    """Reply text plus whether it was served from the cache."""

    text: str
    cached: bool = False


class ChatModel(Protocol):
    """Hosted language model. Prompt assembly happens behind this call."""

    async def complete(
        self,
        turns: Sequence[ChatTurn],
        *,
        reference: WikipediaResult | None = None,
    ) -> str: ...

    async def welcome(self, site: str) -> str: ...


class WikipediaLookup(Protocol):
    """Encyclopedia search used to ground factual questions."""

    def should_lookup(self, text: str) -> bool: ...

    async def search(self, query: str) -> WikipediaResult: ...
