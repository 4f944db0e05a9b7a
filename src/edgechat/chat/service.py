"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Chat handlers that consult the response cache before calling out.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from ..cache.base import ResponseCache
from ..cache.keys import derive_key
from ..types import ChatTurn
from .contracts import ChatModel, ChatReply, WikipediaLookup, WikipediaResult

logger = logging.getLogger("edgechat.chat")

# Each consumer owns a distinct prefix so no entry can answer another's lookup.
CHAT_KEY_PREFIX = "chat:"
WIKIPEDIA_KEY_PREFIX = "wikipedia:"
WELCOME_KEY_PREFIX = "welcome:"


class ChatService:
    """
    Answer widget requests, serving repeats from the shared cache.

    The cache is injected so hosts decide its lifetime and tests can use a
    fresh instance. A cache miss always falls through to the collaborators;
    the cache can only accelerate a request, never fail it.
    """

    def __init__(
        self,
        *,
        model: ChatModel,
        cache: ResponseCache,
        wikipedia: WikipediaLookup | None = None,
        cache_enabled: bool = True,
    ) -> None:
        self._model = model
        self._cache = cache
        self._wikipedia = wikipedia
        self._cache_enabled = cache_enabled

    @property
    def cache(self) -> ResponseCache:
        return self._cache

    async def reply(self, turns: Sequence[ChatTurn]) -> ChatReply:
        """Return the model reply for ``turns``, cached by their recent tail."""
        key = CHAT_KEY_PREFIX + derive_key(turns)
        if self._cache_enabled:
            cached = self._cache.get(key)
            if cached is not None:
                logger.debug("Chat cache hit (turns=%d)", len(turns))
                return ChatReply(text=cached, cached=True)
            logger.debug("Chat cache miss (turns=%d)", len(turns))

        reference = await self._reference_for(turns)
        text = await self._model.complete(list(turns), reference=reference)
        if self._cache_enabled and text:
            self._cache.set(key, text)
        return ChatReply(text=text, cached=False)

    async def welcome(self, site: str) -> ChatReply:
        """Return the greeting shown when the widget opens on ``site``."""
        key = WELCOME_KEY_PREFIX + site
        if self._cache_enabled:
            cached = self._cache.get(key)
            if cached is not None:
                return ChatReply(text=cached, cached=True)

        text = await self._model.welcome(site)
        if self._cache_enabled and text:
            self._cache.set(key, text)
        return ChatReply(text=text, cached=False)

    async def lookup(self, query: str) -> WikipediaResult | None:
        """Search the encyclopedia, caching successful results only."""
        if self._wikipedia is None:
            return None
        key = WIKIPEDIA_KEY_PREFIX + query
        if self._cache_enabled:
            cached = self._cache.get(key)
            if cached is not None:
                return cached

        result = await self._wikipedia.search(query)
        if self._cache_enabled and result.success:
            self._cache.set(key, result)
        return result

    def cache_stats(self) -> dict[str, int | float]:
        return self._cache.stats().to_dict()

    async def _reference_for(self, turns: Sequence[ChatTurn]) -> WikipediaResult | None:
        if self._wikipedia is None:
            return None
        last_user = next((t for t in reversed(turns) if t.role == "user"), None)
        if last_user is None or not self._wikipedia.should_lookup(last_user.content):
            return None
        result = await self.lookup(last_user.content)
        if result is None or not result.success:
            return None
        return result
