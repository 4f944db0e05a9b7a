"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

FastAPI host exposing the chat widget API on top of ``ChatService``.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from .cache.factory import create_response_cache
from .chat.contracts import ChatModel, WikipediaLookup
from .chat.service import ChatService
from .errors import ChatModelError
from .settings import EdgeChatSettings
from .types import ChatTurn, Role

logger = logging.getLogger("edgechat.server")


class TurnPayload(BaseModel):
    role: Role
    content: str


class ChatPayload(BaseModel):
    """Body of ``POST /api/chat``: the new message plus prior history."""

    message: str = ""
    history: list[TurnPayload] = Field(default_factory=list)

    def to_turns(self) -> list[ChatTurn]:
        turns = [ChatTurn(role=t.role, content=t.content) for t in self.history]
        turns.append(ChatTurn(role="user", content=self.message))
        return turns


class EdgeChatHost:
    """Expose chat, welcome-message and cache diagnostics endpoints."""

    def __init__(self, *, service: ChatService, service_name: str = "edgechat") -> None:
        self.service = service
        self.service_name = service_name

    def create_app(self) -> FastAPI:
        """Create and return the FastAPI app."""
        app = FastAPI(title=self.service_name)
        service = self.service

        @app.get("/health")
        async def health() -> dict[str, str]:
            return {"status": "ok"}

        @app.post("/api/chat")
        async def chat(payload: ChatPayload) -> dict[str, Any]:
            if not payload.message.strip():
                raise HTTPException(status_code=400, detail="No message provided")
            try:
                reply = await service.reply(payload.to_turns())
            except ChatModelError as exc:
                logger.exception("Chat completion failed")
                raise HTTPException(status_code=502, detail=str(exc)) from exc
            return {"response": reply.text, "cached": reply.cached}

        @app.get("/api/welcome-message")
        async def welcome_message(site: str = "") -> dict[str, Any]:
            try:
                reply = await service.welcome(site)
            except ChatModelError as exc:
                logger.exception("Welcome message generation failed")
                raise HTTPException(status_code=502, detail=str(exc)) from exc
            return {"response": reply.text, "cached": reply.cached}

        @app.get("/api/cache-stats")
        async def cache_stats() -> dict[str, Any]:
            return service.cache_stats()

        return app


def build_app(
    *,
    model: ChatModel,
    wikipedia: WikipediaLookup | None = None,
    settings: EdgeChatSettings | None = None,
) -> FastAPI:
    """Compose cache, service and host into one app."""
    settings = settings or EdgeChatSettings.from_env()
    cache = create_response_cache(settings.cache)
    service = ChatService(
        model=model,
        cache=cache,
        wikipedia=wikipedia,
        cache_enabled=settings.cache.enabled,
    )
    return EdgeChatHost(service=service, service_name=settings.service_name).create_app()
