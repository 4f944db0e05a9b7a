"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Cache and host settings with explicit env loading.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Literal

CacheMode = Literal["weight", "count"]

# 10 MiB worth of characters
DEFAULT_MAX_WEIGHT = 10 * 1024 * 1024
DEFAULT_MAX_ITEMS = 50


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class CacheSettings:
    """Capacity settings for the process-wide response cache."""

    enabled: bool = True
    mode: CacheMode = "weight"
    max_items: int = DEFAULT_MAX_ITEMS
    max_weight: float = DEFAULT_MAX_WEIGHT

    @staticmethod
    def from_env() -> "CacheSettings":
        """Load cache settings from environment variables."""
        return CacheSettings(
            enabled=_env_flag("EDGECHAT_CACHE_ENABLED", True),
            mode=os.getenv("EDGECHAT_CACHE_MODE", "weight").strip().lower(),  # type: ignore[arg-type]
            max_items=int(os.getenv("EDGECHAT_CACHE_MAX_ITEMS", str(DEFAULT_MAX_ITEMS))),
            max_weight=float(
                os.getenv("EDGECHAT_CACHE_MAX_WEIGHT", str(DEFAULT_MAX_WEIGHT))
            ),
        )


@dataclass(frozen=True, slots=True)
class EdgeChatSettings:
    """Top-level settings used when composing the chat host."""

    service_name: str = "edgechat"
    cache: CacheSettings = field(default_factory=CacheSettings)

    @staticmethod
    def from_env() -> "EdgeChatSettings":
        """Load host settings from environment variables."""
        return EdgeChatSettings(
            service_name=os.getenv("EDGECHAT_SERVICE_NAME", "edgechat"),
            cache=CacheSettings.from_env(),
        )
