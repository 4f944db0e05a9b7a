"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Weight functions for weight-bounded caches.

Weights are a rough cost proxy (characters of payload), not a byte count.
"""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from typing import Any

# Charged when a value cannot be serialized for sizing.
FALLBACK_WEIGHT = 1024


def text_weight(value: Any) -> int:
    """Weigh strings by length and everything else as 1."""
    if isinstance(value, str):
        return len(value)
    return 1


def approximate_weight(value: Any) -> int:
    """Weigh strings by length and other values by their JSON length."""
    if isinstance(value, str):
        return len(value)
    if is_dataclass(value) and not isinstance(value, type):
        value = asdict(value)
    try:
        return len(json.dumps(value, ensure_ascii=False))
    except (TypeError, ValueError):
        return FALLBACK_WEIGHT
