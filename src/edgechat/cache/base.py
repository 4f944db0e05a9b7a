"""
MIT License
Copyright (c) 2026 arpan404
See LICENSE file for full license text.

Module: cache/base.py.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Protocol, TypeAlias

WeightFn: TypeAlias = Callable[[Any], float]


@dataclass(slots=True)
class CacheEntry:
    """One resident cache row. ``weight`` is fixed at insertion time."""

    key: str
    value: Any
    weight: float = 0


@dataclass(frozen=True, slots=True)
class CountBounded:
    """Capacity expressed as a maximum number of resident entries."""

    max_items: int


@dataclass(frozen=True, slots=True)
class WeightBounded:
    """
    Capacity expressed as a maximum aggregate weight.

    ``weight_fn`` must return a finite, non-negative number for every value
    stored. The cache does not validate its output.
    """

    max_weight: float
    weight_fn: WeightFn


CapacityMode: TypeAlias = CountBounded | WeightBounded


@dataclass(frozen=True, slots=True)
class CacheStats:
    """Read-only snapshot of cache occupancy for diagnostics."""

    count: int
    max_items: int | None = None
    current_weight: float | None = None
    max_weight: float | None = None

    def to_dict(self) -> dict[str, int | float]:
        """Return populated fields only, in a JSON friendly shape."""
        row: dict[str, int | float] = {"count": self.count}
        if self.max_items is not None:
            row["max_items"] = self.max_items
        if self.current_weight is not None:
            row["current_weight"] = self.current_weight
        if self.max_weight is not None:
            row["max_weight"] = self.max_weight
        return row


class ResponseCache(Protocol):
    """Contract consumed by chat handlers and the diagnostics endpoint."""

    def has(self, key: str) -> bool: ...

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> bool: ...

    def clear(self) -> None: ...

    def stats(self) -> CacheStats: ...

    def __len__(self) -> int: ...
