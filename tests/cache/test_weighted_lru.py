from __future__ import annotations

import random

import pytest

from edgechat.cache import CountBounded, WeightBounded, WeightedLRUCache
from edgechat.errors import CacheConfigError


def _weighted(max_weight: float = 10) -> WeightedLRUCache:
    return WeightedLRUCache(WeightBounded(max_weight=max_weight, weight_fn=len))


def test_weight_mode_evicts_oldest_to_fit_new_value():
    cache = _weighted(10)
    cache.set("a", "12345")
    cache.set("b", "123456")

    assert not cache.has("a")
    assert cache.has("b")
    assert cache.current_weight == 6


def test_count_mode_get_refreshes_recency():
    cache = WeightedLRUCache(CountBounded(max_items=2))
    cache.set("k1", "v1")
    cache.set("k2", "v2")
    assert cache.get("k1") == "v1"
    cache.set("k3", "v3")

    assert not cache.has("k2")
    assert cache.has("k1")
    assert cache.has("k3")


def test_first_inserted_key_is_evicted_without_reads():
    cache = WeightedLRUCache(CountBounded(max_items=3))
    for key in ("a", "b", "c", "d"):
        cache.set(key, key.upper())

    assert cache.keys() == ["b", "c", "d"]
    assert cache.get("a") is None


def test_reading_oldest_evicts_second_oldest_instead():
    cache = WeightedLRUCache(CountBounded(max_items=3))
    for key in ("a", "b", "c"):
        cache.set(key, key)
    cache.get("a")
    cache.set("d", "d")

    assert cache.keys() == ["c", "a", "d"]


def test_has_does_not_touch_recency():
    cache = WeightedLRUCache(CountBounded(max_items=2))
    cache.set("a", 1)
    cache.set("b", 2)
    assert cache.has("a")
    cache.set("c", 3)

    assert not cache.has("a")
    assert "b" in cache and "c" in cache


def test_get_returns_default_for_missing_key():
    cache = _weighted()
    marker = object()

    assert cache.get("missing") is None
    assert cache.get("missing", marker) is marker


def test_get_returns_stored_object_not_a_copy():
    cache = WeightedLRUCache(CountBounded(max_items=2))
    payload = {"title": "Python"}
    cache.set("k", payload)

    assert cache.get("k") is payload


def test_update_in_place_replaces_value_and_weight():
    cache = _weighted(10)
    cache.set("a", "1234")
    cache.set("b", "1234")
    cache.set("a", "12")

    assert len(cache) == 2
    assert cache.current_weight == 6
    assert cache.get("a") == "12"
    assert cache.keys() == ["b", "a"]


def test_update_in_place_does_not_count_twice_in_count_mode():
    cache = WeightedLRUCache(CountBounded(max_items=2))
    cache.set("a", 1)
    cache.set("b", 2)
    cache.set("b", 3)

    assert cache.keys() == ["a", "b"]
    assert cache.get("b") == 3


def test_oversized_value_is_refused_silently():
    cache = _weighted(5)
    cache.set("small", "12")
    cache.set("huge", "123456")

    assert not cache.has("huge")
    assert cache.has("small")
    assert cache.current_weight == 2


def test_oversized_replacement_drops_existing_entry():
    cache = _weighted(5)
    cache.set("k", "123")
    cache.set("k", "123456")

    assert not cache.has("k")
    assert len(cache) == 0
    assert cache.current_weight == 0


def test_value_equal_to_capacity_is_admitted_after_emptying():
    cache = _weighted(5)
    cache.set("a", "12")
    cache.set("b", "12")
    cache.set("full", "12345")

    assert cache.keys() == ["full"]
    assert cache.current_weight == 5


def test_clear_is_idempotent():
    cache = _weighted()
    cache.clear()
    assert len(cache) == 0
    assert cache.current_weight == 0

    cache.set("a", "abc")
    cache.clear()
    cache.clear()
    assert len(cache) == 0
    assert cache.current_weight == 0
    assert cache.keys() == []


def test_delete_removes_weight_contribution():
    cache = _weighted()
    cache.set("a", "abc")

    assert cache.delete("a") is True
    assert cache.delete("a") is False
    assert cache.current_weight == 0


def test_stats_shape_per_mode_and_no_recency_change():
    weighted = _weighted(10)
    weighted.set("a", "123")
    weighted.set("b", "1")
    assert weighted.stats().to_dict() == {
        "count": 2,
        "current_weight": 4,
        "max_weight": 10,
    }
    assert weighted.keys() == ["a", "b"]

    counted = WeightedLRUCache(CountBounded(max_items=4))
    counted.set("a", "123")
    stats = counted.stats()
    assert stats.to_dict() == {"count": 1, "max_items": 4}
    assert stats.current_weight is None


def test_from_options_selects_mode():
    assert not WeightedLRUCache.from_options(max_items=3).weighted
    assert WeightedLRUCache.from_options(max_weight=10, weight_fn=len).weighted


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"max_items": 3, "max_weight": 10, "weight_fn": len},
        {"max_items": 3, "weight_fn": len},
        {"max_weight": 10},
        {"max_items": 0},
        {"max_weight": 0, "weight_fn": len},
    ],
)
def test_from_options_rejects_invalid_configuration(kwargs):
    with pytest.raises(CacheConfigError):
        WeightedLRUCache.from_options(**kwargs)


def test_derive_key_is_available_on_the_class():
    turns = [{"role": "user", "content": "hi"}]
    assert WeightedLRUCache.derive_key(turns) == "user:hi"


def test_random_sets_keep_count_within_capacity():
    rng = random.Random(7)
    cache = WeightedLRUCache(CountBounded(max_items=5))
    for _ in range(500):
        cache.set(f"k{rng.randrange(12)}", rng.random())
        if rng.random() < 0.3:
            cache.get(f"k{rng.randrange(12)}")
        assert len(cache) <= 5


def test_random_sets_keep_weight_exact_and_bounded():
    rng = random.Random(11)
    cache = _weighted(40)
    for _ in range(1000):
        key = f"k{rng.randrange(20)}"
        cache.set(key, "x" * rng.randrange(0, 50))
        if rng.random() < 0.3:
            cache.get(f"k{rng.randrange(20)}")
        resident = sum(len(cache.get(k)) for k in cache.keys())
        assert cache.current_weight == resident
        assert cache.current_weight <= 40


def test_float_weights_leave_no_residue_once_emptied():
    rng = random.Random(3)
    weights = {"a": 0.1, "b": 0.2, "c": 0.3, "d": 0.7}
    cache = WeightedLRUCache(WeightBounded(max_weight=1.0, weight_fn=lambda v: weights[v]))
    for i in range(20_000):
        cache.set(f"k{i % 25}", rng.choice("abcd"))
        assert cache.current_weight <= 1.0 + 1e-9

    for key in cache.keys():
        cache.delete(key)

    assert len(cache) == 0
    assert cache.current_weight == 0


def test_float_weights_reset_when_eviction_empties_cache():
    cache = WeightedLRUCache(WeightBounded(max_weight=1.0, weight_fn=float))
    for value in (0.1, 0.2, 0.3, 0.1):
        cache.set(str(value) + str(len(cache)), value)
    cache.set("full", 1.0)

    assert cache.keys() == ["full"]
    assert cache.current_weight == 1.0
