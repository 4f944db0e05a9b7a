#!/usr/bin/env python3
"""
Response cache benchmark for set/get latency at increasing residency.

Usage examples:
  PYTHONPATH=src python scripts/cache_benchmark.py --mode weight --max-weight 1048576
  PYTHONPATH=src python scripts/cache_benchmark.py --mode count --max-items 5000 --operations 200000
"""

from __future__ import annotations

import argparse
import random
import statistics
import time

from edgechat.cache import CountBounded, WeightBounded, WeightedLRUCache, derive_key, text_weight
from edgechat.types import ChatTurn


def run_benchmark(
    *,
    mode: str,
    max_items: int,
    max_weight: float,
    operations: int,
    distinct_keys: int,
    read_ratio: float,
    seed: int,
) -> None:
    if mode == "count":
        cache = WeightedLRUCache(CountBounded(max_items=max_items))
    elif mode == "weight":
        cache = WeightedLRUCache(WeightBounded(max_weight=max_weight, weight_fn=text_weight))
    else:
        raise ValueError(f"Unsupported mode: {mode}")

    rng = random.Random(seed)
    keys = [
        derive_key([ChatTurn(role="user", content=f"question {i}")])
        for i in range(distinct_keys)
    ]

    set_latencies: list[float] = []
    get_latencies: list[float] = []
    hits = 0

    started = time.perf_counter()
    for _ in range(operations):
        key = keys[rng.randrange(distinct_keys)]
        if rng.random() < read_ratio:
            t0 = time.perf_counter()
            value = cache.get(key)
            get_latencies.append(time.perf_counter() - t0)
            if value is not None:
                hits += 1
        else:
            payload = "x" * rng.randrange(64, 2048)
            t0 = time.perf_counter()
            cache.set(key, payload)
            set_latencies.append(time.perf_counter() - t0)
    elapsed = time.perf_counter() - started

    def _p95(samples: list[float]) -> float:
        return sorted(samples)[int(0.95 * (len(samples) - 1))] if samples else 0.0

    stats = cache.stats().to_dict()
    print(f"mode={mode}")
    print(f"operations={operations}")
    print(f"elapsed_s={elapsed:.3f}")
    print(f"ops_per_s={operations / elapsed if elapsed > 0 else 0.0:.0f}")
    print(f"hit_ratio={hits / len(get_latencies) if get_latencies else 0.0:.3f}")
    print(f"set_p50_us={statistics.median(set_latencies) * 1e6 if set_latencies else 0.0:.2f}")
    print(f"set_p95_us={_p95(set_latencies) * 1e6:.2f}")
    print(f"get_p50_us={statistics.median(get_latencies) * 1e6 if get_latencies else 0.0:.2f}")
    print(f"get_p95_us={_p95(get_latencies) * 1e6:.2f}")
    for name, value in stats.items():
        print(f"{name}={value}")


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Response cache benchmark utility")
    parser.add_argument("--mode", choices=("count", "weight"), default="weight")
    parser.add_argument("--max-items", type=int, default=1000)
    parser.add_argument("--max-weight", type=float, default=1024 * 1024)
    parser.add_argument("--operations", type=int, default=100_000)
    parser.add_argument("--distinct-keys", type=int, default=5000)
    parser.add_argument("--read-ratio", type=float, default=0.7)
    parser.add_argument("--seed", type=int, default=0)
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    run_benchmark(
        mode=args.mode,
        max_items=args.max_items,
        max_weight=args.max_weight,
        operations=args.operations,
        distinct_keys=args.distinct_keys,
        read_ratio=args.read_ratio,
        seed=args.seed,
    )


if __name__ == "__main__":
    main()
