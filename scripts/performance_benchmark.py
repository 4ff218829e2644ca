#!/usr/bin/env python3
"""
Performance Benchmark for idkit

Measures the hot paths and checks the uniqueness guarantee under threads:

- Generation: >100K time-ordered ids/sec on one thread
- Codec: >100K convert_all calls/sec
- Concurrency: 65536 ids from 32 threads within one millisecond are distinct

Run:
    python scripts/performance_benchmark.py
"""

import time
from concurrent.futures import ThreadPoolExecutor

from idkit.codec.converter import convert_all, parse_auto_detect
from idkit.kernel.ids import AtomicCounter, TimeOrderedIdGenerator
from idkit.kernel.time import TestClockProvider


def benchmark_generation() -> dict:
    """Benchmark single-threaded time-ordered generation"""
    print("\n=== Benchmark: Time-Ordered Generation ===")

    generator = TimeOrderedIdGenerator()
    count = 200_000

    start = time.perf_counter()
    for _ in range(count):
        generator.generate()
    elapsed = time.perf_counter() - start

    per_sec = count / elapsed if elapsed > 0 else 0
    print(f"  Ids generated: {count}")
    print(f"  Ids/sec: {per_sec:,.0f}")
    print(f"  Status: {'✓ PASS' if per_sec > 100_000 else '✗ FAIL'}")

    return {"test": "generation", "per_sec": per_sec, "pass": per_sec > 100_000}


def benchmark_codec() -> dict:
    """Benchmark rendering and auto-detect parsing"""
    print("\n=== Benchmark: Codec ===")

    generator = TimeOrderedIdGenerator()
    values = [generator.generate() for _ in range(100_000)]

    start = time.perf_counter()
    views = [convert_all(v) for v in values]
    for view in views:
        parse_auto_detect(view.hex)
    elapsed = time.perf_counter() - start

    per_sec = len(values) / elapsed if elapsed > 0 else 0
    print(f"  Convert + parse/sec: {per_sec:,.0f}")
    print(f"  Status: {'✓ PASS' if per_sec > 100_000 else '✗ FAIL'}")

    return {"test": "codec", "per_sec": per_sec, "pass": per_sec > 100_000}


def benchmark_concurrent_uniqueness() -> dict:
    """Fill one full counter cycle from many threads within one millisecond"""
    print("\n=== Benchmark: Concurrent Uniqueness ===")

    generator = TimeOrderedIdGenerator(
        clock=TestClockProvider(1_736_942_400_000), counter=AtomicCounter()
    )
    callers = 65536

    with ThreadPoolExecutor(max_workers=32) as pool:
        ids = list(pool.map(lambda _: generator.generate(), range(callers)))

    distinct = len(set(ids))
    print(f"  Ids: {callers}  distinct: {distinct}")
    print(f"  Status: {'✓ PASS' if distinct == callers else '✗ FAIL'}")

    return {"test": "concurrent_uniqueness", "distinct": distinct, "pass": distinct == callers}


def main() -> None:
    results = [
        benchmark_generation(),
        benchmark_codec(),
        benchmark_concurrent_uniqueness(),
    ]
    passed = sum(1 for r in results if r["pass"])
    print(f"\n{passed}/{len(results)} benchmarks passed")


if __name__ == "__main__":
    main()
