#!/usr/bin/env python3
"""
Benchmark the differential growth simulation.

Times tick() at several curve sizes. Each case first grows a curve to
the requested node count, then times a fixed number of further ticks.

Usage:
    uv run python scripts/benchmark.py [--sizes N,...] [--ticks N] [--output FILE]

Examples:
    uv run python scripts/benchmark.py
    uv run python scripts/benchmark.py --sizes 500,2000 --ticks 20
"""

from __future__ import annotations

import argparse
import json
import time
from typing import Any

from differential_growth import DifferentialGrowth, generate_points_on_circle


def grow_to(node_count: int) -> DifferentialGrowth:
    """Build a simulation with the reference parameters and grow it."""
    sim = DifferentialGrowth(
        generate_points_on_circle(0.0, 0.0, 10.0, 10), 1.5, 1.0, 14.0, 1.1, 5.0
    )
    # Safety bound in case the parameters stop growing the curve
    sim.run(iterations=100_000, max_nodes=node_count)
    return sim


def benchmark_ticks(sim: DifferentialGrowth, ticks: int) -> dict[str, Any]:
    """
    Time a number of ticks.

    Returns:
        Dict with timing and size info
    """
    nodes_before = len(sim)

    start = time.perf_counter()
    for _ in range(ticks):
        sim.tick()
    elapsed = time.perf_counter() - start

    return {
        "time_seconds": elapsed,
        "seconds_per_tick": elapsed / ticks if ticks else 0.0,
        "nodes_before": nodes_before,
        "nodes_after": len(sim),
    }


def run_benchmarks(sizes: list[int], ticks: int) -> list[dict]:
    """Run benchmarks at each size."""
    results = []

    print(f"\nBenchmarking {ticks} ticks at {len(sizes)} sizes")
    print("=" * 60)
    print(f"{'Nodes':>10s}{'Grown to':>12s}{'Total (s)':>14s}{'Per tick (s)':>16s}")
    print("-" * 60)

    for size in sizes:
        sim = grow_to(size)
        result = benchmark_ticks(sim, ticks)
        print(
            f"{size:>10d}{result['nodes_before']:>12d}"
            f"{result['time_seconds']:>14.4f}{result['seconds_per_tick']:>16.5f}"
        )
        results.append({"size": size, **result})

    return results


def main():
    parser = argparse.ArgumentParser(description="Benchmark differential growth ticks")
    parser.add_argument("--sizes", default="100,500,1000", help="Comma-separated node counts")
    parser.add_argument("--ticks", type=int, default=10, help="Ticks timed per size")
    parser.add_argument("--output", help="Output JSON file for results")

    args = parser.parse_args()

    sizes = [int(s) for s in args.sizes.split(",") if s.strip()]
    results = run_benchmarks(sizes, args.ticks)

    if args.output and results:
        with open(args.output, "w") as f:
            json.dump(results, f, indent=2)
        print(f"\nResults saved to {args.output}")


if __name__ == "__main__":
    main()
