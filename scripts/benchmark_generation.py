#!/usr/bin/env python3
"""Benchmark full dungeon generation across map sizes.

Usage:
    python scripts/benchmark_generation.py --iterations 50 --save base.json
    python scripts/benchmark_generation.py --compare base.json
"""

from __future__ import annotations

import argparse
import json
import time
from pathlib import Path
from typing import TypeAlias

from warren.environment.generators import DungeonConfig, DungeonGenerator
from warren.util.metrics import TimingTable

MAP_SIZES: tuple[tuple[int, int], ...] = (
    (30, 30),
    (50, 50),
    (80, 60),
    (120, 120),
    (200, 200),
)

# Room counts grow with area up to this cap; layout cost is quadratic in it.
MAX_BENCH_ROOMS = 40

Results: TypeAlias = dict[str, dict[str, float]]


def config_for(
    width: int, height: int, corridor_width: int, seed: int
) -> DungeonConfig:
    """A configuration whose room count scales with the map area."""
    max_rooms = min(MAX_BENCH_ROOMS, max(5, (width * height) // 250))
    return DungeonConfig(
        width=width,
        height=height,
        min_rooms=max_rooms // 2,
        max_rooms=max_rooms,
        corridor_width=corridor_width,
        seed=seed,
    )


class GenerationBenchmark:
    """Times ``iterations`` seeded dungeons per map size."""

    def __init__(self, iterations: int, corridor_width: int) -> None:
        self.iterations = iterations
        self.corridor_width = corridor_width
        self.timings = TimingTable(num_samples=iterations)

    def _time_size(self, width: int, height: int) -> str:
        label = f"{width}x{height}"
        for i in range(self.iterations):
            seed = width * 1_000_000 + height * 1_000 + i
            generator = DungeonGenerator(
                config_for(width, height, self.corridor_width, seed)
            )
            start = time.perf_counter()
            generator.generate()
            self.timings.record(label, (time.perf_counter() - start) * 1000.0)
        return label

    def run(self) -> Results:
        print(
            f"Dungeon generation: {self.iterations} runs per size, "
            f"corridor width {self.corridor_width}"
        )
        print(f"{'Size':>10} {'p50 ms':>10} {'p95 ms':>10} {'p99 ms':>10}")

        for width, height in MAP_SIZES:
            label = self._time_size(width, height)
            p50, p95, p99 = self.timings[label].get_percentiles()
            print(f"{label:>10} {p50:10.2f} {p95:10.2f} {p99:10.2f}")

        return self.timings.to_dict()


def save_results(results: Results, path: Path) -> None:
    path.write_text(json.dumps(results, indent=2))
    print(f"Results written to {path}")


def compare_results(results: Results, baseline_path: Path) -> None:
    """Print the median change per size against a saved run."""
    if not baseline_path.exists():
        print(f"No baseline at {baseline_path}")
        return
    baseline: Results = json.loads(baseline_path.read_text())

    print(f"\nMedian vs {baseline_path}:")
    for label, current in results.items():
        before = baseline.get(label, {}).get("p50_ms")
        if not before:
            print(f"{label:>10}: no baseline")
            continue
        after = current["p50_ms"]
        change = (after - before) / before * 100.0
        print(f"{label:>10}: {before:8.2f} -> {after:8.2f} ms ({change:+6.1f}%)")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument(
        "--iterations", type=int, default=20, help="Dungeons per map size"
    )
    parser.add_argument(
        "--corridor-width", type=int, default=1, help="Corridor width for every run"
    )
    parser.add_argument("--save", type=Path, help="Write results as JSON")
    parser.add_argument("--compare", type=Path, help="Baseline JSON to compare to")
    args = parser.parse_args(argv)

    results = GenerationBenchmark(args.iterations, args.corridor_width).run()
    if args.save:
        save_results(results, args.save)
    if args.compare:
        compare_results(results, args.compare)


if __name__ == "__main__":
    main()
