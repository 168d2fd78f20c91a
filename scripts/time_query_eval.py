#!/usr/bin/env python3
"""Quick perf benchmark for predicate evaluation over a demo world."""

from __future__ import annotations

import argparse
import statistics
import time

from _demo_world import build_demo_registry, build_demo_store, build_demo_world
from tqdm import tqdm

from blockquery import BlockPos, Predicate, WorldView, compile_query, matches

DEFAULT_SPEC = "@sapling,!~water %BlockLeaves,[variant=granite]"


def _run_once(
    predicate: Predicate,
    world: WorldView,
    positions: list[BlockPos],
    *,
    label: str,
    show_progress: bool,
) -> tuple[float, int]:
    start = time.perf_counter()
    matched = 0
    iterator = tqdm(positions, desc=label, unit="pos") if show_progress else positions
    for pos in iterator:
        if matches(predicate, world, pos):
            matched += 1
    return time.perf_counter() - start, matched


def main() -> int:
    parser = argparse.ArgumentParser(description="Benchmark block query evaluation throughput")
    parser.add_argument("--spec", type=str, default=DEFAULT_SPEC, help="Query spec to evaluate")
    parser.add_argument("--size", type=int, default=64, help="Demo world edge length (default: 64)")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    args = parser.parse_args()

    registry = build_demo_registry()
    store = build_demo_store(registry)
    predicate = compile_query(args.spec, resolver=registry, store=store)

    size = max(args.size, 1)
    world = build_demo_world(size)
    positions = [BlockPos(x, y, z) for x in range(size) for y in range(5) for z in range(size)]
    show_progress = not args.no_progress

    for warmup_idx in range(max(args.warmups, 0)):
        _run_once(
            predicate,
            world,
            positions,
            label=f"warmup {warmup_idx + 1}/{max(args.warmups, 0)}",
            show_progress=show_progress,
        )

    timings: list[float] = []
    matched = 0
    for run_idx in range(max(args.runs, 1)):
        duration, matched = _run_once(
            predicate,
            world,
            positions,
            label=f"run {run_idx + 1}/{max(args.runs, 1)}",
            show_progress=show_progress,
        )
        timings.append(duration)

    mean = statistics.mean(timings)
    print(f"Spec: {args.spec}")
    print(f"Positions: {len(positions)}")
    print(f"Matched: {matched}")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    if mean > 0:
        print(f"Positions/s (mean): {len(positions) / mean:.1f}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
