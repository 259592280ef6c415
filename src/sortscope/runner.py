# src/sortscope/runner.py
from __future__ import annotations

import random
from dataclasses import replace
from typing import List, Optional, Sequence

from .algorithms import ALGORITHMS, AlgorithmEntry
from .config import BenchmarkConfig
from .generators import INPUT_TYPES
from .measure import BenchmarkResult, measure, should_skip
from .utils import human_time, unique


def run_benchmark(
    sizes: Optional[Sequence[int]] = None,
    trials: Optional[int] = None,
    *,
    config: Optional[BenchmarkConfig] = None,
    algorithms: Sequence[AlgorithmEntry] = ALGORITHMS,
    rng: Optional[random.Random] = None,
    verbose: bool = True,
) -> List[BenchmarkResult]:
    """
    Run every size x input type x algorithm combination, one at a time.

    Sizes are visited in the given order (repeats dropped), input types in
    INPUT_TYPES order and algorithms in registry order, so the returned list
    has a deterministic layout. Combinations excluded by the skip policy are
    simply absent from the result. `sizes` and `trials` fall back to the
    values in `config` (or the defaults) when not given.
    """
    base = config or BenchmarkConfig()
    cfg = replace(
        base,
        sizes=tuple(unique(base.sizes if sizes is None else sizes)),
        trials=base.trials if trials is None else trials,
    ).validate()

    if rng is None and cfg.seed is not None:
        rng = random.Random(cfg.seed)

    if verbose:
        print("=== Sorting Algorithm Benchmark ===")
        print(f"Running {len(algorithms)} algorithms on {len(cfg.sizes)} input sizes")
        print(f"Each test performed {cfg.trials} times (using median)\n")

    results: List[BenchmarkResult] = []
    for size in cfg.sizes:
        if verbose:
            print(f"Testing size: {size}")
        for input_type in INPUT_TYPES:
            for entry in algorithms:
                if should_skip(entry, size, cfg.quadratic_limit):
                    if verbose:
                        print(f"  {entry.name} on {input_type}: SKIPPED (too slow for size {size})")
                    continue
                res = measure(entry, size, input_type, cfg.trials, config=cfg, rng=rng)
                if res is None:
                    continue
                results.append(res)
                if verbose:
                    print(f"  {entry.name} on {input_type}: {human_time(res.time_seconds)}")
        if verbose:
            print()

    return results
