# src/sortscope/measure.py
from __future__ import annotations

import gc
import random
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, List, Optional, Tuple

from .algorithms import AlgorithmEntry
from .config import BenchmarkConfig, QUADRATIC_SIZE_LIMIT
from .generators import InputType, generate


@dataclass(frozen=True)
class BenchmarkResult:
    algorithm_name: str
    input_size: int
    input_type: InputType
    time_seconds: float                 # median of trial_times
    trials_performed: int
    trial_times: Tuple[float, ...] = field(default=(), compare=False)

    def __post_init__(self) -> None:
        if self.time_seconds < 0:
            raise ValueError(f"time_seconds must be >= 0, got {self.time_seconds}")
        if self.input_size < 0:
            raise ValueError(f"input_size must be >= 0, got {self.input_size}")
        if self.trials_performed < 1:
            raise ValueError("trials_performed must be >= 1")

    @property
    def key(self) -> Tuple[str, int, InputType]:
        return self.algorithm_name, self.input_size, self.input_type


def should_skip(entry: AlgorithmEntry, size: int, limit: int = QUADRATIC_SIZE_LIMIT) -> bool:
    """Quadratic algorithms are excluded above `limit`; everything else always runs."""
    return entry.is_quadratic and size > limit


def reduce_median(times: Iterable[float]) -> float:
    """
    Median of trial durations. For an even count this is the upper median
    (element at index len // 2 of the sorted timings), not an average.
    """
    xs = sorted(times)
    if not xs:
        raise ValueError("reduce_median() needs at least one timing")
    return xs[len(xs) // 2]


def measure(
    entry: AlgorithmEntry,
    size: int,
    input_type: InputType,
    trials: int,
    *,
    config: Optional[BenchmarkConfig] = None,
    rng: Optional[random.Random] = None,
    clock: Callable[[], float] = time.perf_counter,
) -> Optional[BenchmarkResult]:
    """
    Time `entry.sort` on `trials` freshly generated inputs and reduce to the median.

    Returns None when the skip policy excludes (entry, size); no input is
    generated and nothing is timed in that case. Input construction and GC
    happen outside the timed interval.
    """
    config = config or BenchmarkConfig()
    if trials < 1:
        raise ValueError("trials must be >= 1")

    if should_skip(entry, size, config.quadratic_limit):
        return None

    for _ in range(max(0, config.warmup)):
        entry.sort(generate(input_type, size, rng))

    times: List[float] = []
    for _ in range(trials):
        data = generate(input_type, size, rng)
        if config.gc_collect:
            gc.collect()
        t0 = clock()
        entry.sort(data)
        duration = clock() - t0
        times.append(max(0.0, duration))

    return BenchmarkResult(
        algorithm_name=entry.name,
        input_size=size,
        input_type=input_type,
        time_seconds=reduce_median(times),
        trials_performed=trials,
        trial_times=tuple(times),
    )
