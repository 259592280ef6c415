# src/sortscope/analyze.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .generators import InputType
from .measure import BenchmarkResult
from .utils import group_by

Scenario = Tuple[InputType, int]

ADAPTIVE_RATIO = 2.0
LARGE_INPUT_SIZE = 1_000
LARGE_RANDOM_SIZE = 10_000


@dataclass(frozen=True)
class Adaptivity:
    algorithm: str
    size: int
    ratio: float

    @property
    def adaptive(self) -> bool:
        return self.ratio > ADAPTIVE_RATIO


@dataclass(frozen=True)
class AlgorithmStats:
    algorithm: str
    mean: float
    min: float
    max: float
    count: int


@dataclass
class Analysis:
    fastest_by_scenario: Dict[Scenario, BenchmarkResult] = field(default_factory=dict)
    large_random_means: Dict[str, float] = field(default_factory=dict)
    overall_winner: Optional[Tuple[str, float]] = None
    best_on_sorted: Optional[BenchmarkResult] = None
    best_case: List[Tuple[str, float]] = field(default_factory=list)
    worst_case: List[Tuple[str, float]] = field(default_factory=list)
    adaptivity: List[Adaptivity] = field(default_factory=list)
    statistics: Dict[str, AlgorithmStats] = field(default_factory=dict)

    @property
    def adaptive_algorithms(self) -> List[Adaptivity]:
        return [a for a in self.adaptivity if a.adaptive]


def _filter(
    results: Sequence[BenchmarkResult],
    input_type: Optional[InputType] = None,
    min_size: int = 0,
) -> List[BenchmarkResult]:
    return [
        r for r in results
        if (input_type is None or r.input_type is input_type) and r.input_size >= min_size
    ]


def fastest_by_scenario(results: Sequence[BenchmarkResult]) -> Dict[Scenario, BenchmarkResult]:
    """
    Fastest result per (input type, size). min() keeps the first of equal
    timings, so ties go to the algorithm that ran first (registry order).
    """
    grouped = group_by(results, lambda r: (r.input_type, r.input_size))
    ordered = sorted(grouped, key=lambda k: (k[0].value, k[1]))
    return {k: min(grouped[k], key=lambda r: r.time_seconds) for k in ordered}


def mean_time_by_algorithm(
    results: Sequence[BenchmarkResult],
    input_type: Optional[InputType] = None,
    min_size: int = 0,
) -> Dict[str, float]:
    """Mean time per algorithm over the filtered subset, fastest first. Empty subset -> {}."""
    grouped = group_by(_filter(results, input_type, min_size), lambda r: r.algorithm_name)
    means = [(name, float(np.mean([r.time_seconds for r in rs]))) for name, rs in grouped.items()]
    means.sort(key=lambda t: t[1])
    return dict(means)


def overall_winner(
    results: Sequence[BenchmarkResult], min_size: int = LARGE_INPUT_SIZE
) -> Optional[Tuple[str, float]]:
    means = mean_time_by_algorithm(results, InputType.RANDOM, min_size)
    if not means:
        return None
    return next(iter(means.items()))


def _ranking(
    results: Sequence[BenchmarkResult], input_type: InputType, min_size: int, top: int
) -> List[Tuple[str, float]]:
    return list(mean_time_by_algorithm(results, input_type, min_size).items())[:top]


def best_case_ranking(
    results: Sequence[BenchmarkResult], min_size: int = LARGE_INPUT_SIZE, top: int = 3
) -> List[Tuple[str, float]]:
    return _ranking(results, InputType.SORTED, min_size, top)


def worst_case_ranking(
    results: Sequence[BenchmarkResult], min_size: int = LARGE_INPUT_SIZE, top: int = 3
) -> List[Tuple[str, float]]:
    return _ranking(results, InputType.REVERSE, min_size, top)


def best_single_result(
    results: Sequence[BenchmarkResult], input_type: InputType, min_size: int = LARGE_INPUT_SIZE
) -> Optional[BenchmarkResult]:
    subset = _filter(results, input_type, min_size)
    if not subset:
        return None
    return min(subset, key=lambda r: r.time_seconds)


def _find(
    results: Sequence[BenchmarkResult], algorithm: str, input_type: InputType, size: int
) -> Optional[BenchmarkResult]:
    for r in results:
        if r.algorithm_name == algorithm and r.input_type is input_type and r.input_size == size:
            return r
    return None


def adaptivity_ratio(results: Sequence[BenchmarkResult], algorithm: str, size: int) -> Optional[float]:
    """Random time / Sorted time at one size. None if either is missing or sorted time is 0."""
    rnd = _find(results, algorithm, InputType.RANDOM, size)
    srt = _find(results, algorithm, InputType.SORTED, size)
    if rnd is None or srt is None or srt.time_seconds <= 0:
        return None
    return rnd.time_seconds / srt.time_seconds


def adaptivity_report(
    results: Sequence[BenchmarkResult], min_size: int = LARGE_INPUT_SIZE
) -> List[Adaptivity]:
    """
    One entry per algorithm: the ratio at the first size (in run order) of at
    least `min_size` that has both a Random and a Sorted measurement.
    """
    report: List[Adaptivity] = []
    for name, rs in group_by(results, lambda r: r.algorithm_name).items():
        for r in rs:
            if r.input_type is not InputType.RANDOM or r.input_size < min_size:
                continue
            ratio = adaptivity_ratio(results, name, r.input_size)
            if ratio is not None:
                report.append(Adaptivity(name, r.input_size, ratio))
                break
    return report


def algorithm_statistics(results: Sequence[BenchmarkResult]) -> Dict[str, AlgorithmStats]:
    grouped = group_by(results, lambda r: r.algorithm_name)
    stats: Dict[str, AlgorithmStats] = {}
    for name in sorted(grouped):
        times = np.asarray([r.time_seconds for r in grouped[name]], dtype=float)
        stats[name] = AlgorithmStats(
            algorithm=name,
            mean=float(np.mean(times)),
            min=float(np.min(times)),
            max=float(np.max(times)),
            count=int(times.size),
        )
    return stats


def analyze_results(results: Sequence[BenchmarkResult]) -> Analysis:
    return Analysis(
        fastest_by_scenario=fastest_by_scenario(results),
        large_random_means=mean_time_by_algorithm(results, InputType.RANDOM, LARGE_RANDOM_SIZE),
        overall_winner=overall_winner(results),
        best_on_sorted=best_single_result(results, InputType.SORTED),
        best_case=best_case_ranking(results),
        worst_case=worst_case_ranking(results),
        adaptivity=adaptivity_report(results),
        statistics=algorithm_statistics(results),
    )
