from __future__ import annotations

import pytest

from sortscope.generators import InputType
from sortscope.measure import BenchmarkResult


def make_result(name: str, size: int, input_type: InputType, t: float, trials: int = 1) -> BenchmarkResult:
    return BenchmarkResult(name, size, input_type, t, trials, (t,) * trials)


@pytest.fixture
def sample_results():
    R, S, V, N = InputType.RANDOM, InputType.SORTED, InputType.REVERSE, InputType.NEARLY_SORTED
    return [
        make_result("Insertion Sort", 1000, R, 0.040),
        make_result("Merge Sort", 1000, R, 0.004),
        make_result("Quick Sort", 1000, R, 0.003),
        make_result("Insertion Sort", 1000, S, 0.0001),
        make_result("Merge Sort", 1000, S, 0.003),
        make_result("Quick Sort", 1000, S, 0.002),
        make_result("Insertion Sort", 1000, V, 0.080),
        make_result("Merge Sort", 1000, V, 0.003),
        make_result("Quick Sort", 1000, V, 0.002),
        make_result("Insertion Sort", 1000, N, 0.004),
        make_result("Merge Sort", 1000, N, 0.003),
        make_result("Quick Sort", 1000, N, 0.0025),
        make_result("Merge Sort", 10000, R, 0.050),
        make_result("Quick Sort", 10000, R, 0.030),
    ]


@pytest.fixture
def result_factory():
    return make_result
