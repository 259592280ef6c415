from __future__ import annotations

from collections import Counter

import pytest

from sortscope.algorithms import ALGORITHMS
import sortscope.runner as runner_mod
from sortscope.config import QUICK, BenchmarkConfig
from sortscope.generators import INPUT_TYPES, InputType
from sortscope.runner import run_benchmark


def test_small_run_produces_every_combination():
    results = run_benchmark(sizes=[10, 100], trials=1, verbose=False)
    assert len(results) == 2 * 4 * 5
    assert {r.input_size for r in results} == {10, 100}
    assert {r.input_type for r in results} == set(InputType)
    assert all(r.time_seconds >= 0 for r in results)
    assert all(r.trials_performed == 1 for r in results)


def test_result_order_is_size_then_input_type_then_registry():
    results = run_benchmark(sizes=[20, 10], trials=1, verbose=False)
    expected = [
        (size, input_type, entry.name)
        for size in (20, 10)
        for input_type in INPUT_TYPES
        for entry in ALGORITHMS
    ]
    assert [(r.input_size, r.input_type, r.algorithm_name) for r in results] == expected


def test_no_duplicate_triples_even_with_repeated_sizes():
    results = run_benchmark(sizes=[10, 10, 20], trials=1, verbose=False)
    counts = Counter(r.key for r in results)
    assert max(counts.values()) == 1
    assert len(results) == 2 * 4 * 5


def test_large_size_skips_quadratic_algorithms():
    results = run_benchmark(sizes=[100_000], trials=1, verbose=False)
    assert len(results) == 12
    names = {r.algorithm_name for r in results}
    assert names == {"Merge Sort", "Quick Sort", "Heap Sort"}
    for input_type in InputType:
        assert sum(1 for r in results if r.input_type is input_type) == 3


def test_skip_is_logged_when_verbose(capsys):
    cfg = BenchmarkConfig(quadratic_limit=5)
    results = run_benchmark(sizes=[10], trials=1, config=cfg, verbose=True)
    out = capsys.readouterr().out
    assert "Insertion Sort on Random: SKIPPED (too slow for size 10)" in out
    assert "Selection Sort on Nearly Sorted: SKIPPED" in out
    assert "Testing size: 10" in out
    assert len(results) == 12


def test_trials_recorded_on_each_result():
    results = run_benchmark(sizes=[15], trials=4, verbose=False)
    assert all(r.trials_performed == 4 and len(r.trial_times) == 4 for r in results)


@pytest.mark.parametrize("sizes,trials", [([10], 0), ([-1], 1), ([10.5], 1)])
def test_invalid_configuration_rejected(sizes, trials):
    with pytest.raises(ValueError):
        run_benchmark(sizes=sizes, trials=trials, verbose=False)


def test_empty_size_list_yields_no_results():
    assert run_benchmark(sizes=[], trials=1, verbose=False) == []


def _record_measure(monkeypatch):
    seen = []

    def recording_measure(entry, size, input_type, trials, *, config=None, rng=None):
        seen.append((size, trials))
        return None

    monkeypatch.setattr(runner_mod, "measure", recording_measure)
    return seen


def test_config_sizes_and_trials_used_when_not_given(monkeypatch):
    seen = _record_measure(monkeypatch)
    run_benchmark(config=BenchmarkConfig(sizes=(7,), trials=1), verbose=False)
    assert seen
    assert {size for size, _ in seen} == {7}
    assert {trials for _, trials in seen} == {1}


def test_quick_preset_drives_the_run(monkeypatch):
    seen = _record_measure(monkeypatch)
    run_benchmark(config=QUICK, verbose=False)
    assert list(dict.fromkeys(size for size, _ in seen)) == list(QUICK.sizes)
    assert {trials for _, trials in seen} == {QUICK.trials}


def test_explicit_arguments_override_config(monkeypatch):
    seen = _record_measure(monkeypatch)
    run_benchmark(sizes=[9], trials=2, config=BenchmarkConfig(sizes=(7,), trials=1), verbose=False)
    assert set(seen) == {(9, 2)}
