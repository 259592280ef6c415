from __future__ import annotations

import functools
import random

import pytest

from sortscope.algorithms import (
    ALGORITHMS,
    Complexity,
    get_algorithm,
    merge_sort,
)
from sortscope.generators import INPUT_TYPES, generate

ENTRIES = [pytest.param(e, id=e.name) for e in ALGORITHMS]


def test_registry_order_and_tags():
    assert [e.name for e in ALGORITHMS] == [
        "Insertion Sort",
        "Selection Sort",
        "Merge Sort",
        "Quick Sort",
        "Heap Sort",
    ]
    quadratic = [e.name for e in ALGORITHMS if e.complexity is Complexity.QUADRATIC]
    assert quadratic == ["Insertion Sort", "Selection Sort"]


@pytest.mark.parametrize("entry", ENTRIES)
@pytest.mark.parametrize("input_type", INPUT_TYPES, ids=str)
@pytest.mark.parametrize("size", [0, 1, 2, 17, 500])
def test_sort_is_ordered_permutation(entry, input_type, size):
    data = generate(input_type, size, random.Random(size))
    out = entry.sort(data)
    assert out == sorted(data)


@pytest.mark.parametrize("entry", ENTRIES)
def test_sort_does_not_mutate_input(entry):
    data = [5, 3, 9, 1, 3, 7, 0, 2]
    snapshot = list(data)
    out = entry.sort(data)
    assert data == snapshot
    assert out is not data


@pytest.mark.parametrize("entry", ENTRIES)
def test_sort_returns_copy_for_trivial_inputs(entry):
    single = [42]
    out = entry.sort(single)
    assert out == [42]
    assert out is not single
    assert entry.sort([]) == []


@pytest.mark.parametrize("entry", ENTRIES)
def test_sort_handles_duplicates_and_negatives(entry):
    data = [3, -1, 3, 0, -1, 3, 2, 2, -5]
    assert entry.sort(data) == sorted(data)


@pytest.mark.parametrize("entry", ENTRIES)
def test_sort_accepts_tuples_and_strings(entry):
    assert entry.sort(("pear", "apple", "fig")) == ["apple", "fig", "pear"]


@functools.total_ordering
class Keyed:
    def __init__(self, key, label):
        self.key = key
        self.label = label

    def __eq__(self, other):
        return self.key == other.key

    def __lt__(self, other):
        return self.key < other.key


def test_merge_sort_is_stable():
    data = [Keyed(3, "a"), Keyed(1, "b"), Keyed(3, "c")]
    out = merge_sort(data)
    assert [(x.key, x.label) for x in out] == [(1, "b"), (3, "a"), (3, "c")]


def test_merge_sort_stable_on_many_equal_keys():
    rng = random.Random(7)
    data = [Keyed(rng.randrange(5), i) for i in range(200)]
    out = merge_sort(data)
    for prev, cur in zip(out, out[1:]):
        assert prev.key <= cur.key
        if prev.key == cur.key:
            assert prev.label < cur.label


def test_get_algorithm():
    assert get_algorithm("Heap Sort").name == "Heap Sort"
    with pytest.raises(KeyError):
        get_algorithm("Bogo Sort")
