from __future__ import annotations

import random

import pytest

from sortscope.generators import (
    INPUT_TYPES,
    InputType,
    generate,
    generate_nearly_sorted,
    generate_random,
    generate_reverse,
    generate_sorted,
)


@pytest.mark.parametrize("input_type", INPUT_TYPES, ids=str)
@pytest.mark.parametrize("size", [0, 1, 9, 10, 100, 1000])
def test_length_matches_size(input_type, size):
    assert len(generate(input_type, size)) == size


def test_iteration_order():
    assert [t.value for t in INPUT_TYPES] == ["Random", "Sorted", "Reverse", "Nearly Sorted"]


def test_sorted_and_reverse_values():
    assert generate_sorted(5) == [0, 1, 2, 3, 4]
    # reverse runs size..1, not size-1..0
    assert generate_reverse(5) == [5, 4, 3, 2, 1]


def test_random_range():
    data = generate_random(200, random.Random(1))
    assert all(0 <= x < 2000 for x in data)


def test_random_is_reproducible_with_seeded_rng():
    assert generate_random(50, random.Random(3)) == generate_random(50, random.Random(3))


def test_nearly_sorted_is_permutation_with_few_displacements():
    size = 1000
    data = generate_nearly_sorted(size, random.Random(11))
    assert sorted(data) == list(range(size))
    displaced = sum(1 for i, x in enumerate(data) if i != x)
    assert displaced <= 2 * (size // 10)


def test_nearly_sorted_small_sizes_are_sorted():
    # fewer than 10 elements means zero swaps
    assert generate_nearly_sorted(9) == list(range(9))


@pytest.mark.parametrize("input_type", INPUT_TYPES, ids=str)
def test_negative_size_rejected(input_type):
    with pytest.raises(ValueError):
        generate(input_type, -1)

