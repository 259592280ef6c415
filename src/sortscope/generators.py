# src/sortscope/generators.py
from __future__ import annotations

import random
from enum import Enum
from typing import Callable, Dict, List, Optional


class InputType(Enum):
    RANDOM = "Random"
    SORTED = "Sorted"
    REVERSE = "Reverse"
    NEARLY_SORTED = "Nearly Sorted"

    def __str__(self) -> str:
        return self.value


# iteration order used by the runner
INPUT_TYPES = (InputType.RANDOM, InputType.SORTED, InputType.REVERSE, InputType.NEARLY_SORTED)


def _check_size(size: int) -> None:
    if not isinstance(size, int) or size < 0:
        raise ValueError("size must be a non-negative integer.")


def generate_random(size: int, rng: Optional[random.Random] = None) -> List[int]:
    """Independent uniform draws from [0, size * 10)."""
    _check_size(size)
    rng = rng or random
    upper = size * 10
    return [rng.randrange(upper) for _ in range(size)]


def generate_sorted(size: int, rng: Optional[random.Random] = None) -> List[int]:
    _check_size(size)
    return list(range(size))


def generate_reverse(size: int, rng: Optional[random.Random] = None) -> List[int]:
    """size, size-1, ..., 1. Values run from 1, unlike generate_sorted."""
    _check_size(size)
    return list(range(size, 0, -1))


def generate_nearly_sorted(size: int, rng: Optional[random.Random] = None) -> List[int]:
    """
    Sorted sequence disturbed by size // 10 random swaps.

    Index pairs are drawn with replacement, so a swap can be a no-op and fewer
    than size // 10 positions may end up out of place.
    """
    _check_size(size)
    rng = rng or random
    arr = list(range(size))
    for _ in range(size // 10):
        i = rng.randrange(size)
        j = rng.randrange(size)
        arr[i], arr[j] = arr[j], arr[i]
    return arr


GENERATORS: Dict[InputType, Callable[..., List[int]]] = {
    InputType.RANDOM: generate_random,
    InputType.SORTED: generate_sorted,
    InputType.REVERSE: generate_reverse,
    InputType.NEARLY_SORTED: generate_nearly_sorted,
}


def generate(input_type: InputType, size: int, rng: Optional[random.Random] = None) -> List[int]:
    try:
        builder = GENERATORS[input_type]
    except KeyError:
        raise ValueError(f"No generator registered for {input_type!r}") from None
    return builder(size, rng)
