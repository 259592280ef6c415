# src/sortscope/algorithms.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, List, Sequence, Tuple


class Complexity(Enum):
    QUADRATIC = "O(n^2)"
    LOG_LINEAR = "O(n log n)"


@dataclass(frozen=True)
class AlgorithmEntry:
    name: str
    sort: Callable[[Sequence[Any]], List[Any]]
    complexity: Complexity

    @property
    def is_quadratic(self) -> bool:
        return self.complexity is Complexity.QUADRATIC


def insertion_sort(arr: Sequence[Any]) -> List[Any]:
    """Insertion Sort - O(n^2) time, adaptive on (nearly) sorted input."""
    result = list(arr)  # Don't modify original
    for i in range(1, len(result)):
        key = result[i]
        j = i - 1
        while j >= 0 and result[j] > key:
            result[j + 1] = result[j]
            j -= 1
        result[j + 1] = key
    return result


def selection_sort(arr: Sequence[Any]) -> List[Any]:
    """Selection Sort - O(n^2) time regardless of input order."""
    result = list(arr)
    n = len(result)
    for i in range(n - 1):
        min_idx = i
        for j in range(i + 1, n):
            if result[j] < result[min_idx]:
                min_idx = j
        if min_idx != i:
            result[i], result[min_idx] = result[min_idx], result[i]
    return result


def merge_sort(arr: Sequence[Any]) -> List[Any]:
    """Merge Sort - O(n log n) time, stable."""
    if len(arr) <= 1:
        return list(arr)

    mid = len(arr) // 2
    left = merge_sort(arr[:mid])
    right = merge_sort(arr[mid:])

    return _merge(left, right)


def _merge(left: List[Any], right: List[Any]) -> List[Any]:
    result = []
    i = j = 0

    # <= keeps equal elements from the left run first
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1

    if i < len(left):
        result.extend(left[i:])
    if j < len(right):
        result.extend(right[j:])
    return result


def _median_of_three(arr: Sequence[Any]) -> Any:
    first, middle, last = arr[0], arr[len(arr) // 2], arr[-1]
    if first <= middle <= last:
        return middle
    if first <= last <= middle:
        return last
    if middle <= first <= last:
        return first
    if middle <= last <= first:
        return last
    if last <= first <= middle:
        return first
    return middle


def quick_sort(arr: Sequence[Any]) -> List[Any]:
    """Quick Sort - O(n log n) average time, median-of-three pivot, three-way partition."""
    if len(arr) <= 1:
        return list(arr)

    pivot = _median_of_three(arr)
    less, equal, greater = [], [], []
    for x in arr:
        if x < pivot:
            less.append(x)
        elif x > pivot:
            greater.append(x)
        else:
            equal.append(x)

    return quick_sort(less) + equal + quick_sort(greater)


def _sift_down(heap: List[Any], heap_size: int, i: int) -> None:
    while True:
        largest = i
        left = 2 * i + 1
        right = 2 * i + 2
        if left < heap_size and heap[left] > heap[largest]:
            largest = left
        if right < heap_size and heap[right] > heap[largest]:
            largest = right
        if largest == i:
            return
        heap[i], heap[largest] = heap[largest], heap[i]
        i = largest


def heap_sort(arr: Sequence[Any]) -> List[Any]:
    """Heap Sort - O(n log n) time, O(1) extra space beyond the output copy."""
    heap = list(arr)
    n = len(heap)
    if n <= 1:
        return heap

    # build max-heap from the last non-leaf down
    for i in range(n // 2 - 1, -1, -1):
        _sift_down(heap, n, i)

    for end in range(n - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end, 0)

    return heap


ALGORITHMS: Tuple[AlgorithmEntry, ...] = (
    AlgorithmEntry("Insertion Sort", insertion_sort, Complexity.QUADRATIC),
    AlgorithmEntry("Selection Sort", selection_sort, Complexity.QUADRATIC),
    AlgorithmEntry("Merge Sort", merge_sort, Complexity.LOG_LINEAR),
    AlgorithmEntry("Quick Sort", quick_sort, Complexity.LOG_LINEAR),
    AlgorithmEntry("Heap Sort", heap_sort, Complexity.LOG_LINEAR),
)

_BY_NAME: Dict[str, AlgorithmEntry] = {entry.name: entry for entry in ALGORITHMS}


def get_algorithm(name: str) -> AlgorithmEntry:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise KeyError(f"Unknown algorithm {name!r}; expected one of {list(_BY_NAME)}") from None
