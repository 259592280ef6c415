from __future__ import annotations

import random
from typing import Any, List, Sequence

from sortscope import ALGORITHMS, AlgorithmEntry, Complexity, run_benchmark, write_artifacts
from sortscope.report import format_analysis, format_results_table


def shell_sort(arr: Sequence[Any]) -> List[Any]:
    """Shell Sort - gapped insertion sort, roughly O(n^1.5) with halving gaps."""
    result = list(arr)
    gap = len(result) // 2
    while gap > 0:
        for i in range(gap, len(result)):
            key = result[i]
            j = i
            while j >= gap and result[j - gap] > key:
                result[j] = result[j - gap]
                j -= gap
            result[j] = key
        gap //= 2
    return result


if __name__ == "__main__":
    # registry entries are plain values, so extra algorithms can be benchmarked alongside
    algorithms = ALGORITHMS + (AlgorithmEntry("Shell Sort", shell_sort, Complexity.LOG_LINEAR),)
    input_sizes = [100, 1_000, 5_000]

    results = run_benchmark(
        sizes=input_sizes,
        trials=3,
        algorithms=algorithms,
        rng=random.Random(42),
    )
    print(format_results_table(results))
    print(format_analysis(results))

    paths = write_artifacts(results, "examples/reports", html_out=True)
    print(f"Analysis complete. Reports saved to {', '.join(str(p) for p in paths)}")
