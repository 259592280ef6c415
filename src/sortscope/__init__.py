# src/sortscope/__init__.py
from .algorithms import (
    ALGORITHMS,
    AlgorithmEntry,
    Complexity,
    get_algorithm,
    heap_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)
from .analyze import Analysis, analyze_results
from .config import BenchmarkConfig
from .generators import INPUT_TYPES, InputType, generate
from .io import export_csv, export_json, export_markdown, write_artifacts
from .measure import BenchmarkResult, reduce_median, should_skip
from .runner import run_benchmark

__all__ = [
    "ALGORITHMS",
    "AlgorithmEntry",
    "Analysis",
    "BenchmarkConfig",
    "BenchmarkResult",
    "Complexity",
    "INPUT_TYPES",
    "InputType",
    "analyze_results",
    "export_csv",
    "export_json",
    "export_markdown",
    "generate",
    "get_algorithm",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "reduce_median",
    "run_benchmark",
    "selection_sort",
    "should_skip",
    "write_artifacts",
]

__version__ = "0.1.0"
