# src/sortscope/report.py
from __future__ import annotations

import importlib.resources as pkg_resources
from datetime import datetime
from typing import Dict, List, Optional, Sequence

import numpy as np
import plotly.io as pio
from jinja2 import BaseLoader, Environment
from markupsafe import escape

from .analyze import (
    LARGE_RANDOM_SIZE,
    Analysis,
    analyze_results,
)
from .generators import INPUT_TYPES, InputType
from .measure import BenchmarkResult
from .plotting import build_reference_curves, heatmap_figure, runtime_figure
from .utils import group_by, human_time, unique

RULE = "-" * 60

format_time = human_time


def format_results_table(results: Sequence[BenchmarkResult]) -> str:
    """Results grouped by (input type, size), each group fastest first."""
    lines = ["=== Benchmark Results Table ===", ""]
    grouped = group_by(results, lambda r: (r.input_type, r.input_size))
    for input_type, size in sorted(grouped, key=lambda k: (k[0].value, k[1])):
        lines.append(f"{input_type} data, size {size}:")
        lines.append(RULE)
        for r in sorted(grouped[(input_type, size)], key=lambda r: r.time_seconds):
            lines.append(f"  {r.algorithm_name:<20} {format_time(r.time_seconds)}")
        lines.append("")
    return "\n".join(lines)


def format_analysis(results: Sequence[BenchmarkResult], analysis: Optional[Analysis] = None) -> str:
    a = analysis or analyze_results(results)
    lines = ["=== Performance Analysis ===", ""]

    lines.append("Fastest algorithm for each scenario:")
    lines.append(RULE)
    if not a.fastest_by_scenario:
        lines.append("  No data for this analysis.")
    for (input_type, size), r in a.fastest_by_scenario.items():
        lines.append(f"  {input_type}-{size}: {r.algorithm_name} ({format_time(r.time_seconds)})")

    lines.append("")
    lines.append("Key Observations:")
    lines.append(RULE)

    if a.large_random_means:
        lines.append("")
        lines.append(f"Average time on large random inputs (≥{LARGE_RANDOM_SIZE:,}):")
        for name, avg in a.large_random_means.items():
            lines.append(f"  {name:<20} {format_time(avg)}")

    if a.best_case:
        lines.append("")
        lines.append("Best-case (already sorted) performance:")
        for name, avg in a.best_case:
            lines.append(f"  {name:<20} {format_time(avg)}")

    if a.worst_case:
        lines.append("")
        lines.append("Worst-case (reverse sorted) performance:")
        for name, avg in a.worst_case:
            lines.append(f"  {name:<20} {format_time(avg)}")

    if a.adaptive_algorithms:
        lines.append("")
        lines.append("Adaptive behaviour (random time / sorted time):")
        for ad in a.adaptive_algorithms:
            lines.append(f"  {ad.algorithm:<20} {ad.ratio:.1f}x at size {ad.size}")

    return "\n".join(lines) + "\n"


def format_recommendations(results: Sequence[BenchmarkResult], analysis: Optional[Analysis] = None) -> str:
    a = analysis or analyze_results(results)
    lines = ["Based on your benchmark results:", ""]

    if a.overall_winner is not None:
        lines += [
            "For general-purpose sorting:",
            f"  → Use {a.overall_winner[0]}",
            "    (Fastest on random data)",
            "",
        ]

    adaptive = a.adaptive_algorithms
    if adaptive:
        best = max(adaptive, key=lambda ad: ad.ratio)
        lines += [
            "For nearly sorted data:",
            f"  → Use {best.algorithm}",
            f"    ({best.ratio:.0f}x faster on sorted data!)",
            "",
        ]

    lines += [
        "For production systems:",
        "  → Consider hybrid algorithms (Timsort, Introsort)",
        "    These combine strengths of multiple algorithms",
        "",
        "For memory-constrained systems:",
        "  → Use Heap Sort or in-place Quick Sort",
        "    Both use O(1) or O(log n) extra space",
        "",
        "When stability matters:",
        "  → Use Merge Sort or Insertion Sort",
        "    These preserve relative order of equal elements",
    ]
    return "\n".join(lines) + "\n"


def build_summary_report(
    results: Sequence[BenchmarkResult],
    generated_at: Optional[datetime] = None,
    analysis: Optional[Analysis] = None,
) -> str:
    """Plain-text summary written to BENCHMARK_SUMMARY.txt."""
    a = analysis or analyze_results(results)
    generated_at = generated_at or datetime.now()
    lines = [
        "SORTING ALGORITHM BENCHMARK SUMMARY",
        "=" * 60,
        "",
        f"Generated: {generated_at.isoformat(timespec='seconds')}",
        "",
    ]

    if a.overall_winner is not None:
        name, avg = a.overall_winner
        lines += [
            "OVERALL WINNER (Random Data, Large Inputs):",
            f"  {name} - Average time: {avg:.6f}s",
            "",
        ]

    if a.best_on_sorted is not None:
        best = a.best_on_sorted
        lines += [
            "BEST FOR ALREADY SORTED DATA:",
            f"  {best.algorithm_name} - {best.time_seconds:.6f}s on size {best.input_size}",
            "",
        ]

    lines += ["STATISTICS:", RULE]
    for name, s in a.statistics.items():
        lines += [
            f"{name}:",
            f"  Average: {s.mean:.6f}s",
            f"  Min: {s.min:.6f}s",
            f"  Max: {s.max:.6f}s",
            "",
        ]
    return "\n".join(lines) + "\n"


# ----------------------
# HTML report
# ----------------------
def load_template_text() -> str:
    tmpl = pkg_resources.files("sortscope.templates").joinpath("report.html.j2")
    return tmpl.read_text(encoding="utf-8")


def _runtime_divs(results: Sequence[BenchmarkResult]) -> Dict[str, str]:
    divs: Dict[str, str] = {}
    algorithms = unique(r.algorithm_name for r in results)
    for input_type in INPUT_TYPES:
        subset = [r for r in results if r.input_type is input_type]
        if not subset:
            continue
        sizes = sorted(unique(r.input_size for r in subset))
        lookup = {(r.algorithm_name, r.input_size): r.time_seconds for r in subset}
        means = {
            name: [lookup.get((name, n), float("nan")) for n in sizes]
            for name in algorithms
        }
        last = [v[-1] for v in means.values() if np.isfinite(v[-1])]
        anchor = float(np.mean(last)) if last else 1.0
        refs = build_reference_curves(sizes, ("n", "nlogn", "n**2"), anchor)
        fig = runtime_figure(sizes, means, refs, f"{input_type} input")
        divs[input_type.value] = pio.to_html(fig, include_plotlyjs=False, full_html=False)
    return divs


def _heatmap_div(results: Sequence[BenchmarkResult]) -> str:
    if not results:
        return ""
    largest = max(r.input_size for r in results)
    subset = [r for r in results if r.input_size == largest]
    algorithms = unique(r.algorithm_name for r in subset)
    columns = [t.value for t in INPUT_TYPES]
    lookup = {(r.algorithm_name, r.input_type.value): r.time_seconds for r in subset}
    z = np.array([[lookup.get((a, c), np.nan) for c in columns] for a in algorithms], dtype=float)
    fig = heatmap_figure(columns, algorithms, z, title=f"Median time at size {largest}")
    return pio.to_html(fig, include_plotlyjs=False, full_html=False)


def build_report_html(
    results: Sequence[BenchmarkResult],
    title: str = "Sorting Algorithm Benchmark",
    notes: Optional[str] = None,
    analysis: Optional[Analysis] = None,
) -> str:
    a = analysis or analyze_results(results)
    env = Environment(loader=BaseLoader())
    env.filters["human_time"] = human_time
    tpl = env.from_string(load_template_text())

    sizes = sorted(unique(r.input_size for r in results))
    columns: List[InputType] = list(INPUT_TYPES)
    table = []
    for size in sizes:
        for name in unique(r.algorithm_name for r in results if r.input_size == size):
            cells = {}
            for t in columns:
                match = next(
                    (r for r in results
                     if r.input_size == size and r.algorithm_name == name and r.input_type is t),
                    None,
                )
                cells[t.value] = match.time_seconds if match else None
            table.append({"size": size, "algorithm": escape(name), "cells": cells})

    return tpl.render(
        title=escape(title),
        notes=escape(notes) if notes else None,
        generated_at=datetime.now().isoformat(timespec="seconds"),
        columns=[t.value for t in columns],
        table=table,
        analysis=a,
        analysis_text=escape(format_analysis(results, a)),
        recommendations_text=escape(format_recommendations(results, a)),
        runtime_divs=_runtime_divs(results),
        heatmap_div=_heatmap_div(results),
    )
