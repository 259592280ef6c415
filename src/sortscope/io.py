# src/sortscope/io.py
from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from .analyze import Analysis, analyze_results
from .measure import BenchmarkResult
from .report import build_report_html, build_summary_report
from .utils import group_by, human_time

CSV_FILENAME = "sorting_benchmark_results.csv"
MARKDOWN_FILENAME = "BENCHMARK_RESULTS.md"
SUMMARY_FILENAME = "BENCHMARK_SUMMARY.txt"
JSON_FILENAME = "sorting_benchmark_results.json"
HTML_FILENAME = "BENCHMARK_REPORT.html"

CSV_HEADER = "Algorithm,Size,InputType,TimeSeconds"


def export_csv(results: Sequence[BenchmarkResult]) -> str:
    """
    One row per result in run order. Fields are not quoted, so algorithm
    names must not contain commas.
    """
    lines = [CSV_HEADER]
    for r in results:
        lines.append(f"{r.algorithm_name},{r.input_size},{r.input_type.value},{r.time_seconds!r}")
    return "\n".join(lines) + "\n"


def export_markdown(results: Sequence[BenchmarkResult]) -> str:
    """One `## Size: n` table per size; rows are algorithms, columns input types."""
    lines = ["# Sorting Algorithm Benchmark Results", ""]

    by_size = group_by(results, lambda r: r.input_size)
    for size in sorted(by_size):
        size_results = by_size[size]
        input_types = sorted({r.input_type.value for r in size_results})
        algorithms = sorted({r.algorithm_name for r in size_results})
        cells = {(r.algorithm_name, r.input_type.value): r for r in size_results}

        lines.append(f"## Size: {size}")
        lines.append("")
        lines.append("| Algorithm | " + " | ".join(input_types) + " |")
        lines.append("|-----------|" + "|".join("------" for _ in input_types) + "|")
        for algo in algorithms:
            row = []
            for t in input_types:
                r = cells.get((algo, t))
                row.append(human_time(r.time_seconds) if r is not None else "N/A")
            lines.append(f"| {algo} | " + " | ".join(row) + " |")
        lines.append("")

    return "\n".join(lines) + "\n"


def export_json(results: Sequence[BenchmarkResult], analysis: Optional[Analysis] = None) -> str:
    """
    Structured numeric data plus the derived analysis, for use by external
    tooling (notebooks, dashboards).
    """
    a = analysis or analyze_results(results)
    data: Dict[str, Any] = {
        "results": [
            {
                "algorithm": r.algorithm_name,
                "size": r.input_size,
                "input_type": r.input_type.value,
                "time_seconds": r.time_seconds,
                "time_human": human_time(r.time_seconds),
                "trials": r.trials_performed,
                "trial_times": list(r.trial_times),
            }
            for r in results
        ],
        "analysis": {
            "fastest_by_scenario": [
                {
                    "input_type": t.value,
                    "size": n,
                    "algorithm": r.algorithm_name,
                    "time_seconds": r.time_seconds,
                }
                for (t, n), r in a.fastest_by_scenario.items()
            ],
            "overall_winner": (
                {"algorithm": a.overall_winner[0], "mean_seconds": a.overall_winner[1]}
                if a.overall_winner else None
            ),
            "best_case": [{"algorithm": k, "mean_seconds": v} for k, v in a.best_case],
            "worst_case": [{"algorithm": k, "mean_seconds": v} for k, v in a.worst_case],
            "adaptivity": [
                {"algorithm": ad.algorithm, "size": ad.size, "ratio": ad.ratio, "adaptive": ad.adaptive}
                for ad in a.adaptivity
            ],
            "statistics": {
                name: {"mean": s.mean, "min": s.min, "max": s.max, "count": s.count}
                for name, s in a.statistics.items()
            },
        },
    }
    return json.dumps(data, indent=2, default=str)


def write_artifacts(
    results: Sequence[BenchmarkResult],
    out_dir: str | Path = ".",
    *,
    json_out: bool = False,
    html_out: bool = False,
    generated_at: Optional[datetime] = None,
) -> List[Path]:
    """
    Write the CSV, Markdown and summary reports (plus optional JSON / HTML)
    into out_dir and return the written paths. OSError propagates.
    """
    out_dir = Path(out_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    analysis = analyze_results(results)

    outputs = [
        (CSV_FILENAME, export_csv(results)),
        (MARKDOWN_FILENAME, export_markdown(results)),
        (SUMMARY_FILENAME, build_summary_report(results, generated_at, analysis)),
    ]
    if json_out:
        outputs.append((JSON_FILENAME, export_json(results, analysis)))
    if html_out:
        outputs.append((HTML_FILENAME, build_report_html(results, analysis=analysis)))

    written: List[Path] = []
    for name, text in outputs:
        path = out_dir / name
        path.write_text(text, encoding="utf-8")
        written.append(path)
    return written
