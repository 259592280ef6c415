# src/sortscope/cli.py
"""
Command-line driver.

Usage:
    sortscope                      # sizes 10..50000, 3 trials
    sortscope --quick
    sortscope --sizes 100 1000 --trials 5 --html
"""
from __future__ import annotations

import argparse
from typing import List, Optional

from .algorithms import ALGORITHMS
from .analyze import analyze_results
from .config import DEFAULT, QUADRATIC_SIZE_LIMIT, QUICK, BenchmarkConfig
from .io import write_artifacts
from .report import format_analysis, format_recommendations, format_results_table
from .runner import run_benchmark

BANNER_WIDTH = 60


def _banner(text: str) -> str:
    inner = BANNER_WIDTH
    return "\n".join([
        "╔" + "═" * inner + "╗",
        "║" + text.center(inner) + "║",
        "╚" + "═" * inner + "╝",
    ])


def _section(title: str) -> str:
    return "\n" + "═" * BANNER_WIDTH + "\n" + title + "\n" + "═" * BANNER_WIDTH + "\n"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sortscope",
        description="Benchmark five classic sorting algorithms across input sizes and distributions.",
    )
    p.add_argument("--sizes", type=int, nargs="+", default=None,
                   help=f"Input sizes to test (default: {' '.join(map(str, DEFAULT.sizes))})")
    p.add_argument("--trials", type=int, default=None,
                   help=f"Trials per combination, reduced by median (default: {DEFAULT.trials})")
    p.add_argument("--quick", action="store_true",
                   help=f"Quick mode: sizes {' '.join(map(str, QUICK.sizes))}, {QUICK.trials} trial")
    p.add_argument("--output-dir", "-o", default=".",
                   help="Directory for the exported reports (default: current directory)")
    p.add_argument("--json", action="store_true", help="Also write a JSON export")
    p.add_argument("--html", action="store_true", help="Also write an HTML report with charts")
    p.add_argument("--quadratic-limit", type=int, default=QUADRATIC_SIZE_LIMIT,
                   help=f"Skip O(n^2) algorithms above this size (default: {QUADRATIC_SIZE_LIMIT:,})")
    p.add_argument("--warmup", type=int, default=0, help="Untimed warmup runs per combination")
    p.add_argument("--no-gc", action="store_true", help="Do not run gc.collect() before each trial")
    p.add_argument("--seed", type=int, default=None, help="Seed for the input generators")
    p.add_argument("--quiet", "-q", action="store_true", help="Only print the final reports")
    return p


def config_from_args(args: argparse.Namespace) -> BenchmarkConfig:
    preset = QUICK if args.quick else DEFAULT
    return BenchmarkConfig(
        sizes=tuple(args.sizes) if args.sizes else preset.sizes,
        trials=args.trials if args.trials is not None else preset.trials,
        quadratic_limit=args.quadratic_limit,
        warmup=args.warmup,
        gc_collect=not args.no_gc,
        seed=args.seed,
    ).validate()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        config = config_from_args(args)
    except ValueError as e:
        parser.error(str(e))
    verbose = not args.quiet

    if verbose:
        print(_banner("SORTING ALGORITHM BENCHMARK SUITE"))
        print()
        print(f"This benchmark will test {len(ALGORITHMS)} sorting algorithms:")
        for entry in ALGORITHMS:
            print(f"  • {entry.name} ({entry.complexity.value})")
        print()
        print("Configuration:")
        print(f"  • Input sizes: {', '.join(str(n) for n in config.sizes)}")
        print(f"  • Trials per test: {config.trials}")
        print(f"  • Mode: {'QUICK (for testing)' if args.quick else 'FULL (accurate results)'}")
        print()
        print("Starting benchmark... this may take a few minutes ⏳")
        print("─" * BANNER_WIDTH)
        print()

    results = run_benchmark(config=config, verbose=verbose)
    analysis = analyze_results(results)

    if verbose:
        print("─" * BANNER_WIDTH)
        print("Benchmark complete!")
        print()

    print(format_results_table(results))
    print(format_analysis(results, analysis))

    print(_section("EXPORTING RESULTS"))
    try:
        paths = write_artifacts(results, args.output_dir, json_out=args.json, html_out=args.html)
    except OSError as e:
        print(f"⚠ Warning: Could not export files: {e}")
        print("  Results are still displayed in console output.")
    else:
        for path in paths:
            print(f"✓ Exported: {path.resolve()}")

    print(_section("RECOMMENDATIONS"))
    print(format_recommendations(results, analysis))

    if verbose:
        print(_banner("BENCHMARK COMPLETE"))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
