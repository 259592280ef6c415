from __future__ import annotations

from sortscope import analyze_results, run_benchmark
from sortscope.report import build_report_html


def test_basic_api(tmp_path):
    out = tmp_path / "t.html"
    results = run_benchmark(sizes=[50, 100, 200], trials=3, verbose=False)
    analysis = analyze_results(results)
    html = build_report_html(results, title="Test Report", analysis=analysis)
    out.write_text(html, encoding="utf-8")
    assert out.exists()
    assert "Test Report" in html
    assert "Runtime Benchmarks" in html
    assert len(analysis.fastest_by_scenario) == 3 * 4
