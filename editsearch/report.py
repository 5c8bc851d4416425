"""
Report Module - Plain-text rendering of harness and benchmark results.
"""

import math
from typing import Dict, List, Sequence, Tuple

from .harness import PairComparison, StrategyOutcome, SuiteResult
from .timing import BenchmarkResult

RULE = "=" * 72


def _verdict(outcome: StrategyOutcome) -> str:
    if not outcome.paths_valid:
        return "BAD PATH"
    if outcome.agrees is None:
        return "cancelled" if outcome.result.was_cancelled else "out of bound"
    return "ok" if outcome.agrees else "MISMATCH"


def _ratio(value: float) -> str:
    return "inf" if math.isinf(value) else f"{value:.2f}"


def format_comparison(comparison: PairComparison, show_paths: int = 3) -> str:
    """
    Render one pair: oracle, per-strategy verdicts and heuristic ratios.

    Args:
        comparison: Output of compare_pair()
        show_paths: How many sorted paths to list per strategy (0 for none)
    """
    lines = [
        RULE,
        f"{comparison.source!r} -> {comparison.target!r}",
        f"Oracle distance: {comparison.oracle_distance} ({comparison.oracle_time_ms:.3f} ms)",
        "-" * 72,
        f"{'Strategy':<16}{'Distance':>10}{'Paths':>8}{'Nodes':>10}{'Peak':>9}{'ms':>10}  Verdict",
    ]
    for outcome in comparison.strategies:
        result = outcome.result
        found = "-" if result.min_distance is None else str(result.min_distance)
        lines.append(
            f"{outcome.strategy_name:<16}{found:>10}{result.path_count:>8}"
            f"{result.nodes_explored:>10}{result.peak_frontier_size:>9}"
            f"{result.metrics.computation_time_ms:>10.2f}  {_verdict(outcome)}"
        )
        for path in result.sorted_paths()[:show_paths]:
            lines.append("    " + " -> ".join(repr(s) for s in path))

    if comparison.engines:
        lines.append("-" * 72)
        lines.append(f"{'Engine':<20}{'Distance':>10}{'Ratio':>8}{'ms':>10}  Reaches target")
        for engine in comparison.engines:
            lines.append(
                f"{engine.engine_name:<20}{engine.distance:>10}{_ratio(engine.ratio):>8}"
                f"{engine.computation_time_ms:>10.3f}  {'yes' if engine.reaches_target else 'no'}"
            )
    return "\n".join(lines)


def format_suite(suite: SuiteResult) -> str:
    """Compact one-line-per-case summary of a suite."""
    lines = [
        RULE,
        f"Suite: {suite.name} ({len(suite.comparisons)} cases)",
        "-" * 72,
    ]
    for case, comparison in zip(suite.cases, suite.comparisons):
        status = "PASS" if comparison.all_agree else "FAIL"
        note = ""
        if comparison.cancelled:
            note = f"  cancelled: {', '.join(comparison.cancelled)}"
        if comparison.disagreements:
            note += f"  disagree: {', '.join(comparison.disagreements)}"
        lines.append(
            f"[{status}] {case.source!r} -> {case.target!r}: "
            f"oracle {comparison.oracle_distance} (expected {case.expected_distance}){note}"
        )

    passed = sum(1 for c in suite.comparisons if c.all_agree)
    lines.append("-" * 72)
    lines.append(f"Passed: {passed}/{len(suite.comparisons)}")
    for case in suite.oracle_mismatches:
        lines.append(f"Note: recorded distance for {case.source!r} -> {case.target!r} is wrong")
    return "\n".join(lines)


def format_ranking(target: str, ranking: Sequence[Tuple[str, int]]) -> str:
    lines = [RULE, f"Candidates ranked against {target!r}", "-" * 72]
    for rank, (candidate, dist) in enumerate(ranking, 1):
        lines.append(f"{rank:>3}. {candidate!r:<30} distance {dist}")
    return "\n".join(lines)


def format_benchmarks(results: List[BenchmarkResult]) -> str:
    lines = [
        RULE,
        f"{'Benchmark':<32}{'Avg':>9}{'Min':>9}{'Max':>9}{'Std':>9}{'Median':>9}{'RSS MB':>9}",
        "-" * 86,
    ]
    for r in results:
        lines.append(
            f"{r.test_name:<32}{r.avg_time:>9.3f}{r.min_time:>9.3f}{r.max_time:>9.3f}"
            f"{r.std_dev:>9.3f}{r.median:>9.3f}{r.rss_delta_mb:>9.2f}"
        )
    return "\n".join(lines)


def format_strategies(info: Sequence[Dict[str, str]]) -> str:
    """Render get_strategy_info(): ordering, admission, paths and options."""
    lines = [
        RULE,
        f"{'Strategy':<16}{'Ordering':<22}{'Admit':<7}{'Paths':<8}Options",
        "-" * 72,
    ]
    for entry in info:
        lines.append(
            f"{entry['name']:<16}{entry['ordering']:<22}{entry['admission']:<7}"
            f"{entry['paths']:<8}{entry['options'] or '-'}"
        )
        lines.append(f"    {entry['description']}")
    return "\n".join(lines)
