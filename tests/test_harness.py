"""
Test script for the comparison harness, reports, timing, settings and CLI

Usage:
    python test_harness.py
"""

import copy
import json
import logging
import math
import sys
import tempfile
from pathlib import Path
from unittest import mock

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from editsearch.datagen import CorpusGenerator, TestCase
from editsearch.harness import (
    approximation_ratio,
    compare_pair,
    random_cases,
    rank_candidates,
    run_suite,
)
from editsearch.reference import compact_distance
from editsearch.report import (
    format_benchmarks,
    format_comparison,
    format_ranking,
    format_strategies,
    format_suite,
)
from editsearch.search import ResultSet, SearchStrategy, get_strategy_info, register_strategy
from editsearch.search import factory as strategy_factory
from editsearch.settings import DEFAULT_SETTINGS, load_settings, save_settings
from editsearch.timing import (
    BenchmarkResult,
    PerformanceTimer,
    current_rss_mb,
    measure_time,
    run_benchmark,
)
import main as cli

FAST_STRATEGIES = ["exhaustive", "all_paths", "heuristic", "bidirectional"]


def test_compare_pair():
    """Strategies agree with the oracle; heuristics get ratios."""
    print("\n" + "="*60)
    print("TEST: compare_pair")
    print("="*60)

    comparison = compare_pair("kitten", "sitting", FAST_STRATEGIES, alphabet="")
    print(format_comparison(comparison))

    assert comparison.oracle_distance == 3
    assert comparison.all_agree
    assert [o.strategy_name for o in comparison.strategies] == FAST_STRATEGIES
    assert all(o.agrees for o in comparison.strategies)
    assert all(o.paths_valid for o in comparison.strategies)

    engines = {e.engine_name: e for e in comparison.engines}
    assert set(engines) == {"greedy", "greedy_affix", "greedy_frequency"}
    assert engines["greedy"].ratio == 1.0
    assert engines["greedy"].reaches_target
    assert engines["greedy_frequency"].distance == 5
    assert not engines["greedy_frequency"].reaches_target
    print("  [PASS] compare_pair")


def test_compare_pair_without_verdict():
    """Depth budgets and node caps are not disagreements."""
    print("\n" + "="*60)
    print("TEST: compare_pair without verdict")
    print("="*60)

    bounded = compare_pair("kitten", "sitting", ["bounded"], [], max_depth=2, alphabet="")
    outcome = bounded.strategies[0]
    assert outcome.agrees is None
    assert not outcome.result.was_cancelled
    assert bounded.all_agree
    assert "out of bound" in format_comparison(bounded)

    capped = compare_pair("kitten", "sitting", ["all_paths"], [], max_nodes=1)
    assert capped.strategies[0].agrees is None
    assert capped.cancelled == ["all_paths"]
    assert capped.all_agree
    assert "cancelled" in format_comparison(capped)
    print("  [PASS] compare_pair without verdict")


def test_disagreement_detected():
    """A wrong strategy is flagged."""
    print("\n" + "="*60)
    print("TEST: Disagreement Detection")
    print("="*60)

    @register_strategy
    class AlwaysZeroStrategy(SearchStrategy):
        name = "always_zero"
        description = "Claims every pair is identical"

        def search(self, context):
            return ResultSet(min_distance=0)

    try:
        comparison = compare_pair("abc", "axc", ["exhaustive", "always_zero"], [])
        assert comparison.disagreements == ["always_zero"]
        assert not comparison.all_agree
        assert "MISMATCH" in format_comparison(comparison)
    finally:
        strategy_factory._STRATEGIES.pop("always_zero", None)
    print("  [PASS] Disagreement detection")


def test_run_suite():
    print("\n" + "="*60)
    print("TEST: run_suite")
    print("="*60)

    cases = [
        TestCase("abc", "ab", 1, "Delete"),
        TestCase("ab", "abc", 1, "Insert"),
        TestCase("", "", 0, "Empty"),
        TestCase("cat", "dog", 3, "Disjoint"),
        TestCase("ab", "ba", 1, "Recorded wrongly"),
    ]
    suite = run_suite(cases, FAST_STRATEGIES + ["bounded"], name="small", max_depth=3, alphabet="")
    report = format_suite(suite)
    print(report)

    assert suite.all_agree
    assert len(suite.comparisons) == len(cases)
    assert [c.source for c in suite.oracle_mismatches] == ["ab"]
    assert "Passed: 5/5" in report

    generated = random_cases(CorpusGenerator(seed=3), count=4, max_length=3)
    assert len(generated) == 4
    for case in generated:
        assert case.expected_distance == compact_distance(case.source, case.target)
    assert run_suite(generated, ["exhaustive", "bidirectional"], []).all_agree
    print("  [PASS] run_suite")


def test_ranking():
    ranking = rank_candidates("cat", ["dog", "bat", "cat", "cats"])
    assert ranking == [("cat", 0), ("bat", 1), ("cats", 1), ("dog", 3)]
    assert rank_candidates("cat", ["dog", "bat", "cat"], limit=2) == [("cat", 0), ("bat", 1)]
    text = format_ranking("cat", ranking)
    assert "1. 'cat'" in text

    assert approximation_ratio(6, 3) == 2.0
    assert approximation_ratio(0, 0) == 1.0
    assert math.isinf(approximation_ratio(2, 0))


def test_timing():
    """Stopwatch, benchmark statistics and memory readings."""
    print("\n" + "="*60)
    print("TEST: Timing")
    print("="*60)

    timer = PerformanceTimer()
    timer.start()
    compact_distance("kitten", "sitting")
    elapsed = timer.stop()
    timer.record("compact kitten", elapsed)
    assert elapsed >= 0
    assert timer.results() == {"compact kitten": elapsed}
    assert "compact kitten" in timer.report()
    timer.clear()
    assert timer.results() == {}

    assert measure_time(lambda: None) >= 0
    assert current_rss_mb() > 0

    stats = BenchmarkResult("fixed", 4, all_times=[1.0, 2.0, 3.0, 4.0])
    assert stats.avg_time == 2.5
    assert stats.min_time == 1.0 and stats.max_time == 4.0
    assert stats.median == 2.5
    assert stats.std_dev == pytest.approx(math.sqrt(1.25))
    assert BenchmarkResult("empty", 0).avg_time == 0.0

    result = run_benchmark("compact", lambda: compact_distance("abc", "abd"), iterations=3)
    assert result.iterations == 3 and len(result.all_times) == 3
    assert "compact" in format_benchmarks([result])

    with pytest.raises(ValueError):
        run_benchmark("none", lambda: None, iterations=0)
    print("  [PASS] Timing")


def test_settings():
    """Merge over defaults, fall back on bad files, round trip."""
    print("\n" + "="*60)
    print("TEST: Settings")
    print("="*60)

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.json"

        assert load_settings(path) == DEFAULT_SETTINGS

        path.write_text(json.dumps({"max_depth": 7}), encoding="utf-8")
        settings = load_settings(path)
        assert settings["max_depth"] == 7
        assert settings["seed"] == DEFAULT_SETTINGS["seed"]

        path.write_text("{not json", encoding="utf-8")
        assert load_settings(path) == DEFAULT_SETTINGS

        path.write_text("[1, 2]", encoding="utf-8")
        assert load_settings(path) == DEFAULT_SETTINGS

        settings["strategy_names"] = ["heuristic"]
        save_settings(settings, path)
        assert load_settings(path)["strategy_names"] == ["heuristic"]

    # Defaults are never mutated through a returned copy
    assert load_settings(Path("does-not-exist.json")) is not DEFAULT_SETTINGS
    pristine = copy.deepcopy(DEFAULT_SETTINGS)
    loaded = load_settings(Path("does-not-exist.json"))
    loaded["strategy_names"].append("bounded")
    assert DEFAULT_SETTINGS == pristine
    assert "bounded" not in DEFAULT_SETTINGS["strategy_names"]

    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.json"
        path.write_text(json.dumps({"seed": 1}), encoding="utf-8")
        load_settings(path)["strategy_names"].clear()
    assert DEFAULT_SETTINGS == pristine
    print("  [PASS] Settings")


def test_cli():
    """Exit code reflects agreement with the oracle."""
    print("\n" + "="*60)
    print("TEST: Command Line")
    print("="*60)

    with tempfile.TemporaryDirectory() as tmp:
        config = str(Path(tmp) / "config.json")
        code = cli.main([
            "--pair", "abc", "axc",
            "--strategies", "exhaustive", "bidirectional",
            "--rank", "cat", "bat", "dog",
            "--config", config,
        ])
        assert code == 0

        assert cli.main(["--pair", "a", "b", "--strategies", "nope", "--config", config]) == 2

        cli.main([
            "--pair", "a", "b", "--strategies", "heuristic",
            "--max-depth", "5", "--config", config, "--save-config",
        ])
        saved = json.loads(Path(config).read_text(encoding="utf-8"))
        assert saved["strategy_names"] == ["heuristic"]
        assert saved["max_depth"] == 5

        assert cli.main(["--list-strategies", "--config", config]) == 0

    listing = format_strategies(get_strategy_info())
    print(listing)
    assert "max_depth=3" in listing
    assert "stop_rule='sum'" in listing
    assert "priority f = g + h" in listing
    print("  [PASS] Command line")


def test_cli_logging_order():
    """Logging is configured before settings load, then re-levelled from them."""
    print("\n" + "="*60)
    print("TEST: Command Line Logging")
    print("="*60)

    calls = []
    with mock.patch.object(cli, "setup_logging", side_effect=lambda debug: calls.append(("logging", debug))), \
            mock.patch.object(cli, "load_settings",
                              side_effect=lambda path: calls.append(("settings", path)) or copy.deepcopy(DEFAULT_SETTINGS)):
        assert cli.main(["--pair", "a", "b", "--strategies", "exhaustive", "--config", "unused.json"]) == 0
    print(f"  Calls: {calls}")
    assert calls[0] == ("logging", False)
    assert calls[1] == ("settings", "unused.json")

    root = logging.getLogger()
    previous = root.level
    try:
        root.setLevel(logging.INFO)
        with tempfile.TemporaryDirectory() as tmp:
            config = Path(tmp) / "config.json"
            config.write_text(json.dumps({"debug_enabled": True}), encoding="utf-8")
            with mock.patch.object(cli, "setup_logging"):
                cli.main(["--pair", "a", "b", "--strategies", "exhaustive", "--config", str(config)])
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(previous)
    print("  [PASS] Command line logging")


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# HARNESS TESTS")
    print("#"*60)

    tests = [
        ("compare_pair", test_compare_pair),
        ("No Verdict", test_compare_pair_without_verdict),
        ("Disagreement", test_disagreement_detected),
        ("run_suite", test_run_suite),
        ("Ranking", test_ranking),
        ("Timing", test_timing),
        ("Settings", test_settings),
        ("CLI", test_cli),
        ("CLI Logging", test_cli_logging_order),
    ]

    all_passed = True
    for name, func in tests:
        try:
            func()
            print(f"  {name}: [PASS]")
        except AssertionError as e:
            print(f"  {name}: [FAIL] {e}")
            all_passed = False

    print()
    print("All tests PASSED!" if all_passed else "Some tests FAILED!")
    return 0 if all_passed else 1


if __name__ == "__main__":
    sys.exit(main())
