"""
Test script for reference engines

Tests:
1. DP oracle distances, table and alignment replay
2. Compact DP and batch ranking
3. Greedy engines as upper bounds
4. Engine factory

Usage:
    python test_reference.py
"""

import sys
from pathlib import Path

import numpy as np
import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from editsearch.reference import (
    EditOperation,
    OperationType,
    ReferenceEngine,
    ReferenceResult,
    apply_operations,
    available_engines,
    batch_distances,
    compact_distance,
    create_engine,
    edit_matrix,
    heuristic_engines,
    quick_approximation,
    register_engine,
)
from editsearch.reference import factory as engine_factory

PAIRS = [
    ("kitten", "sitting", 3),
    ("", "abc", 3),
    ("abc", "", 3),
    ("", "", 0),
    ("abc", "axc", 1),
    ("intention", "execution", 5),
    ("algorithm", "logarithm", 3),
    ("sunday", "saturday", 3),
    ("exponential", "polynomial", 6),
]


def test_dp_oracle():
    """Distances, table corners and replayable alignments."""
    print("\n" + "="*60)
    print("TEST: DP Oracle")
    print("="*60)

    engine = create_engine("dp")
    assert engine.exact
    for source, target, expected in PAIRS:
        result = engine.compute(source, target)
        print(f"  {source!r} -> {target!r}: {result.distance}  {result.describe_edits()}")
        assert result.distance == expected
        assert result.matrix.shape == (len(source) + 1, len(target) + 1)
        assert result.matrix[-1, -1] == expected
        assert len(result.edits) == expected
        assert apply_operations(source, result.operations) == target
        assert result.final_string == target
    print("  [PASS] DP oracle")


def test_dp_traceback_preference():
    """Replace is preferred over delete/insert when tied."""
    print("\n" + "="*60)
    print("TEST: Traceback Preference")
    print("="*60)

    result = create_engine("dp").compute("kitten", "sitting")
    kinds = [op.kind for op in result.edits]
    print(f"  Edits: {result.describe_edits()}")
    assert kinds == [OperationType.REPLACE, OperationType.REPLACE, OperationType.INSERT]
    assert result.edits[0].describe() == "Replace(k->s)"
    assert result.edits[2].describe() == "Insert(g)"

    matrix = edit_matrix("ab", "ba")
    assert matrix.dtype == np.int64
    assert matrix.tolist() == [[0, 1, 2], [1, 1, 1], [2, 1, 2]]
    print("  [PASS] Traceback preference")


def test_compact_and_batch():
    print("\n" + "="*60)
    print("TEST: Compact DP and Batch Ranking")
    print("="*60)

    for source, target, expected in PAIRS:
        assert compact_distance(source, target) == expected
        assert create_engine("dp_compact").distance(source, target) == expected

    ranking = batch_distances("cat", ["dog", "bat", "cat", "cats"])
    print(f"  Ranking: {ranking}")
    assert ranking == [("cat", 0), ("bat", 1), ("cats", 1), ("dog", 3)]
    assert batch_distances("cat", []) == []
    print("  [PASS] Compact DP and batch ranking")


def test_greedy_engines():
    """Positional and affix engines reach the target and never beat the oracle."""
    print("\n" + "="*60)
    print("TEST: Greedy Engines")
    print("="*60)

    for name in ["greedy", "greedy_affix"]:
        engine = create_engine(name)
        assert not engine.exact
        for source, target, expected in PAIRS:
            result = engine.compute(source, target)
            print(f"  {name:<14} {source!r} -> {target!r}: {result.distance} (oracle {expected})")
            assert result.distance >= expected
            assert result.final_string == target
            assert apply_operations(source, result.operations) == target

    # Affix stripping isolates the changed middle
    assert create_engine("greedy").distance("abcdef", "xabcdef") == 7
    assert create_engine("greedy_affix").distance("abcdef", "abXdef") == 1
    print("  [PASS] Greedy engines")


def test_frequency_engine():
    """Counts balanced; order ignored."""
    print("\n" + "="*60)
    print("TEST: Frequency Engine")
    print("="*60)

    engine = create_engine("greedy_frequency")
    result = engine.compute("abc", "abd")
    assert result.distance == 2
    assert result.final_string == "abd"

    result = engine.compute("ab", "ba")
    assert result.distance == 0
    assert result.final_string == "ab"

    assert quick_approximation("same", "same") == 0
    assert quick_approximation("kitten", "sitting") == 3
    assert quick_approximation("", "abc") == 6
    print("  [PASS] Frequency engine")


def test_factory():
    print("\n" + "="*60)
    print("TEST: Engine Factory")
    print("="*60)

    names = available_engines()
    print(f"  Engines: {names}")
    assert names[:2] == ["dp", "dp_compact"]
    assert heuristic_engines() == ["greedy", "greedy_affix", "greedy_frequency"]

    with pytest.raises(ValueError):
        create_engine("bogus")
    with pytest.raises(TypeError):
        register_engine("bogus", object)

    class ReverseEngine(ReferenceEngine):
        @property
        def name(self):
            return "reverse"

        def compute(self, source, target):
            return ReferenceResult(
                distance=len(source) + len(target),
                operations=(),
                final_string=target,
                computation_time_ms=0.0,
                engine_name=self.name,
            )

    try:
        register_engine("reverse", ReverseEngine)
        assert create_engine("reverse").distance("ab", "c") == 3
        assert "reverse" in heuristic_engines()
    finally:
        engine_factory._ENGINE_REGISTRY.pop("reverse", None)
        engine_factory._ENGINE_CACHE.pop("reverse", None)
    print("  [PASS] Engine factory")


def test_apply_operations():
    ops = (
        EditOperation(OperationType.DELETE, 0, "x", None),
        EditOperation(OperationType.MATCH, 0, "a", "a"),
        EditOperation(OperationType.INSERT, 1, None, "b"),
        EditOperation(OperationType.REPLACE, 2, "d", "c"),
    )
    assert apply_operations("xad", ops) == "abc"
    assert sum(op.cost for op in ops) == 3


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# REFERENCE ENGINE TESTS")
    print("#"*60)

    tests = [
        ("DP Oracle", test_dp_oracle),
        ("Traceback", test_dp_traceback_preference),
        ("Compact/Batch", test_compact_and_batch),
        ("Greedy", test_greedy_engines),
        ("Frequency", test_frequency_engine),
        ("Factory", test_factory),
        ("Apply Operations", test_apply_operations),
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
