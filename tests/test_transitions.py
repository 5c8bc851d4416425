"""
Test script for the edit-graph neighbourhood

Tests:
1. Neighbour generation order and counts
2. Alphabet resolution
3. Reachability bound
4. Single-edit checks

Usage:
    python test_transitions.py
"""

import string
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from editsearch.search import (
    DEFAULT_ALPHABET,
    TransitionGenerator,
    is_single_edit,
    neighbors,
    reachability_bound,
    resolve_alphabet,
)


def test_neighbor_order():
    """Deletions, then insertions, then substitutions."""
    print("\n" + "="*60)
    print("TEST: Neighbour Order")
    print("="*60)

    result = neighbors("ab", ("a", "b"))
    print(f"  neighbors('ab'): {result}")

    assert result == [
        "b", "a",                                # deletions
        "aab", "bab", "aab", "abb", "aba", "abb",  # insertions
        "bb", "aa",                              # substitutions
    ]
    print("  [PASS] Neighbour order")


def test_neighbor_counts():
    """Counts follow len + (len+1)*|A| + len*(|A|-1)."""
    print("\n" + "="*60)
    print("TEST: Neighbour Counts")
    print("="*60)

    alphabet = tuple("eiknst")
    for value in ["", "k", "kitten", "sitting"]:
        gen = TransitionGenerator(alphabet=alphabet)
        produced = gen(value)
        print(f"  {value!r}: {len(produced)} neighbours")
        assert len(produced) == gen.expected_count(value)

    # 'g' is outside the alphabet, so it has |A| substitutes
    gen = TransitionGenerator(alphabet=("a",))
    assert neighbors("g", gen.alphabet) == ["", "ag", "ga", "a"]
    assert gen.expected_count("g") == 4

    # Empty string: insertions only
    assert neighbors("", ("x", "y")) == ["x", "y"]
    print("  [PASS] Neighbour counts")


def test_neighbors_are_single_edits():
    """Every neighbour is one edit away and never equal to the input."""
    print("\n" + "="*60)
    print("TEST: Neighbours Are Single Edits")
    print("="*60)

    gen = TransitionGenerator.for_pair("kitten", "sitting")
    for value in ["kitten", "sit", ""]:
        for n in gen(value):
            assert n != value
            assert is_single_edit(value, n), f"{value!r} -> {n!r}"
    print("  [PASS] Single edits")


def test_is_single_edit():
    print("\n" + "="*60)
    print("TEST: is_single_edit")
    print("="*60)

    assert is_single_edit("abc", "axc")
    assert is_single_edit("abc", "ab")
    assert is_single_edit("ab", "xab")
    assert is_single_edit("", "a")
    assert not is_single_edit("abc", "abc")
    assert not is_single_edit("ab", "ba")
    assert not is_single_edit("a", "abc")
    assert not is_single_edit("abc", "xbz")
    print("  [PASS] is_single_edit")


def test_resolve_alphabet():
    """a-z widened by the inputs; an empty base leaves the inputs alone."""
    print("\n" + "="*60)
    print("TEST: Alphabet Resolution")
    print("="*60)

    assert resolve_alphabet("kitten", "sitting") == tuple(string.ascii_lowercase)
    assert resolve_alphabet("", "") == tuple(DEFAULT_ALPHABET)
    assert resolve_alphabet("Hi", "hi!") == tuple("!H" + string.ascii_lowercase)
    assert resolve_alphabet("kitten", "sitting", "") == tuple("egiknst")
    assert resolve_alphabet("kitten", "sitting", None) == tuple("egiknst")
    assert resolve_alphabet("", "", "") == ()
    assert resolve_alphabet("ab", "bc", "z") == ("a", "b", "c", "z")
    # A narrower base never removes input characters
    assert resolve_alphabet("abc", "xyz", "a") == tuple("abcxyz")

    with pytest.raises(TypeError):
        resolve_alphabet("a", "b", ["ab"])

    gen = TransitionGenerator.for_pair("abc", "axc", "xyz")
    print(f"  Alphabet: {gen.alphabet}")
    assert gen.alphabet == tuple("abcxyz")
    assert len(TransitionGenerator.for_pair("AB", "b").alphabet) == 28
    print("  [PASS] Alphabet resolution")


def test_reachability_bound():
    """Overlap mismatches plus length difference."""
    print("\n" + "="*60)
    print("TEST: Reachability Bound")
    print("="*60)

    cases = [
        ("kitten", "sitting", 3),
        ("", "abc", 3),
        ("abc", "", 3),
        ("", "", 0),
        ("abc", "axc", 1),
        ("ab", "ba", 2),
        # Bound can exceed the true distance (1)
        ("abcd", "bcd", 4),
    ]
    for a, b, expected in cases:
        bound = reachability_bound(a, b)
        print(f"  {a!r} -> {b!r}: {bound}")
        assert bound == expected
        assert bound <= max(len(a), len(b))
    print("  [PASS] Reachability bound")


def main():
    """Run all tests."""
    print("\n" + "#"*60)
    print("# TRANSITION TESTS")
    print("#"*60)

    tests = [
        ("Neighbour Order", test_neighbor_order),
        ("Neighbour Counts", test_neighbor_counts),
        ("Single Edits", test_neighbors_are_single_edits),
        ("is_single_edit", test_is_single_edit),
        ("Alphabet", test_resolve_alphabet),
        ("Reachability Bound", test_reachability_bound),
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
