"""
Transition Module - One-edit neighbourhood of a string.

Every search strategy walks the same implicit graph: nodes are strings and
edges are single insert/delete/substitute operations of unit cost. This
module produces the out-edges of a node.
"""

import string
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

# Reference alphabet for insertions and substitutions
DEFAULT_ALPHABET = string.ascii_lowercase


def resolve_alphabet(start: str, target: str,
                     base: Optional[Iterable[str]] = DEFAULT_ALPHABET) -> Tuple[str, ...]:
    """
    Build the alphabet used for insertions and substitutions.

    The result is the sorted union of the base alphabet (a-z by default) and
    every character occurring in either input, so the target is always
    reachable. Pass None or "" for the input characters alone.

    Args:
        start: Source string
        target: Target string
        base: Reference characters, widened by the inputs

    Returns:
        Sorted tuple of distinct single characters
    """
    chars = set(start) | set(target)
    if base is not None:
        for ch in base:
            if not isinstance(ch, str) or len(ch) != 1:
                raise TypeError(f"Alphabet entries must be single characters, got {ch!r}")
            chars.add(ch)
    return tuple(sorted(chars))


def reachability_bound(start: str, target: str) -> int:
    """
    Achievable edit count used as an implicit depth ceiling.

    Substitute every mismatched position in the overlap, then pad or trim
    the length difference. Never exceeds max(len(start), len(target)).
    """
    overlap = min(len(start), len(target))
    mismatches = sum(1 for i in range(overlap) if start[i] != target[i])
    return mismatches + abs(len(start) - len(target))


def neighbors(value: str, alphabet: Tuple[str, ...]) -> List[str]:
    """
    Generate every string one edit away from value.

    Order is deterministic: deletions, then insertions, then substitutions,
    each position-ascending and then alphabet-ascending. The output is a
    multiset; duplicates are left for the caller to collapse.

    Args:
        value: Current string
        alphabet: Sorted characters available for insert/substitute

    Returns:
        List of neighbouring strings
    """
    length = len(value)
    result: List[str] = []

    # Deletion
    for i in range(length):
        result.append(value[:i] + value[i + 1:])

    # Insertion
    for i in range(length + 1):
        head, tail = value[:i], value[i:]
        for ch in alphabet:
            result.append(head + ch + tail)

    # Substitution
    for i in range(length):
        current = value[i]
        head, tail = value[:i], value[i + 1:]
        for ch in alphabet:
            if ch != current:
                result.append(head + ch + tail)

    return result


def is_single_edit(a: str, b: str) -> bool:
    """Check whether b is exactly one insert, delete or substitution from a."""
    la, lb = len(a), len(b)
    if la == lb:
        return sum(1 for x, y in zip(a, b) if x != y) == 1
    if abs(la - lb) != 1:
        return False
    shorter, longer = (a, b) if la < lb else (b, a)
    i = 0
    while i < len(shorter) and shorter[i] == longer[i]:
        i += 1
    return shorter[i:] == longer[i + 1:]


@dataclass(frozen=True)
class TransitionGenerator:
    """
    Stateless neighbour generator bound to a fixed alphabet.

    Attributes:
        alphabet: Sorted tuple of characters for insert/substitute
    """
    alphabet: Tuple[str, ...]

    @classmethod
    def for_pair(cls, start: str, target: str,
                 base: Optional[Iterable[str]] = DEFAULT_ALPHABET) -> 'TransitionGenerator':
        """Create a generator whose alphabet covers both inputs."""
        return cls(alphabet=resolve_alphabet(start, target, base))

    def __call__(self, value: str) -> List[str]:
        return neighbors(value, self.alphabet)

    def expected_count(self, value: str) -> int:
        """
        Size of the neighbour multiset for value.

        Characters of value outside the alphabet have |alphabet| substitutes
        instead of |alphabet| - 1.
        """
        size = len(self.alphabet)
        members = set(self.alphabet)
        subs = sum(size - 1 if ch in members else size for ch in value)
        return len(value) + (len(value) + 1) * size + subs
