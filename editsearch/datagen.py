"""
Test Data Module - Curated suites and seedable random corpora.

Randomness always comes from an injected numpy Generator so that a corpus
can be regenerated exactly from its seed.
"""

import logging
import string
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

logger = logging.getLogger(__name__)

LOWERCASE = string.ascii_lowercase

# Lengths used by performance_pairs() when none are given
PERFORMANCE_SIZES = (10, 20, 50, 100, 200, 500)


@dataclass(frozen=True)
class TestCase:
    """A string pair with its known edit distance."""
    __test__ = False  # not a pytest class

    source: str
    target: str
    expected_distance: int
    description: str = ""


def classic_cases() -> List[TestCase]:
    """Textbook pairs covering every operation and the empty-string edges."""
    return [
        TestCase("kitten", "sitting", 3, "Classic example: kitten -> sitting"),
        TestCase("", "abc", 3, "Empty string to non-empty string"),
        TestCase("abc", "", 3, "Non-empty string to empty string"),
        TestCase("", "", 0, "Two empty strings"),
        TestCase("same", "same", 0, "Identical strings"),
        TestCase("abc", "ab", 1, "Delete operation"),
        TestCase("ab", "abc", 1, "Insert operation"),
        TestCase("abc", "axc", 1, "Replace operation"),
        TestCase("intention", "execution", 5, "Longer string test"),
        TestCase("algorithm", "logarithm", 3, "Algorithm related words"),
        TestCase("sunday", "saturday", 3, "Day names"),
        TestCase("cat", "dog", 3, "Completely different short words"),
        TestCase("exponential", "polynomial", 6, "Complexity related words"),
    ]


def spelling_cases() -> List[TestCase]:
    """Common misspellings, mostly one edit away."""
    return [
        TestCase("algorithm", "algorith", 1, "Missing letter"),
        TestCase("algorithm", "algoritm", 1, "Missing letter"),
        TestCase("algorithm", "algorythm", 1, "Letter substitution"),
        TestCase("receive", "recieve", 2, "Common spelling mistake"),
        TestCase("necessary", "neccessary", 1, "Double letter error"),
        TestCase("definitely", "definately", 1, "Vowel error"),
        TestCase("separate", "seperate", 1, "Vowel error"),
        TestCase("occurrence", "occurence", 1, "Double letter error"),
        TestCase("embarrass", "embarass", 1, "Double letter error"),
        TestCase("accommodate", "accomodate", 1, "Double letter error"),
    ]


class CorpusGenerator:
    """
    Random string pairs for stress and performance runs.

    Args:
        rng: Generator to draw from; takes precedence over seed
        seed: Seed for a fresh numpy Generator when rng is not given
        charset: Characters random strings are drawn from
    """

    def __init__(self, rng: Optional[np.random.Generator] = None,
                 seed: Optional[int] = None, charset: str = LOWERCASE):
        if not charset:
            raise ValueError("charset must not be empty")
        self.rng = rng if rng is not None else np.random.default_rng(seed)
        self.charset = charset

    def random_string(self, length: int, charset: Optional[str] = None) -> str:
        chars = charset or self.charset
        indices = self.rng.integers(0, len(chars), size=length)
        return "".join(chars[i] for i in indices)

    def random_pair(self, min_length: int = 5, max_length: int = 20) -> Tuple[str, str]:
        """Two independent random strings with lengths in [min_length, max_length]."""
        if min_length > max_length:
            raise ValueError(f"min_length {min_length} exceeds max_length {max_length}")
        len1, len2 = self.rng.integers(min_length, max_length + 1, size=2)
        return self.random_string(int(len1)), self.random_string(int(len2))

    def introduce_errors(self, original: str, num_errors: int) -> str:
        """
        Apply num_errors random replace/insert/delete operations.

        The result is at most num_errors edits from original (an edit can
        undo or repeat an earlier one).
        """
        result = list(original)
        for _ in range(num_errors):
            if not result:
                break
            operation = int(self.rng.integers(0, 3))
            pos = int(self.rng.integers(0, len(result)))
            ch = self.charset[int(self.rng.integers(0, len(self.charset)))]
            if operation == 0:
                result[pos] = ch
            elif operation == 1:
                result.insert(pos, ch)
            else:
                del result[pos]
        return "".join(result)

    def similar_pair(self, base: str, similarity: float = 0.8) -> Tuple[str, str]:
        """Base string and a copy with roughly (1 - similarity) * len errors."""
        if not 0.0 <= similarity <= 1.0:
            raise ValueError(f"similarity must be within [0, 1], got {similarity}")
        num_errors = max(1, int((1.0 - similarity) * len(base)))
        return base, self.introduce_errors(base, num_errors)

    def batch(self, count: int, min_length: int = 5, max_length: int = 20) -> List[Tuple[str, str]]:
        return [self.random_pair(min_length, max_length) for _ in range(count)]

    def performance_pairs(self, sizes: Sequence[int] = PERFORMANCE_SIZES,
                          per_size: int = 3) -> List[Tuple[str, str]]:
        """Equal-length random pairs at each size, for scaling runs."""
        pairs = []
        for size in sizes:
            for _ in range(per_size):
                pairs.append((self.random_string(size), self.random_string(size)))
        logger.debug(f"Generated {len(pairs)} performance pairs for sizes {list(sizes)}")
        return pairs

    def spelling_candidates(self, target: str) -> List[str]:
        """Near-miss variants of target for ranking demos."""
        candidates = [
            self.introduce_errors(target, 1),
            self.introduce_errors(target, 2),
            self.introduce_errors(target, 1),
        ]
        if len(target) > 2:
            candidates.append(target[:-1])
            candidates.append(target[1:])
        candidates.append(target + "s")
        candidates.append("x" + target)
        return candidates
