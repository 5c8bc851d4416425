"""
Greedy Heuristic Engines

Single-pass approximations of the edit distance. Their results are upper
bounds on the true distance (except the frequency engine, whose script need
not reach the target) and exist for speed and accuracy comparisons.
"""

import time
from collections import Counter
from typing import List, Tuple

from .base import ReferenceEngine
from .result import EditOperation, OperationType, ReferenceResult


def positional_script(source: str, target: str) -> Tuple[List[EditOperation], str]:
    """
    Align source and target position by position.

    Equal characters match, unequal ones are replaced, surplus source
    characters are deleted and missing target characters appended.

    Returns:
        (operations, final_string)
    """
    current = list(source)
    operations: List[EditOperation] = []
    pos = 0

    while pos < max(len(current), len(target)):
        if pos >= len(current):
            current.insert(pos, target[pos])
            operations.append(EditOperation(OperationType.INSERT, pos, None, target[pos]))
        elif pos >= len(target):
            removed = current.pop(pos)
            operations.append(EditOperation(OperationType.DELETE, pos, removed, None))
            continue
        elif current[pos] == target[pos]:
            operations.append(EditOperation(OperationType.MATCH, pos, current[pos], target[pos]))
        else:
            operations.append(EditOperation(OperationType.REPLACE, pos, current[pos], target[pos]))
            current[pos] = target[pos]
        pos += 1

    return operations, "".join(current)


def _count_edits(operations: List[EditOperation]) -> int:
    return sum(op.cost for op in operations)


class PositionalGreedyEngine(ReferenceEngine):
    """Left-to-right positional alignment, no lookahead."""

    @property
    def name(self) -> str:
        return "greedy"

    def compute(self, source: str, target: str) -> ReferenceResult:
        start = time.perf_counter()
        operations, final = positional_script(source, target)
        elapsed_ms = (time.perf_counter() - start) * 1000

        return ReferenceResult(
            distance=_count_edits(operations),
            operations=tuple(operations),
            final_string=final,
            computation_time_ms=elapsed_ms,
            engine_name=self.name,
        )


class AffixGreedyEngine(ReferenceEngine):
    """
    Keep the longest common prefix and suffix untouched, then run the
    positional alignment on what is left in the middle.
    """

    @property
    def name(self) -> str:
        return "greedy_affix"

    def compute(self, source: str, target: str) -> ReferenceResult:
        start = time.perf_counter()

        prefix = 0
        limit = min(len(source), len(target))
        while prefix < limit and source[prefix] == target[prefix]:
            prefix += 1

        suffix = 0
        while (suffix < limit - prefix
               and source[len(source) - 1 - suffix] == target[len(target) - 1 - suffix]):
            suffix += 1

        operations: List[EditOperation] = [
            EditOperation(OperationType.MATCH, i, source[i], target[i]) for i in range(prefix)
        ]

        middle_source = source[prefix:len(source) - suffix]
        middle_target = target[prefix:len(target) - suffix]
        middle_ops, middle_final = positional_script(middle_source, middle_target)
        operations.extend(
            EditOperation(op.kind, op.position + prefix, op.from_char, op.to_char)
            for op in middle_ops
        )

        tail_start = len(target) - suffix
        operations.extend(
            EditOperation(OperationType.MATCH, tail_start + i, target[tail_start + i], target[tail_start + i])
            for i in range(suffix)
        )

        final = source[:prefix] + middle_final + source[len(source) - suffix:]
        elapsed_ms = (time.perf_counter() - start) * 1000

        return ReferenceResult(
            distance=_count_edits(operations),
            operations=tuple(operations),
            final_string=final,
            computation_time_ms=elapsed_ms,
            engine_name=self.name,
        )


class FrequencyGreedyEngine(ReferenceEngine):
    """
    Balance character counts: append characters the target has more of,
    then delete the first occurrences of characters the source has too many
    of. Order is ignored, so the final string is usually not the target.
    """

    @property
    def name(self) -> str:
        return "greedy_frequency"

    def compute(self, source: str, target: str) -> ReferenceResult:
        start = time.perf_counter()
        source_freq = Counter(source)
        target_freq = Counter(target)
        current = list(source)
        operations: List[EditOperation] = []

        for ch in sorted(target_freq):
            for _ in range(target_freq[ch] - source_freq.get(ch, 0)):
                current.append(ch)
                operations.append(EditOperation(OperationType.INSERT, len(current) - 1, None, ch))

        for ch in sorted(source_freq):
            for _ in range(source_freq[ch] - target_freq.get(ch, 0)):
                pos = current.index(ch)
                del current[pos]
                operations.append(EditOperation(OperationType.DELETE, pos, ch, None))

        elapsed_ms = (time.perf_counter() - start) * 1000

        return ReferenceResult(
            distance=_count_edits(operations),
            operations=tuple(operations),
            final_string="".join(current),
            computation_time_ms=elapsed_ms,
            engine_name=self.name,
        )


def quick_approximation(source: str, target: str) -> int:
    """
    Length gap plus the larger count of distinct characters unique to one side.

    A rough estimate only; it is neither an upper nor a lower bound.
    """
    if source == target:
        return 0
    source_chars = set(source)
    target_chars = set(target)
    only_source = len(source_chars - target_chars)
    only_target = len(target_chars - source_chars)
    return abs(len(source) - len(target)) + max(only_source, only_target)
