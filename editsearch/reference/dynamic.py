"""
Dynamic Programming Engines

Wagner-Fischer table filling. These are the exact oracles the search
strategies are cross-validated against.
"""

import time
from typing import List, Sequence, Tuple

import numpy as np

from .base import ReferenceEngine
from .result import EditOperation, OperationType, ReferenceResult


def edit_matrix(source: str, target: str) -> np.ndarray:
    """
    Fill the full (len(source)+1) x (len(target)+1) distance table.

    Cell [i, j] holds the edit distance between source[:i] and target[:j].
    """
    m, n = len(source), len(target)
    dp = np.zeros((m + 1, n + 1), dtype=np.int64)
    dp[:, 0] = np.arange(m + 1)
    dp[0, :] = np.arange(n + 1)

    for i in range(1, m + 1):
        si = source[i - 1]
        for j in range(1, n + 1):
            if si == target[j - 1]:
                dp[i, j] = dp[i - 1, j - 1]
            else:
                dp[i, j] = 1 + min(dp[i - 1, j],      # delete
                                   dp[i, j - 1],      # insert
                                   dp[i - 1, j - 1])  # replace
    return dp


def trace_operations(source: str, target: str, dp: np.ndarray) -> Tuple[EditOperation, ...]:
    """
    Walk the table back from the bottom-right corner.

    Preference at each cell: match, replace, delete, insert. The returned
    operations are in forward order with working-string positions.
    """
    steps: List[Tuple[OperationType, str, str]] = []
    i, j = len(source), len(target)

    while i > 0 or j > 0:
        if i > 0 and j > 0 and source[i - 1] == target[j - 1]:
            steps.append((OperationType.MATCH, source[i - 1], target[j - 1]))
            i -= 1
            j -= 1
        elif i > 0 and j > 0 and dp[i, j] == dp[i - 1, j - 1] + 1:
            steps.append((OperationType.REPLACE, source[i - 1], target[j - 1]))
            i -= 1
            j -= 1
        elif i > 0 and dp[i, j] == dp[i - 1, j] + 1:
            steps.append((OperationType.DELETE, source[i - 1], None))
            i -= 1
        elif j > 0 and dp[i, j] == dp[i, j - 1] + 1:
            steps.append((OperationType.INSERT, None, target[j - 1]))
            j -= 1
        else:
            raise RuntimeError(f"Inconsistent DP table at ({i}, {j})")

    steps.reverse()

    operations: List[EditOperation] = []
    cursor = 0
    for kind, from_char, to_char in steps:
        operations.append(EditOperation(kind, cursor, from_char, to_char))
        if kind is not OperationType.DELETE:
            cursor += 1
    return tuple(operations)


def compact_distance(source: str, target: str) -> int:
    """Edit distance keeping only two rows, sized by the shorter string."""
    if len(source) > len(target):
        source, target = target, source

    prev = list(range(len(source) + 1))
    for j in range(1, len(target) + 1):
        curr = [j] + [0] * len(source)
        tj = target[j - 1]
        for i in range(1, len(source) + 1):
            if source[i - 1] == tj:
                curr[i] = prev[i - 1]
            else:
                curr[i] = 1 + min(prev[i], curr[i - 1], prev[i - 1])
        prev = curr
    return prev[len(source)]


class DynamicProgrammingEngine(ReferenceEngine):
    """Exact distance with alignment and the full table for inspection."""
    exact = True

    @property
    def name(self) -> str:
        return "dp"

    def compute(self, source: str, target: str) -> ReferenceResult:
        start = time.perf_counter()
        dp = edit_matrix(source, target)
        operations = trace_operations(source, target, dp)
        elapsed_ms = (time.perf_counter() - start) * 1000

        return ReferenceResult(
            distance=int(dp[len(source), len(target)]),
            operations=operations,
            final_string=target,
            computation_time_ms=elapsed_ms,
            engine_name=self.name,
            matrix=dp,
        )


class CompactDynamicProgrammingEngine(ReferenceEngine):
    """Exact distance in O(min(m, n)) memory; no alignment."""
    exact = True

    @property
    def name(self) -> str:
        return "dp_compact"

    def compute(self, source: str, target: str) -> ReferenceResult:
        start = time.perf_counter()
        value = compact_distance(source, target)
        elapsed_ms = (time.perf_counter() - start) * 1000

        return ReferenceResult(
            distance=value,
            operations=(),
            final_string=target,
            computation_time_ms=elapsed_ms,
            engine_name=self.name,
        )


def batch_distances(target: str, candidates: Sequence[str]) -> List[Tuple[str, int]]:
    """
    Distance from target to each candidate, closest first.

    Candidates at equal distance keep their input order.
    """
    results = [(candidate, compact_distance(target, candidate)) for candidate in candidates]
    results.sort(key=lambda item: item[1])
    return results
