"""
Result Module - Immutable outcome of a single search invocation.
"""

from dataclasses import dataclass, field
from datetime import timedelta
from typing import FrozenSet, List, Optional, Tuple

Path = Tuple[str, ...]


@dataclass(frozen=True)
class SearchMetrics:
    """
    Performance metrics for a search.

    Attributes:
        computation_time_ms: Wall time in milliseconds
        nodes_explored: States popped from the frontier
        peak_frontier_size: Largest frontier observed (both sides for bidirectional)
        strategy_name: Name of strategy that produced the result
    """
    computation_time_ms: float = 0.0
    nodes_explored: int = 0
    peak_frontier_size: int = 0
    strategy_name: str = ""


@dataclass(frozen=True)
class ResultSet:
    """
    Result of a strategy computation.

    Created once per call and never mutated afterwards.

    Attributes:
        min_distance: Minimum edit distance, or None if not reached
        paths: Optimal transformation paths found (start ... target)
        metrics: Performance statistics
        was_cancelled: True if the context stopped the search early
    """
    min_distance: Optional[int] = None
    paths: FrozenSet[Path] = frozenset()
    metrics: SearchMetrics = field(default_factory=SearchMetrics)
    was_cancelled: bool = False

    @property
    def found(self) -> bool:
        """True if the target was reached."""
        return self.min_distance is not None

    @property
    def nodes_explored(self) -> int:
        return self.metrics.nodes_explored

    @property
    def peak_frontier_size(self) -> int:
        return self.metrics.peak_frontier_size

    @property
    def elapsed_time(self) -> timedelta:
        """Computation time as a duration."""
        return timedelta(milliseconds=self.metrics.computation_time_ms)

    @property
    def path_count(self) -> int:
        return len(self.paths)

    def sorted_paths(self) -> List[Path]:
        """
        Paths in a stable order for display.

        Returns:
            Paths sorted lexicographically by their states
        """
        return sorted(self.paths)
