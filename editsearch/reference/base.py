"""
Reference Engine Base Interface

Abstract base class defining the contract shared by the dynamic-programming
oracle and the greedy heuristics.
"""

from abc import ABC, abstractmethod

from .result import ReferenceResult


class ReferenceEngine(ABC):
    """
    Abstract base class for reference engines.

    All implementations must inherit from this class and implement
    compute() to turn a source string into a target string.
    """

    #: True if compute() always returns the minimum edit distance
    exact: bool = False

    @abstractmethod
    def compute(self, source: str, target: str) -> ReferenceResult:
        """
        Compute an edit script from source to target.

        Args:
            source: String to edit
            target: String to reach

        Returns:
            ReferenceResult containing:
            - distance: int - number of non-match operations
            - operations: Tuple[EditOperation, ...] - the alignment
            - final_string: str - source after the operations
            - computation_time_ms: float - processing duration
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Engine identifier.

        Returns:
            String name identifying this engine type (e.g., "dp", "greedy")
        """
        pass

    def distance(self, source: str, target: str) -> int:
        """Convenience wrapper returning only the distance."""
        return self.compute(source, target).distance
