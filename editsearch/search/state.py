"""
Search State Module - A node of the edit graph as seen by a traversal.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class SearchState:
    """
    Immutable traversal state.

    Attributes:
        value: String at this node
        cost: Number of edits from the origin
        path: Strings from the origin to value (empty for cost-only searches)
    """
    value: str
    cost: int
    path: Tuple[str, ...] = ()

    @classmethod
    def origin(cls, value: str, track_path: bool) -> 'SearchState':
        """
        Create the root state of a traversal.

        Args:
            value: Starting string
            track_path: Whether descendants will carry their path

        Returns:
            SearchState at cost 0
        """
        return cls(value=value, cost=0, path=(value,) if track_path else ())

    def child(self, value: str, track_path: bool) -> 'SearchState':
        """Create the state one edit further along."""
        path = self.path + (value,) if track_path else ()
        return SearchState(value=value, cost=self.cost + 1, path=path)

    @property
    def depth(self) -> int:
        """Alias for cost; every edge weighs one."""
        return self.cost
