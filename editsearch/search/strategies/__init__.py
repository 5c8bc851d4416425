"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .exhaustive import ExhaustiveStrategy
from .all_paths import AllPathsStrategy
from .heuristic import HeuristicStrategy, length_gap
from .bidirectional import BidirectionalStrategy, SearchSide, STOP_RULES
from .bounded import BoundedStrategy

__all__ = [
    "ExhaustiveStrategy",
    "AllPathsStrategy",
    "HeuristicStrategy",
    "BidirectionalStrategy",
    "BoundedStrategy",
    "SearchSide",
    "STOP_RULES",
    "length_gap",
]
