"""
Heuristic Strategy - Best-first search ordered by f = g + h.
"""

from ..base import BestFirstStrategy
from ..factory import register_strategy
from ..frontier import Frontier, PriorityFrontier


def length_gap(value: str, target: str) -> int:
    """
    Lower bound on the edits from value to target.

    Insertions and deletions change the length by one and substitutions
    leave it unchanged, so at least |len(value) - len(target)| edits remain.
    The bound moves by at most one per edit, which also makes it consistent.
    """
    return abs(len(value) - len(target))


@register_strategy
class HeuristicStrategy(BestFirstStrategy):
    """
    Priority-queue search using the length-gap heuristic.

    The distance is exact: the heuristic is admissible and the search only
    stops once the smallest f on the queue exceeds the best distance found.
    Popped states with g >= best distance are discarded unexpanded.

    Limitation: the registry admits a state only at strictly smaller cost,
    so an optimal path that reaches a shared intermediate string second is
    dropped. The returned paths are all optimal, but may be a strict
    subset of what AllPathsStrategy returns.
    """
    name = "heuristic"
    description = "Heuristic best-first - exact distance, partial path set"
    log_tag = "Heuristic"
    ordering = "priority f = g + h"

    track_paths = True
    admit_equal_cost = False
    stop_at_first = False

    def create_frontier(self) -> Frontier:
        return PriorityFrontier()

    def heuristic(self, value: str, target: str) -> int:
        return length_gap(value, target)
