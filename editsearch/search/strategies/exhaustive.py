"""
Exhaustive Strategy - Plain BFS returning the distance of the first hit.
"""

from ..base import BestFirstStrategy
from ..factory import register_strategy


@register_strategy
class ExhaustiveStrategy(BestFirstStrategy):
    """
    Breadth-first search that stops the moment the target is generated.

    Level-order visitation under unit edge cost makes the first hit
    optimal. The registry admits a state only on strictly smaller cost, so
    every string is expanded at most once. No paths are kept.
    """
    name = "exhaustive"
    description = "Exhaustive BFS - minimum distance only"
    log_tag = "Exhaustive"

    track_paths = False
    admit_equal_cost = False
    stop_at_first = True
