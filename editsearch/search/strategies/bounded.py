"""
Bounded Strategy - All-paths BFS under an exploration depth cap.
"""

from .all_paths import AllPathsStrategy
from ..factory import register_strategy


@register_strategy
class BoundedStrategy(AllPathsStrategy):
    """
    All-paths search that never expands states at cost max_depth.

    States at the cap are still compared against the target when they are
    generated. If the target is not reached within the cap the result has
    min_distance None, meaning the depth budget ran out; the target itself
    is always reachable in this graph.

    Parameters:
        max_depth: Largest edit count explored (default 3)
    """
    name = "bounded"
    description = "Depth-bounded BFS - all optimal paths within max_depth"
    log_tag = "Bounded"

    def __init__(self, max_depth: int = 3):
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.max_depth = max_depth
