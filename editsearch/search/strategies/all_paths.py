"""
All-Paths Strategy - BFS that enumerates every minimum-cost edit path.
"""

from ..base import BestFirstStrategy
from ..factory import register_strategy


@register_strategy
class AllPathsStrategy(BestFirstStrategy):
    """
    Breadth-first search collecting every optimal path to the target.

    A state reached again at the same cost through a different parent is
    re-admitted (<=), so each optimal route through a shared intermediate
    string survives. The price is queue growth proportional to the number
    of equal-cost prefixes, which is exponential on long, dissimilar
    inputs. Bound it with SearchContext.max_nodes or timeout_sec.
    """
    name = "all_paths"
    description = "All optimal paths BFS - distance plus every optimal path"
    log_tag = "AllPaths"

    track_paths = True
    admit_equal_cost = True
    stop_at_first = False
