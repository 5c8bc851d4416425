"""
Bidirectional Strategy - Meet-in-the-middle BFS from both ends.

Edit operations are invertible as a class (insert <-> delete, substitute
<-> substitute), so the backward search from the target walks the same
neighbour function as the forward search.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Dict, Optional

from ..base import SearchStrategy
from ..context import SearchContext
from ..factory import register_strategy
from ..frontier import FifoFrontier
from ..result import ResultSet
from ..state import SearchState

logger = logging.getLogger(__name__)

STOP_RULES = ("sum", "each")


@dataclass
class SearchSide:
    """
    One direction of a bidirectional search.

    Attributes:
        label: "forward" or "backward"
        frontier: FIFO queue of states awaiting expansion
        visited: String -> smallest cost from this side's origin
    """
    label: str
    frontier: FifoFrontier = field(default_factory=FifoFrontier)
    visited: Dict[str, int] = field(default_factory=dict)

    @classmethod
    def rooted_at(cls, label: str, origin: str) -> 'SearchSide':
        side = cls(label=label)
        side.visited[origin] = 0
        side.frontier.push(SearchState.origin(origin, track_path=False), 0)
        return side

    @property
    def front_cost(self) -> float:
        """Smallest unexpanded cost, infinity once exhausted."""
        return self.frontier.peek_priority()


@register_strategy
class BidirectionalStrategy(SearchStrategy):
    """
    Two FIFO frontiers, one from each end, expanded alternately one state
    at a time.

    Whenever one side generates a string already registered by the other
    side, the sum of the two costs is a candidate distance; the minimum
    over all meetings is kept because the first meeting need not be the
    cheapest.

    Stopping rules (once a candidate mu exists):
        "sum":  front_cost(forward) + front_cost(backward) >= mu
                Canonical bidirectional rule. Any path shorter than mu would
                have to cross an edge whose endpoints are both already
                registered, and that crossing would have recorded it.
        "each": front_cost(forward) > mu and front_cost(backward) > mu
                Conservative rule; explores much further for the same answer.

    "sum" is the default: it stops as soon as no cheaper meeting can exist,
    while "each" keeps expanding both sides up to cost mu and only changes
    the diagnostics, never the distance.

    Only the distance and diagnostics are returned; no paths.

    Parameters:
        stop_rule: "sum" (default) or "each"
    """
    name = "bidirectional"
    description = "Bidirectional BFS - distance only, meet in the middle"
    log_tag = "Bidirectional"
    ordering = "fifo from both ends"

    def __init__(self, stop_rule: str = "sum"):
        if stop_rule not in STOP_RULES:
            raise ValueError(f"Unknown stop rule: {stop_rule}. Available: {', '.join(STOP_RULES)}")
        self.stop_rule = stop_rule

    def search(self, context: SearchContext) -> ResultSet:
        """
        Run the alternating expansion until the stopping rule holds.

        Args:
            context: Search context with inputs and cancellation

        Returns:
            ResultSet with distance and metrics, empty path set
        """
        start_time = time.perf_counter()
        start, target = context.start, context.target

        if start == target:
            return self._build_result(0, [], 0, 0, start_time, was_cancelled=False)

        ceiling = context.depth_ceiling
        transitions = context.transitions
        forward = SearchSide.rooted_at("forward", start)
        backward = SearchSide.rooted_at("backward", target)

        mu: Optional[int] = None
        nodes_explored = 0
        peak_frontier = 0
        was_cancelled = False
        turn = 0

        while forward.frontier or backward.frontier:
            peak_frontier = max(peak_frontier, len(forward.frontier) + len(backward.frontier))

            if self._check_cancelled(context, nodes_explored):
                was_cancelled = True
                logger.warning(
                    f"[{self.log_tag}] Cancelled after {nodes_explored} nodes "
                    f"(best meeting so far: {mu})"
                )
                break

            side, other = (forward, backward) if turn == 0 else (backward, forward)
            if not side.frontier:
                side, other = other, side
            turn ^= 1

            _, state = side.frontier.pop()
            nodes_explored += 1
            new_cost = state.cost + 1

            for value in dict.fromkeys(transitions(state.value)):
                other_cost = other.visited.get(value)
                if other_cost is not None:
                    total = new_cost + other_cost
                    if mu is None or total < mu:
                        mu = total
                        logger.debug(
                            f"[{self.log_tag}] Meeting at {value!r} from {side.label} side: "
                            f"{new_cost} + {other_cost} = {total}"
                        )

                known = side.visited.get(value)
                if known is None or new_cost < known:
                    side.visited[value] = new_cost
                    if new_cost < ceiling:
                        side.frontier.push(state.child(value, track_path=False), new_cost)

            if mu is not None and self._should_stop(mu, forward, backward):
                break

        result = self._build_result(
            mu, [], nodes_explored, peak_frontier, start_time, was_cancelled
        )
        logger.info(
            f"[{self.log_tag}] distance={mu}, explored={nodes_explored}, "
            f"registries={len(forward.visited)}/{len(backward.visited)}, "
            f"peak frontier={peak_frontier}, {result.metrics.computation_time_ms:.1f}ms"
        )
        return result

    def _should_stop(self, mu: int, forward: SearchSide, backward: SearchSide) -> bool:
        if self.stop_rule == "sum":
            return forward.front_cost + backward.front_cost >= mu
        return forward.front_cost > mu and backward.front_cost > mu
