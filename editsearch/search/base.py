"""
Base Strategy Module - Abstract strategy and the shared best-first traversal.
"""

import logging
import time
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional, Set

from .context import SearchContext
from .frontier import FifoFrontier, Frontier
from .result import Path, ResultSet, SearchMetrics
from .state import SearchState

logger = logging.getLogger(__name__)


class SearchStrategy(ABC):
    """
    Abstract base class for all search strategies.

    Subclasses must implement the search() method and define
    name and description class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for reports
        log_tag: Prefix used in log messages
        ordering: How the frontier orders states, for reports
        track_paths: Whether optimal paths are collected
        admit_equal_cost: Registry admits a state again at equal cost (<=)
                          instead of only at strictly smaller cost (<)
    """
    name: str = "base"
    description: str = "Base strategy"
    log_tag: str = "Search"
    ordering: str = "fifo"
    track_paths: bool = False
    admit_equal_cost: bool = False

    @abstractmethod
    def search(self, context: SearchContext) -> ResultSet:
        """
        Search the edit graph from context.start to context.target.

        Must periodically check context.is_cancelled() and return
        a partial result if True.

        Args:
            context: Search context with inputs, alphabet and cancellation

        Returns:
            ResultSet snapshot owned by the caller
        """
        pass

    def _check_cancelled(self, context: SearchContext, nodes_explored: int) -> bool:
        """
        Convenience method to check cancellation.

        Args:
            context: Search context
            nodes_explored: States popped so far

        Returns:
            True if strategy should stop
        """
        return context.is_cancelled(nodes_explored)

    def _build_result(
        self,
        min_distance: Optional[int],
        paths: Iterable[Path],
        nodes_explored: int,
        peak_frontier_size: int,
        start_time: float,
        was_cancelled: bool
    ) -> ResultSet:
        """Build ResultSet object from computation results."""
        elapsed_ms = (time.perf_counter() - start_time) * 1000

        return ResultSet(
            min_distance=min_distance,
            paths=frozenset(paths),
            was_cancelled=was_cancelled,
            metrics=SearchMetrics(
                computation_time_ms=elapsed_ms,
                nodes_explored=nodes_explored,
                peak_frontier_size=peak_frontier_size,
                strategy_name=self.name
            )
        )


class BestFirstStrategy(SearchStrategy):
    """
    Generic single-frontier traversal of the edit graph.

    Concrete strategies differ only in track_paths, admit_equal_cost,
    ordering and the knobs below:

    Attributes:
        stop_at_first: Return as soon as the target is first generated
        max_depth: States at this cost are never expanded (None = no cap)

    Algorithm:
        1. Pop the next state (FIFO or lowest f = g + h)
        2. Stop once the popped priority exceeds the best distance found
        3. Generate neighbours; a neighbour equal to the target updates the
           best distance and path set, any other one is admitted against
           the best-cost registry and pushed
        4. Non-target states at or beyond the depth ceiling are never pushed

    The depth ceiling is the smaller of max_depth and an achievable edit
    count for the pair, so the traversal never relies on the graph being
    finite.
    """
    stop_at_first: bool = False
    max_depth: Optional[int] = None

    def create_frontier(self) -> Frontier:
        """Open list for this strategy. FIFO unless overridden."""
        return FifoFrontier()

    def heuristic(self, value: str, target: str) -> int:
        """Admissible estimate of edits left. Zero for plain BFS."""
        return 0

    def _priority(self, state: SearchState, target: str) -> int:
        return state.cost + self.heuristic(state.value, target)

    def _admit(self, known_cost: Optional[int], new_cost: int) -> bool:
        if known_cost is None:
            return True
        if self.admit_equal_cost:
            return new_cost <= known_cost
        return new_cost < known_cost

    def search(self, context: SearchContext) -> ResultSet:
        """
        Run the traversal described in the class docstring.

        Args:
            context: Search context with inputs and cancellation

        Returns:
            ResultSet with distance, paths (if tracked) and metrics
        """
        start_time = time.perf_counter()
        start, target = context.start, context.target

        if start == target:
            paths = [(start,)] if self.track_paths else []
            return self._build_result(0, paths, 0, 0, start_time, was_cancelled=False)

        ceiling = context.depth_ceiling
        if self.max_depth is not None:
            ceiling = min(ceiling, self.max_depth)

        transitions = context.transitions
        frontier = self.create_frontier()
        best_cost: Dict[str, int] = {start: 0}
        root = SearchState.origin(start, self.track_paths)
        frontier.push(root, self._priority(root, target))

        min_distance: Optional[int] = None
        paths: Set[Path] = set()
        nodes_explored = 0
        peak_frontier = 0
        level = 0
        was_cancelled = False

        while frontier:
            peak_frontier = max(peak_frontier, len(frontier))

            if self._check_cancelled(context, nodes_explored):
                was_cancelled = True
                logger.warning(
                    f"[{self.log_tag}] Cancelled after {nodes_explored} nodes "
                    f"(best distance so far: {min_distance})"
                )
                break

            priority, state = frontier.pop()
            nodes_explored += 1

            if min_distance is not None:
                if priority > min_distance:
                    break
                if state.cost >= min_distance:
                    continue
            if state.cost >= ceiling:
                continue
            if not self.admit_equal_cost and state.cost > best_cost.get(state.value, state.cost):
                # A cheaper copy of this state was pushed after this one
                continue

            if state.cost > level:
                level = state.cost
                logger.debug(
                    f"[{self.log_tag}] Depth {level}: frontier={len(frontier)}, "
                    f"registry={len(best_cost)}, explored={nodes_explored}"
                )
                context.report_progress(
                    min(0.99, level / ceiling),
                    f"depth {level}/{ceiling}, {nodes_explored} nodes"
                )

            new_cost = state.cost + 1
            for value in dict.fromkeys(transitions(state.value)):
                if value == target:
                    if min_distance is None or new_cost < min_distance:
                        min_distance = new_cost
                        paths = set()
                    if new_cost == min_distance and self.track_paths:
                        paths.add(state.path + (target,))
                    if self.stop_at_first:
                        return self._finish(
                            min_distance, paths, nodes_explored, peak_frontier,
                            start_time, was_cancelled
                        )
                    continue

                if new_cost >= ceiling:
                    continue
                if min_distance is not None and new_cost >= min_distance:
                    continue
                if not self._admit(best_cost.get(value), new_cost):
                    continue

                child = state.child(value, self.track_paths)
                child_priority = self._priority(child, target)
                if child_priority > ceiling:
                    continue

                best_cost[value] = new_cost
                frontier.push(child, child_priority)

        return self._finish(
            min_distance, paths, nodes_explored, peak_frontier,
            start_time, was_cancelled
        )

    def _finish(
        self,
        min_distance: Optional[int],
        paths: Set[Path],
        nodes_explored: int,
        peak_frontier: int,
        start_time: float,
        was_cancelled: bool
    ) -> ResultSet:
        result = self._build_result(
            min_distance, paths, nodes_explored, peak_frontier,
            start_time, was_cancelled
        )
        logger.info(
            f"[{self.log_tag}] distance={min_distance}, paths={result.path_count}, "
            f"explored={nodes_explored}, peak frontier={peak_frontier}, "
            f"{result.metrics.computation_time_ms:.1f}ms"
        )
        return result
