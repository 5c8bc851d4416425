"""
Frontier Module - Open lists used by the traversals.

Both frontiers expose the same small interface so the generic traversal in
base.py can swap FIFO and priority ordering without knowing which it has.
"""

import heapq
import itertools
from abc import ABC, abstractmethod
from collections import deque
from typing import Deque, List, Tuple

from .state import SearchState

INFINITY = float("inf")


class Frontier(ABC):
    """Ordered collection of states awaiting expansion."""

    @abstractmethod
    def push(self, state: SearchState, priority: float) -> None:
        pass

    @abstractmethod
    def pop(self) -> Tuple[float, SearchState]:
        """Remove and return (priority, state) of the next state to expand."""
        pass

    @abstractmethod
    def peek_priority(self) -> float:
        """Priority of the next state, or infinity when empty."""
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass


class FifoFrontier(Frontier):
    """
    First-in first-out queue.

    Under unit edge cost the priority of a state is its cost, and FIFO
    order pops costs in non-decreasing order.
    """

    def __init__(self):
        self._queue: Deque[Tuple[float, SearchState]] = deque()

    def push(self, state: SearchState, priority: float) -> None:
        self._queue.append((priority, state))

    def pop(self) -> Tuple[float, SearchState]:
        return self._queue.popleft()

    def peek_priority(self) -> float:
        return self._queue[0][0] if self._queue else INFINITY

    def __len__(self) -> int:
        return len(self._queue)


class PriorityFrontier(Frontier):
    """Min-heap on priority; equal priorities pop in insertion order."""

    def __init__(self):
        self._heap: List[Tuple[float, int, SearchState]] = []
        self._counter = itertools.count()

    def push(self, state: SearchState, priority: float) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), state))

    def pop(self) -> Tuple[float, SearchState]:
        priority, _, state = heapq.heappop(self._heap)
        return priority, state

    def peek_priority(self) -> float:
        return self._heap[0][0] if self._heap else INFINITY

    def __len__(self) -> int:
        return len(self._heap)
