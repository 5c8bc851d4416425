"""
Search Context Module - Inputs and cancellation for one strategy run.
"""

import threading
import time
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Tuple

from .transitions import DEFAULT_ALPHABET, TransitionGenerator, reachability_bound


class SearchCancelled(RuntimeError):
    """Raised when a distance-only query is stopped before reaching the target."""


@dataclass
class SearchContext:
    """
    Context passed to strategies containing the query, alphabet,
    cancellation, and progress reporting.

    Attributes:
        start: Source string
        target: Target string
        base_alphabet: Reference characters widened by the inputs (a-z by
            default; None or "" for the input characters only)
        cancel_flag: Threading event for cancellation
        timeout_sec: Maximum computation time in seconds (None = unlimited)
        max_nodes: Maximum states to pop from frontiers (None = unlimited)
        start_time: When computation started
        progress_callback: Optional callback for progress updates
    """
    start: str
    target: str
    base_alphabet: Optional[Iterable[str]] = DEFAULT_ALPHABET
    cancel_flag: threading.Event = field(default_factory=threading.Event)
    timeout_sec: Optional[float] = None
    max_nodes: Optional[int] = None
    start_time: float = field(default_factory=time.time)
    progress_callback: Optional[Callable[[float, str], None]] = None
    transitions: TransitionGenerator = field(init=False)

    def __post_init__(self):
        if not isinstance(self.start, str) or not isinstance(self.target, str):
            raise TypeError(
                f"start and target must be str, got {type(self.start).__name__} "
                f"and {type(self.target).__name__}"
            )
        if self.max_nodes is not None and self.max_nodes < 0:
            raise ValueError(f"max_nodes must be non-negative, got {self.max_nodes}")
        self.transitions = TransitionGenerator.for_pair(
            self.start, self.target, self.base_alphabet
        )

    @property
    def alphabet(self) -> Tuple[str, ...]:
        return self.transitions.alphabet

    @property
    def depth_ceiling(self) -> int:
        """Edit count known to be achievable; no optimal path is longer."""
        return reachability_bound(self.start, self.target)

    def is_cancelled(self, nodes_explored: int = 0) -> bool:
        """
        Check if cancellation requested, timeout exceeded or node cap hit.

        Args:
            nodes_explored: States popped so far by the caller

        Returns:
            True if strategy should stop execution
        """
        if self.cancel_flag.is_set():
            return True
        if self.max_nodes is not None and nodes_explored >= self.max_nodes:
            return True
        if self.timeout_sec is not None and time.time() - self.start_time > self.timeout_sec:
            return True
        return False

    def report_progress(self, percent: float, message: str = "") -> None:
        """
        Report progress to the caller.

        Args:
            percent: Progress from 0.0 to 1.0
            message: Optional status message
        """
        if self.progress_callback:
            self.progress_callback(percent, message)

    def elapsed_time(self) -> float:
        """Seconds elapsed since the context was created."""
        return time.time() - self.start_time

    def remaining_time(self) -> Optional[float]:
        """Seconds remaining before timeout, or None without a timeout."""
        if self.timeout_sec is None:
            return None
        return self.timeout_sec - self.elapsed_time()
