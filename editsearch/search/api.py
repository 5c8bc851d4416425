"""
Search API Module - One-call entry points for each strategy.
"""

import threading
from typing import Iterable, Optional

from .context import SearchCancelled, SearchContext
from .factory import create_strategy
from .result import ResultSet
from .transitions import DEFAULT_ALPHABET


def _context(
    start: str,
    target: str,
    alphabet: Optional[Iterable[str]],
    max_nodes: Optional[int],
    timeout_sec: Optional[float],
    cancel_flag: Optional[threading.Event],
) -> SearchContext:
    context = SearchContext(
        start=start,
        target=target,
        base_alphabet=alphabet,
        max_nodes=max_nodes,
        timeout_sec=timeout_sec,
    )
    if cancel_flag is not None:
        context.cancel_flag = cancel_flag
    return context


def distance(
    start: str,
    target: str,
    *,
    alphabet: Optional[Iterable[str]] = DEFAULT_ALPHABET,
    max_nodes: Optional[int] = None,
    timeout_sec: Optional[float] = None,
    cancel_flag: Optional[threading.Event] = None,
) -> int:
    """
    Minimum edit distance by exhaustive BFS.

    Raises:
        SearchCancelled: If the context stopped the search first
    """
    context = _context(start, target, alphabet, max_nodes, timeout_sec, cancel_flag)
    result = create_strategy("exhaustive").search(context)
    if result.min_distance is None:
        raise SearchCancelled(
            f"Search from {start!r} to {target!r} stopped after "
            f"{result.nodes_explored} nodes without reaching the target"
        )
    return result.min_distance


def search_all(
    start: str,
    target: str,
    *,
    alphabet: Optional[Iterable[str]] = DEFAULT_ALPHABET,
    max_nodes: Optional[int] = None,
    timeout_sec: Optional[float] = None,
    cancel_flag: Optional[threading.Event] = None,
) -> ResultSet:
    """Distance plus every optimal path."""
    context = _context(start, target, alphabet, max_nodes, timeout_sec, cancel_flag)
    return create_strategy("all_paths").search(context)


def search_heuristic(
    start: str,
    target: str,
    *,
    alphabet: Optional[Iterable[str]] = DEFAULT_ALPHABET,
    max_nodes: Optional[int] = None,
    timeout_sec: Optional[float] = None,
    cancel_flag: Optional[threading.Event] = None,
) -> ResultSet:
    """Exact distance; paths are optimal but possibly not all of them."""
    context = _context(start, target, alphabet, max_nodes, timeout_sec, cancel_flag)
    return create_strategy("heuristic").search(context)


def search_bidirectional(
    start: str,
    target: str,
    *,
    stop_rule: str = "sum",
    alphabet: Optional[Iterable[str]] = DEFAULT_ALPHABET,
    max_nodes: Optional[int] = None,
    timeout_sec: Optional[float] = None,
    cancel_flag: Optional[threading.Event] = None,
) -> ResultSet:
    """Distance and diagnostics from a meet-in-the-middle search."""
    context = _context(start, target, alphabet, max_nodes, timeout_sec, cancel_flag)
    return create_strategy("bidirectional", stop_rule=stop_rule).search(context)


def search_bounded(
    start: str,
    target: str,
    max_depth: int,
    *,
    alphabet: Optional[Iterable[str]] = DEFAULT_ALPHABET,
    max_nodes: Optional[int] = None,
    timeout_sec: Optional[float] = None,
    cancel_flag: Optional[threading.Event] = None,
) -> ResultSet:
    """All optimal paths within max_depth; min_distance None if out of budget."""
    context = _context(start, target, alphabet, max_nodes, timeout_sec, cancel_flag)
    return create_strategy("bounded", max_depth=max_depth).search(context)
