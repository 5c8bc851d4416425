"""
Search Package - Graph-search strategies for edit distance.

Strings are nodes of an implicit unit-cost graph whose edges are single
insert/delete/substitute operations. Each strategy searches that graph from
a start string to a target string and returns an immutable ResultSet.

Public API:
    - distance(), search_all(), search_heuristic(),
      search_bidirectional(), search_bounded(): one-call entry points
    - ResultSet / SearchMetrics: Result snapshot and statistics
    - SearchContext: Inputs, alphabet and cancellation for one run
    - SearchStrategy / BestFirstStrategy: Strategy base classes
    - create_strategy(), get_strategy_names(), get_strategy_info(),
      get_strategy_parameters()
    - neighbors(), TransitionGenerator: One-edit neighbourhood

Usage:
    from editsearch.search import search_all, create_strategy, SearchContext

    result = search_all("kitten", "sitting")
    print(result.min_distance, result.path_count)

    # Explicit strategy with a node cap
    context = SearchContext(start="intention", target="execution", max_nodes=50_000)
    result = create_strategy("heuristic").search(context)
    if result.was_cancelled:
        print("gave up after", result.nodes_explored, "nodes")
"""

# Core data structures
from .transitions import (
    DEFAULT_ALPHABET,
    TransitionGenerator,
    neighbors,
    resolve_alphabet,
    reachability_bound,
    is_single_edit,
)
from .state import SearchState
from .result import ResultSet, SearchMetrics, Path
from .context import SearchContext, SearchCancelled

# Strategy framework
from .base import SearchStrategy, BestFirstStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    get_strategy_parameters,
    register_strategy,
)

# Import strategies to register them
from . import strategies

from .api import (
    distance,
    search_all,
    search_heuristic,
    search_bidirectional,
    search_bounded,
)

__all__ = [
    # Data structures
    "DEFAULT_ALPHABET",
    "TransitionGenerator",
    "neighbors",
    "resolve_alphabet",
    "reachability_bound",
    "is_single_edit",
    "SearchState",
    "ResultSet",
    "SearchMetrics",
    "Path",
    "SearchContext",
    "SearchCancelled",
    # Strategy framework
    "SearchStrategy",
    "BestFirstStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "get_strategy_parameters",
    "register_strategy",
    # Entry points
    "distance",
    "search_all",
    "search_heuristic",
    "search_bidirectional",
    "search_bounded",
]
