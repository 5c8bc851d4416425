"""
Reference Module for edit-search

Pluggable engines that compute edit distances without graph search: the
exact dynamic-programming oracle used for cross-validation, and the greedy
approximations used for speed/accuracy comparison.

Usage:
    from editsearch.reference import create_engine

    # Exact oracle
    oracle = create_engine("dp")
    result = oracle.compute("kitten", "sitting")
    print(result.distance)          # 3
    print(result.describe_edits())

    # Approximation
    greedy = create_engine("greedy")
    print(greedy.distance("algorithm", "logarithm"))
"""

# Public API - Result types
from .result import (
    OperationType,
    EditOperation,
    ReferenceResult,
    apply_operations,
)

# Public API - Base class for custom engines
from .base import ReferenceEngine

# Public API - Factory functions
from .factory import (
    create_engine,
    register_engine,
    available_engines,
    heuristic_engines,
)

# Public API - Engines
from .dynamic import (
    DynamicProgrammingEngine,
    CompactDynamicProgrammingEngine,
    edit_matrix,
    compact_distance,
    batch_distances,
)
from .greedy import (
    PositionalGreedyEngine,
    AffixGreedyEngine,
    FrequencyGreedyEngine,
    quick_approximation,
)

__all__ = [
    # Result types
    "OperationType",
    "EditOperation",
    "ReferenceResult",
    "apply_operations",
    # Base class
    "ReferenceEngine",
    # Factory
    "create_engine",
    "register_engine",
    "available_engines",
    "heuristic_engines",
    # Engines
    "DynamicProgrammingEngine",
    "CompactDynamicProgrammingEngine",
    "PositionalGreedyEngine",
    "AffixGreedyEngine",
    "FrequencyGreedyEngine",
    # Functions
    "edit_matrix",
    "compact_distance",
    "batch_distances",
    "quick_approximation",
]
