"""
Reference Engine Factory

Factory for creating oracle and heuristic engine instances.
"""

import importlib
from typing import Dict, List, Type, Union

from .base import ReferenceEngine


# Registry of available engines: dotted "module.Class" or a class
_ENGINE_REGISTRY: Dict[str, Union[str, Type[ReferenceEngine]]] = {
    "dp": "dynamic.DynamicProgrammingEngine",
    "dp_compact": "dynamic.CompactDynamicProgrammingEngine",
    "greedy": "greedy.PositionalGreedyEngine",
    "greedy_affix": "greedy.AffixGreedyEngine",
    "greedy_frequency": "greedy.FrequencyGreedyEngine",
}

# Cache for loaded engine classes
_ENGINE_CACHE: Dict[str, Type[ReferenceEngine]] = {}


def _load_engine_class(engine_type: str) -> Type[ReferenceEngine]:
    """Lazily load an engine class by type."""
    if engine_type in _ENGINE_CACHE:
        return _ENGINE_CACHE[engine_type]

    entry = _ENGINE_REGISTRY[engine_type]
    if isinstance(entry, str):
        module_name, class_name = entry.rsplit(".", 1)
        module = importlib.import_module(f".{module_name}", package=__package__)
        engine_class = getattr(module, class_name)
    else:
        engine_class = entry

    _ENGINE_CACHE[engine_type] = engine_class
    return engine_class


def create_engine(engine_type: str = "dp") -> ReferenceEngine:
    """
    Create a reference engine by type.

    Args:
        engine_type: Engine type identifier. Available types:
            - "dp" (default): full-table dynamic programming (exact)
            - "dp_compact": two-row dynamic programming (exact, distance only)
            - "greedy": left-to-right positional greedy
            - "greedy_affix": common prefix/suffix stripping + positional greedy
            - "greedy_frequency": character-count greedy

    Returns:
        ReferenceEngine instance

    Raises:
        ValueError: If engine_type is not recognized

    Example:
        engine = create_engine()
        result = engine.compute("kitten", "sitting")
        print(result.distance, result.describe_edits())
    """
    if engine_type not in _ENGINE_REGISTRY:
        available = ", ".join(_ENGINE_REGISTRY.keys())
        raise ValueError(f"Unknown engine type: {engine_type}. Available: {available}")

    engine_class = _load_engine_class(engine_type)
    return engine_class()


def register_engine(name: str, engine_class: type) -> None:
    """
    Register a custom reference engine type.

    Args:
        name: Engine type identifier
        engine_class: ReferenceEngine subclass

    Example:
        from editsearch.reference import register_engine, ReferenceEngine

        class MyEngine(ReferenceEngine):
            ...

        register_engine("mine", MyEngine)
    """
    if not isinstance(engine_class, type) or not issubclass(engine_class, ReferenceEngine):
        raise TypeError(f"{engine_class} must be a subclass of ReferenceEngine")
    _ENGINE_REGISTRY[name] = engine_class
    _ENGINE_CACHE.pop(name, None)


def available_engines() -> List[str]:
    """
    List available engine types.

    Returns:
        List of registered engine type names
    """
    return list(_ENGINE_REGISTRY.keys())


def heuristic_engines() -> List[str]:
    """Registered engine types whose results are approximate."""
    return [name for name in _ENGINE_REGISTRY if not _load_engine_class(name).exact]
