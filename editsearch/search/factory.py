"""
Strategy Registry - Named strategies, their parameters and traversal traits.
"""

import inspect
from typing import Any, Dict, List, Type

from .base import SearchStrategy


# Name -> strategy class, in registration order
_STRATEGIES: Dict[str, Type[SearchStrategy]] = {}


def register_strategy(cls: Type[SearchStrategy]) -> Type[SearchStrategy]:
    """
    Class decorator adding a strategy to the registry under cls.name.

    Usage:
        @register_strategy
        class DepthFirstStrategy(SearchStrategy):
            name = "depth_first"
            ...
    """
    _STRATEGIES[cls.name] = cls
    return cls


def _lookup(name: str) -> Type[SearchStrategy]:
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return _STRATEGIES[name]


def _constructor_parameters(cls: Type[SearchStrategy]) -> Dict[str, Any]:
    if cls.__init__ is object.__init__:
        return {}
    params = {}
    for param in list(inspect.signature(cls.__init__).parameters.values())[1:]:
        if param.kind in (param.VAR_POSITIONAL, param.VAR_KEYWORD):
            continue
        params[param.name] = None if param.default is param.empty else param.default
    return params


def get_strategy_parameters(name: str) -> Dict[str, Any]:
    """
    Keyword arguments a strategy accepts, with their defaults.

    Example:
        get_strategy_parameters("bounded")        # {"max_depth": 3}
        get_strategy_parameters("bidirectional")  # {"stop_rule": "sum"}
    """
    return _constructor_parameters(_lookup(name))


def create_strategy(name: str, **kwargs: Any) -> SearchStrategy:
    """
    Instantiate a registered strategy.

    Args:
        name: Strategy name (e.g., "all_paths", "bounded")
        **kwargs: Constructor options; only those the strategy declares

    Raises:
        ValueError: Unknown name, an option the strategy does not take, or
            an option value the strategy rejects
    """
    cls = _lookup(name)
    accepted = _constructor_parameters(cls)
    unexpected = sorted(set(kwargs) - set(accepted))
    if unexpected:
        allowed = ", ".join(accepted) or "none"
        raise ValueError(
            f"Strategy {name} does not accept {', '.join(unexpected)} (options: {allowed})"
        )
    return cls(**kwargs)


def get_strategy_names() -> List[str]:
    """List registered strategy names in registration order."""
    return list(_STRATEGIES.keys())


def _path_coverage(cls: Type[SearchStrategy]) -> str:
    if not cls.track_paths:
        return "none"
    return "all" if cls.admit_equal_cost else "subset"


def get_strategy_info() -> List[Dict[str, str]]:
    """
    Describe every registered strategy for listings and reports.

    Returns:
        One dict per strategy with keys:
        - name, description
        - ordering: frontier order ("fifo", "priority f = g + h", ...)
        - admission: registry rule, "<=" or "<"
        - paths: optimal paths returned, "all", "subset" or "none"
        - options: constructor options with defaults, e.g. "max_depth=3"
    """
    info = []
    for cls in _STRATEGIES.values():
        options = ", ".join(
            f"{key}={value!r}" for key, value in _constructor_parameters(cls).items()
        )
        info.append({
            "name": cls.name,
            "description": cls.description,
            "ordering": cls.ordering,
            "admission": "<=" if cls.admit_equal_cost else "<",
            "paths": _path_coverage(cls),
            "options": options,
        })
    return info
