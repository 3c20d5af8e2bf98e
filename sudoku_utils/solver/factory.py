"""
Strategy Registry - Maps strategy names to classes and selects them by tier.

Strategies register themselves on import, so the import order in
strategies/__init__.py is the solving order. Guessing strategies are
registered too but only created on request, never by the tier filters.
"""

from typing import Any, Dict, List, Optional, Type

from .base import SolvingStrategy
from .difficulty import Difficulty


# Global registry of strategies, in solving order
_STRATEGIES: Dict[str, Type[SolvingStrategy]] = {}


def register_strategy(cls: Type[SolvingStrategy]) -> Type[SolvingStrategy]:
    """
    Decorator to register a strategy class.

    Registration order is the order in which the solving loop tries
    strategies, so strategies must be imported in their declared order.

    Usage:
        @register_strategy
        class MyStrategy(SolvingStrategy):
            name = "my_strategy"
            ...

    Args:
        cls: Strategy class to register

    Returns:
        The same class (for decorator chaining)
    """
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> SolvingStrategy:
    """
    Create a strategy instance by name.

    Args:
        name: Strategy name (e.g., "existing_singles", "x_wing")
        **kwargs: Additional arguments passed to strategy constructor

    Returns:
        Strategy instance

    Raises:
        ValueError: If strategy name not found
    """
    if name not in _STRATEGIES:
        available = ", ".join(_STRATEGIES.keys())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}")
    return _STRATEGIES[name](**kwargs)


def get_strategy_names() -> List[str]:
    """
    Get list of available strategy names.

    Returns:
        List of registered strategy names
    """
    return list(_STRATEGIES.keys())


def get_strategy_info() -> List[Dict[str, str]]:
    """
    Get name, description and tier for all registered strategies.

    Returns:
        List of dicts with 'name', 'description' and 'difficulty' keys
    """
    return [
        {"name": cls.name, "description": cls.description, "difficulty": cls.difficulty.label}
        for cls in _STRATEGIES.values()
    ]


def implemented_strategies(ceiling: Optional[Difficulty] = None) -> List[SolvingStrategy]:
    """
    Instantiate the deterministic strategies in solving order.

    Args:
        ceiling: Highest tier to include (all tiers if None)

    Returns:
        Strategy instances whose tier is <= ceiling, guessing strategies excluded
    """
    return [
        cls() for cls in _STRATEGIES.values()
        if not cls.guessing and (ceiling is None or cls.difficulty <= ceiling)
    ]


def strategy_names_for(difficulty: Difficulty) -> List[str]:
    """Names of the deterministic strategies tagged with exactly this tier."""
    return [
        cls.name for cls in _STRATEGIES.values()
        if not cls.guessing and cls.difficulty == difficulty
    ]
