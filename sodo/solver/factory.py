"""
Strategy Factory Module - Registry and factory for strategy instantiation.
"""

from typing import Dict, List, Type, Any

from .base import SolverStrategy


# Global registry of strategies
_STRATEGIES: Dict[str, Type[SolverStrategy]] = {}


def register_strategy(cls: Type[SolverStrategy]) -> Type[SolverStrategy]:
    """
    Class decorator adding a deduction strategy to the registry.

    The class is stored under its ``name``; registering a second class
    with the same name replaces the first. Solvers built without an
    explicit strategy list pick it up through default_strategies().

    Usage:
        @register_strategy
        class NakedPairsStrategy(SolverStrategy):
            name = "naked_pairs"
            description = "Naked Pairs - Two cells sharing two candidates"
            priority = 30

            def apply(self, grid):
                ...
    """
    _STRATEGIES[cls.name] = cls
    return cls


def create_strategy(name: str, **kwargs: Any) -> SolverStrategy:
    """
    Instantiate a registered strategy.

    Args:
        name: Registered name, "naked_singles" or "hidden_singles" for
            the built-in strategies
        **kwargs: Passed through to the strategy constructor

    Raises:
        ValueError: If no strategy is registered under name
    """
    try:
        strategy_cls = _STRATEGIES[name]
    except KeyError:
        available = ", ".join(get_strategy_names())
        raise ValueError(f"Unknown strategy: {name}. Available: {available}") from None
    return strategy_cls(**kwargs)


def get_strategy_names() -> List[str]:
    """
    Get registered strategy names in priority order.

    Returns:
        List of registered strategy names
    """
    return [cls.name for cls in sorted(_STRATEGIES.values(), key=lambda s: s.priority)]


def get_strategy_info() -> List[Dict[str, str]]:
    """
    Get name and description for all registered strategies.

    Returns:
        List of dicts with 'name' and 'description' keys
    """
    return [
        {"name": cls.name, "description": cls.description}
        for cls in sorted(_STRATEGIES.values(), key=lambda s: s.priority)
    ]


def default_strategies() -> List[SolverStrategy]:
    """
    Instantiate every registered strategy, cheapest first.

    Returns:
        Strategy instances sorted by priority
    """
    return [create_strategy(name) for name in get_strategy_names()]
