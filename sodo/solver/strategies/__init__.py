"""
Strategies Package - Concrete deduction strategy implementations.

Import this module to register all built-in strategies.
"""

from .naked_singles import NakedSinglesStrategy
from .hidden_singles import HiddenSinglesStrategy

__all__ = [
    "NakedSinglesStrategy",
    "HiddenSinglesStrategy",
]
