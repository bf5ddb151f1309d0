"""
Solution Module - Statistics and hint results produced by the solver.
"""

from dataclasses import dataclass, field
from typing import Dict, Any


@dataclass
class Stats:
    """
    Statistics collected during one solve call.

    Attributes:
        iterations: Deduction passes over the strategy set
        cells_filled: Cells filled by deduction (not by search)
        backtracks: Values placed during backtracking search
        strategies_used: Strategy name -> number of passes it made progress
        computation_time_ms: Time taken in milliseconds
    """
    iterations: int = 0
    cells_filled: int = 0
    backtracks: int = 0
    strategies_used: Dict[str, int] = field(default_factory=dict)
    computation_time_ms: float = 0.0

    def record_strategy(self, name: str, filled: int) -> None:
        """
        Count a strategy application that made progress.

        Args:
            name: Strategy name
            filled: Cells it filled
        """
        self.strategies_used[name] = self.strategies_used.get(name, 0) + 1
        self.cells_filled += filled

    def to_dict(self) -> Dict[str, Any]:
        return {
            "iterations": self.iterations,
            "cells_filled": self.cells_filled,
            "backtracks": self.backtracks,
            "strategies_used": dict(self.strategies_used),
            "computation_time_ms": round(self.computation_time_ms, 3),
        }


@dataclass(frozen=True)
class Hint:
    """
    A single logically justified placement.

    Attributes:
        row: Row index (0-based)
        col: Column index (0-based)
        value: Value to place
        strategy: Name of the strategy that justifies it
    """
    row: int
    col: int
    value: int
    strategy: str = ""

    def to_dict(self) -> Dict[str, int]:
        """1-indexed form used by the host bindings."""
        return {"row": self.row + 1, "col": self.col + 1, "value": self.value}
