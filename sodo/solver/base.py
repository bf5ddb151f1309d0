"""
Base Strategy Module - Abstract base class for deduction strategies.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from .grid import Grid


class SolverStrategy(ABC):
    """
    Abstract base class for all logical deduction strategies.

    Subclasses must implement the apply() method and define
    name, description and priority class attributes.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description for CLI listings
        priority: Ordering key; cheaper strategies run first
    """
    name: str = "base"
    description: str = "Base strategy"
    priority: int = 100

    @abstractmethod
    def apply(self, grid: Grid) -> bool:
        """
        Attempt to make progress on the grid, mutating it in place.

        Strategies do not check that the grid stays valid; that is
        the solver's responsibility.

        Args:
            grid: Grid to work on

        Returns:
            True if at least one value was placed
        """
        pass

    def unit_cells(self, grid: Grid) -> List[List[Tuple[int, int]]]:
        """
        List every unit of the grid as cell positions.

        Rows come first, then columns, then boxes in row-major order.

        Args:
            grid: Grid whose geometry is used

        Returns:
            List of units, each a list of (row, col) tuples
        """
        n, b = grid.size, grid.box_size
        units = [[(r, c) for c in range(n)] for r in range(n)]
        units += [[(r, c) for r in range(n)] for c in range(n)]
        for br in range(0, n, b):
            for bc in range(0, n, b):
                units.append([
                    (r, c)
                    for r in range(br, br + b)
                    for c in range(bc, bc + b)
                ])
        return units

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
