"""
Hidden Singles Strategy - Fills values that fit only one cell of a unit.
"""

from typing import Dict, List, Set, Tuple

from ..base import SolverStrategy
from ..grid import Grid
from ..factory import register_strategy


@register_strategy
class HiddenSinglesStrategy(SolverStrategy):
    """
    For every unit and every value, place the value when exactly one empty
    cell of the unit still admits it.

    Units are visited as all rows, then all columns, then all boxes.
    Placements are immediate, so progress in one unit can expose hidden
    singles in the units visited after it during the same call.
    """
    name = "hidden_singles"
    description = "Hidden Singles - Values with a single legal cell in a unit"
    priority = 20

    def apply(self, grid: Grid) -> bool:
        progress = False

        for unit in self.unit_cells(grid):
            if self._apply_unit(grid, unit):
                progress = True

        return progress

    def _apply_unit(self, grid: Grid, unit: List[Tuple[int, int]]) -> bool:
        """Place every hidden single of one unit."""
        progress = False
        cands = self._unit_candidates(grid, unit)

        for value in range(1, grid.size + 1):
            spots = [pos for pos, values in cands.items() if value in values]
            if len(spots) == 1:
                r, c = spots[0]
                grid.set(r, c, value)
                progress = True
                # placement changes the candidates of the rest of the unit
                cands = self._unit_candidates(grid, unit)

        return progress

    @staticmethod
    def _unit_candidates(grid: Grid, unit: List[Tuple[int, int]]) -> Dict[Tuple[int, int], Set[int]]:
        return {
            (r, c): grid.candidates(r, c)
            for r, c in unit
            if grid.value(r, c) == 0
        }
