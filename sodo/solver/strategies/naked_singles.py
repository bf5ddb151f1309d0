"""
Naked Singles Strategy - Fills cells that have exactly one candidate.
"""

from ..base import SolverStrategy
from ..grid import Grid
from ..factory import register_strategy


@register_strategy
class NakedSinglesStrategy(SolverStrategy):
    """
    Fill every empty cell whose candidate set has a single member.

    Scans the grid once in row-major order. Candidates are computed when
    each cell is visited, so a placement earlier in the scan is taken into
    account for the cells after it.
    """
    name = "naked_singles"
    description = "Naked Singles - Cells with exactly one candidate"
    priority = 10

    def apply(self, grid: Grid) -> bool:
        progress = False

        for r, c in list(grid.empty_cells()):
            cands = grid.candidates(r, c)
            if len(cands) == 1:
                grid.set(r, c, cands.pop())
                progress = True

        return progress
