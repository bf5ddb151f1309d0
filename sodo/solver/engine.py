"""
Solver Engine Module - Hybrid deduction and backtracking solver.

The solver first applies its deduction strategies until they stall, then
falls back to a depth-first search that branches on the most constrained
empty cell (minimum remaining values). It also provides single-step
deduction, hints, bounded solution counting and puzzle generation.
"""

import logging
import time
from typing import List, Optional, Tuple

from .base import SolverStrategy
from .errors import NoSolutionFoundError, UnsolvableInitialStateError
from .factory import default_strategies
from .generator import DEFAULT_SYMMETRY, Difficulty, PuzzleGenerator
from .grid import Grid
from .solution import Hint, Stats

logger = logging.getLogger(__name__)

# Default cap on deduction passes
DEFAULT_MAX_ITERATIONS = 1000

HIDDEN_SINGLES = "hidden_singles"
NAKED_SINGLES = "naked_singles"


class Solver:
    """
    Sudoku solver combining logical strategies with backtracking.

    A Solver holds no per-puzzle state; every call works on its own copy
    of the input grid except step(), which mutates in place.

    Attributes:
        strategies: Deduction strategies in priority order
        max_iterations: Cap on deduction passes per solve
        backtracking: Whether search runs when deduction stalls
    """

    def __init__(self, strategies: Optional[List[SolverStrategy]] = None,
                 max_iterations: int = DEFAULT_MAX_ITERATIONS,
                 backtracking: bool = True):
        """
        Initialize the solver.

        Args:
            strategies: Custom strategy list (default: all registered)
            max_iterations: Maximum deduction passes
            backtracking: Enable search fallback
        """
        self.strategies = strategies if strategies is not None else default_strategies()
        self.max_iterations = max_iterations
        self.backtracking = backtracking

    def solve(self, grid: Grid) -> Grid:
        """
        Solve a puzzle.

        Args:
            grid: Puzzle grid (not modified)

        Returns:
            Solved grid
        """
        solution, _ = self.solve_with_stats(grid)
        return solution

    def solve_with_stats(self, grid: Grid) -> Tuple[Grid, Stats]:
        """
        Solve a puzzle and report statistics.

        Args:
            grid: Puzzle grid (not modified)

        Returns:
            (solved grid, statistics)

        Raises:
            UnsolvableInitialStateError: If the grid already breaks a constraint
            NoSolutionFoundError: If deduction and search both fail
        """
        if not grid.is_valid():
            raise UnsolvableInitialStateError("Invalid initial state")

        start_time = time.perf_counter()
        work = grid.copy()
        stats = Stats()

        solved = self._apply_strategies(work, stats)
        if not solved and self.backtracking:
            logger.debug(
                f"Deduction stalled after {stats.iterations} iterations with "
                f"{work.empty_count()} empty cells, backtracking"
            )
            solved = self._backtrack(work, stats)

        stats.computation_time_ms = (time.perf_counter() - start_time) * 1000

        if solved or work.is_solved():
            logger.debug(
                f"Solved in {stats.computation_time_ms:.1f}ms: {stats.iterations} iterations, "
                f"{stats.cells_filled} deduced, {stats.backtracks} backtracks"
            )
            return work, stats

        raise NoSolutionFoundError("No solution found")

    def _apply_strategies(self, grid: Grid, stats: Stats) -> bool:
        """Run the strategy set until it stalls; True if the grid ends solved."""
        progress = True

        while progress and not grid.is_complete() and stats.iterations < self.max_iterations:
            progress = False
            stats.iterations += 1

            for strategy in self.strategies:
                before = grid.empty_count()

                if strategy.apply(grid):
                    stats.record_strategy(strategy.name, before - grid.empty_count())
                    progress = True

                    if not grid.is_valid():
                        logger.debug(f"Strategy {strategy.name} produced an invalid grid")
                        return False

        return grid.is_solved()

    def _backtrack(self, grid: Grid, stats: Stats) -> bool:
        """Depth-first search over MRV cells; candidates in ascending order."""
        if grid.is_complete():
            return grid.is_valid()

        cell = self.find_mrv_cell(grid)
        if cell is None:
            return grid.is_valid()

        r, c = cell
        for value in sorted(grid.candidates(r, c)):
            grid.set(r, c, value)
            stats.backtracks += 1

            if grid.is_valid() and self._backtrack(grid, stats):
                return True

            grid.set(r, c, 0)

        return False

    @staticmethod
    def find_mrv_cell(grid: Grid) -> Optional[Tuple[int, int]]:
        """
        Find the empty cell with the fewest candidates.

        Ties go to the first cell in row-major order. A cell with no
        candidates is returned at once since it proves the branch dead.

        Args:
            grid: Grid to scan

        Returns:
            (row, col) or None if the grid has no empty cell
        """
        best = None
        min_cands = grid.size + 1

        for r, c in grid.empty_cells():
            n = len(grid.candidates(r, c))
            if n < min_cands:
                min_cands = n
                best = (r, c)
                if n == 0:
                    break

        return best

    def hint(self, grid: Grid) -> Optional[Hint]:
        """
        Find the next logical placement without modifying the grid.

        Naked singles are preferred; otherwise the solver's hidden singles
        strategy is applied to a copy and the first changed cell returned.

        Args:
            grid: Current puzzle state

        Returns:
            Hint, or None if neither technique applies
        """
        for r, c in grid.empty_cells():
            cands = grid.candidates(r, c)
            if len(cands) == 1:
                return Hint(r, c, cands.pop(), NAKED_SINGLES)

        for strategy in self.strategies:
            if strategy.name != HIDDEN_SINGLES:
                continue
            temp = grid.copy()
            if strategy.apply(temp):
                for r, c in grid.diff(temp):
                    value = temp.value(r, c)
                    if value:
                        return Hint(r, c, value, HIDDEN_SINGLES)

        return None

    def count_solutions(self, grid: Grid, max_solutions: int = 2) -> int:
        """
        Count solutions by exhaustive search, stopping at a maximum.

        Args:
            grid: Puzzle grid (not modified)
            max_solutions: Stop once this many solutions are found

        Returns:
            Number of solutions found, at most max_solutions
        """
        counter = [0]
        self._count(grid.copy(), counter, max_solutions)
        return counter[0]

    def _count(self, grid: Grid, counter: List[int], max_solutions: int) -> None:
        if counter[0] >= max_solutions:
            return

        if grid.is_complete():
            if grid.is_valid():
                counter[0] += 1
            return

        r, c = grid.first_empty()
        for value in sorted(grid.candidates(r, c)):
            grid.set(r, c, value)
            if grid.is_valid():
                self._count(grid, counter, max_solutions)
            grid.set(r, c, 0)
            if counter[0] >= max_solutions:
                return

    def step(self, grid: Grid) -> bool:
        """
        Apply strategies once in priority order, in place.

        Stops at the first strategy that makes progress.

        Args:
            grid: Grid to advance

        Returns:
            True if any strategy made progress
        """
        return any(strategy.apply(grid) for strategy in self.strategies)

    def generate(self, size: int = 9, difficulty: Difficulty = Difficulty.MEDIUM,
                 seed: Optional[int] = None, symmetry: float = DEFAULT_SYMMETRY,
                 min_givens: Optional[int] = None) -> Grid:
        """
        Generate a puzzle of the given size and difficulty.

        Args:
            size: Grid side length (perfect square)
            difficulty: Difficulty tier
            seed: Optional seed for reproducible output
            symmetry: Probability of symmetric cell removal
            min_givens: Minimum clues to keep (default per size)

        Returns:
            Puzzle grid
        """
        generator = PuzzleGenerator(self, seed=seed, symmetry=symmetry, min_givens=min_givens)
        return generator.generate(size, difficulty)
