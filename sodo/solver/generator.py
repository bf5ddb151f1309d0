"""
Generator Module - Random puzzle construction calibrated to a difficulty.

A puzzle is built in three steps:
    1. Fill the diagonal boxes with random permutations. These boxes share
       no row, column or box with each other, so the partial grid is
       always valid.
    2. Solve the partial grid to obtain a complete solution.
    3. Clear cells in shuffled order, usually together with their
       point-symmetric counterpart, until the removal target is reached.

Unique solvability of the result is not checked.
"""

import logging
from enum import Enum
from typing import Optional, Tuple, TYPE_CHECKING

import numpy as np

from .errors import GenerationError, InvalidDifficultyError, SudokuError
from .grid import Grid

if TYPE_CHECKING:
    from .engine import Solver

logger = logging.getLogger(__name__)

# Relative jitter applied to the removal count
REMOVAL_JITTER = 0.05

# Probability of also clearing the point-symmetric cell
DEFAULT_SYMMETRY = 0.7

# Known minimum clue counts for a uniquely solvable puzzle
_MIN_GIVENS = {1: 0, 4: 4, 9: 17}


class Difficulty(Enum):
    """Difficulty tier, valued by the percentage of cells removed."""
    EASY = 40
    MEDIUM = 50
    HARD = 60
    EXPERT = 70

    @property
    def removal_percent(self) -> int:
        return self.value

    @classmethod
    def parse(cls, token: str) -> 'Difficulty':
        """
        Parse a case-insensitive difficulty name.

        Args:
            token: "easy", "medium", "hard" or "expert"

        Returns:
            Matching Difficulty

        Raises:
            InvalidDifficultyError: If the token is not recognized
        """
        try:
            return cls[token.strip().upper()]
        except (KeyError, AttributeError):
            raise InvalidDifficultyError(f"Invalid difficulty: {token}") from None


def default_min_givens(size: int) -> int:
    """
    Minimum number of clues kept for a grid size.

    Uses the known minimum for 4x4 and 9x9 and scales the 9x9 ratio
    for larger grids.
    """
    return _MIN_GIVENS.get(size, size * size * 17 // 81)


def removal_range(size: int, difficulty: Difficulty,
                  min_givens: Optional[int] = None) -> Tuple[int, int]:
    """
    Inclusive bounds of the number of cells removed for a puzzle.

    Args:
        size: Grid side length
        difficulty: Difficulty tier
        min_givens: Clues that must remain (default per size)

    Returns:
        (low, high) removal counts
    """
    total = size * size
    if min_givens is None:
        min_givens = default_min_givens(size)
    cap = max(total - min_givens, 0)

    base = total * difficulty.removal_percent // 100
    var = int(base * REMOVAL_JITTER)
    if var > 0:
        low, high = base - var, min(base + var, cap)
    else:
        low = high = base

    high = min(high, cap)
    return min(low, high), high


class PuzzleGenerator:
    """
    Builds random puzzles using a Solver for the completion step.

    Attributes:
        solver: Solver used to complete the seeded grid
        symmetry: Probability of clearing the symmetric counterpart
        min_givens: Clue floor override, None for the per-size default
    """

    def __init__(self, solver: 'Solver', seed: Optional[int] = None,
                 symmetry: float = DEFAULT_SYMMETRY,
                 min_givens: Optional[int] = None):
        """
        Initialize the generator.

        Args:
            solver: Solver used for step 2
            seed: Seed for reproducible output, None for fresh entropy
            symmetry: Probability in [0, 1] of symmetric removal
            min_givens: Minimum clues to keep
        """
        if not 0.0 <= symmetry <= 1.0:
            raise ValueError(f"Symmetry probability must be in [0, 1], got {symmetry}")
        self.solver = solver
        self.symmetry = symmetry
        self.min_givens = min_givens
        self._rng = np.random.default_rng(seed)

    def generate(self, size: int = 9, difficulty: Difficulty = Difficulty.MEDIUM) -> Grid:
        """
        Generate a puzzle.

        Args:
            size: Grid side length (perfect square)
            difficulty: Difficulty tier

        Returns:
            Puzzle grid whose clues are givens

        Raises:
            GenerationError: If the seeded grid could not be completed
        """
        grid = Grid(size)
        b = grid.box_size

        for i in self._rng.permutation(b):
            self._fill_box(grid, int(i) * b)

        try:
            solution = self.solver.solve(grid)
        except SudokuError as e:
            raise GenerationError(f"Failed to complete generated grid: {e}") from e

        low, high = removal_range(size, difficulty, self.min_givens)
        target = low if low == high else int(self._rng.integers(low, high + 1))

        puzzle = self._remove_cells(solution, target)
        puzzle.mark_givens()

        logger.info(
            f"Generated {difficulty.name.lower()} {size}x{size} puzzle: "
            f"{puzzle.empty_count()} cells removed (range {low}-{high})"
        )
        return puzzle

    def _fill_box(self, grid: Grid, start: int) -> None:
        """Fill the diagonal box at (start, start) with a random permutation."""
        b = grid.box_size
        values = self._rng.permutation(np.arange(1, grid.size + 1)).tolist()

        i = 0
        for r in range(start, start + b):
            for c in range(start, start + b):
                grid.set(r, c, values[i])
                i += 1

    def _remove_cells(self, grid: Grid, target: int) -> Grid:
        """Clear cells in shuffled order until target cells are empty."""
        size = grid.size
        positions = [(r, c) for r in range(size) for c in range(size)]
        removed = 0

        for idx in self._rng.permutation(len(positions)):
            if removed >= target:
                break

            r, c = positions[int(idx)]
            if grid.value(r, c) == 0:
                continue

            grid.set(r, c, 0)
            removed += 1

            if removed < target and self._rng.random() < self.symmetry:
                sr, sc = size - 1 - r, size - 1 - c
                if (sr, sc) != (r, c) and grid.value(sr, sc) != 0:
                    grid.set(sr, sc, 0)
                    removed += 1

        return grid
