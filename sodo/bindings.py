"""
Host Bindings - String-in, string-out entry points for embedding hosts.

Every function takes a puzzle string and an optional grid size
(default 9). Engine failures propagate as SudokuError exceptions carrying
the error description.

Example:
    from sodo import bindings

    solution = bindings.solve("53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79")
    puzzle = bindings.generate("hard")
    h = bindings.hint(puzzle)
    if h:
        print(f"Place {h['value']} at row {h['row']}, col {h['col']}")
"""

from typing import Dict, Optional

from sodo.solver import Difficulty, Grid, Solver, SudokuError

DEFAULT_SIZE = 9


def solve(puzzle: str, size: int = DEFAULT_SIZE) -> str:
    """
    Solve a puzzle.

    Args:
        puzzle: Puzzle string, '.', '0' or space for empty cells
        size: Grid size

    Returns:
        Solution as compact string
    """
    grid = Grid.from_string(puzzle, size)
    return Solver().solve(grid).to_compact_string()


def generate(difficulty: str = "medium", size: int = DEFAULT_SIZE,
             seed: Optional[int] = None) -> str:
    """
    Generate a new puzzle.

    Args:
        difficulty: "easy", "medium", "hard" or "expert"
        size: Grid size
        seed: Optional seed for reproducible output

    Returns:
        Generated puzzle as compact string
    """
    level = Difficulty.parse(difficulty)
    return Solver().generate(size, level, seed=seed).to_compact_string()


def validate(puzzle: str, size: int = DEFAULT_SIZE) -> bool:
    """True if the puzzle has no row, column or box conflicts."""
    return Grid.from_string(puzzle, size).is_valid()


def is_solvable(puzzle: str, size: int = DEFAULT_SIZE) -> bool:
    """
    Check whether a puzzle has a solution.

    Malformed puzzle strings still raise; only solving failures
    are reported as False.
    """
    grid = Grid.from_string(puzzle, size)
    try:
        Solver().solve(grid)
    except SudokuError:
        return False
    return True


def hint(puzzle: str, size: int = DEFAULT_SIZE) -> Optional[Dict[str, int]]:
    """
    Get the next logical move.

    Returns:
        {"row", "col", "value"} with 1-indexed positions, or None
    """
    grid = Grid.from_string(puzzle, size)
    found = Solver().hint(grid)
    return found.to_dict() if found else None


def format(puzzle: str, size: int = DEFAULT_SIZE) -> str:
    """Format a puzzle string as a multi-line grid with box separators."""
    return str(Grid.from_string(puzzle, size))
