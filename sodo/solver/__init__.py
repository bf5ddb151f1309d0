"""
Solver Package - Sudoku puzzle engine.

This package provides the grid model, a pluggable strategy framework for
logical deduction, a hybrid deduction/backtracking solver and a puzzle
generator for any perfect-square grid size.

Public API:
    - Grid: Mutable grid with validity and candidate logic
    - Cell, CellKind: Tagged cell value
    - SolverStrategy: Abstract base for deduction strategies
    - Solver: Solving, hinting, counting and generation
    - Stats, Hint: Solver results
    - Difficulty: Generation difficulty tiers
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies
    - get_strategy_info(): Get strategy metadata

Usage:
    from sodo.solver import Grid, Solver

    grid = Grid.from_string(puzzle, 9)
    solution, stats = Solver().solve_with_stats(grid)
    print(solution)
    print(f"{stats.iterations} iterations, {stats.backtracks} backtracks")
"""

# Core data structures
from .cell import Cell, CellKind
from .grid import Grid
from .solution import Stats, Hint
from .errors import (
    SudokuError,
    MalformedInputError,
    OutOfBoundsError,
    ValueOutOfRangeError,
    InvalidDifficultyError,
    UnsolvableInitialStateError,
    NoSolutionFoundError,
    GenerationError,
)

# Strategy framework
from .base import SolverStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    default_strategies,
    register_strategy,
)

# Import strategies to register them
from . import strategies

# Solver and generator
from .engine import Solver
from .generator import Difficulty, PuzzleGenerator, removal_range, default_min_givens

__all__ = [
    # Data structures
    "Cell",
    "CellKind",
    "Grid",
    "Stats",
    "Hint",
    # Errors
    "SudokuError",
    "MalformedInputError",
    "OutOfBoundsError",
    "ValueOutOfRangeError",
    "InvalidDifficultyError",
    "UnsolvableInitialStateError",
    "NoSolutionFoundError",
    "GenerationError",
    # Strategy framework
    "SolverStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "default_strategies",
    "register_strategy",
    # Solver
    "Solver",
    "Difficulty",
    "PuzzleGenerator",
    "removal_range",
    "default_min_givens",
]
