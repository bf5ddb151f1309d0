"""
Errors Module - Exception hierarchy for the puzzle engine.

Every recoverable failure raised by the grid, the solver and the generator
derives from SudokuError, so adapters can catch a single type.
"""


class SudokuError(Exception):
    """Base class for all recoverable puzzle engine errors."""


class MalformedInputError(SudokuError, ValueError):
    """Puzzle string has the wrong length or an invalid character."""


class OutOfBoundsError(SudokuError, IndexError):
    """Position lies outside the grid."""


class ValueOutOfRangeError(SudokuError, ValueError):
    """Cell value exceeds the grid size."""


class InvalidDifficultyError(SudokuError, ValueError):
    """Unrecognized difficulty token."""


class UnsolvableInitialStateError(SudokuError):
    """Grid already violates the constraints before solving starts."""


class NoSolutionFoundError(SudokuError):
    """Deduction and backtracking were exhausted without a solution."""


class GenerationError(SudokuError):
    """The internal solve step of puzzle generation failed."""
