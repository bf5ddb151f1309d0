"""
Grid Module - Mutable Sudoku grid with constraint and candidate logic.
"""

import math
from typing import Dict, Iterator, List, Optional, Set, Tuple, Any

import numpy as np

from .cell import Cell
from .errors import MalformedInputError, OutOfBoundsError, ValueOutOfRangeError


# Characters accepted as empty cells when parsing
EMPTY_MARKERS = "0. "

# Character used for empty cells in compact and pretty output
EMPTY_CHAR = "."

# Largest value the 1-9, A-Z alphabet can encode
MAX_SIZE = 35


def value_to_char(value: int) -> str:
    """
    Convert a cell value to its display character.

    Args:
        value: Cell value, 0 for empty

    Returns:
        '.' for empty, '1'-'9' for 1-9, 'A', 'B', ... for 10 and above
    """
    if value == 0:
        return EMPTY_CHAR
    if value <= 9:
        return str(value)
    return chr(ord("A") + value - 10)


def char_to_value(ch: str, size: int) -> Optional[int]:
    """
    Parse a puzzle character for a grid of the given size.

    Args:
        ch: Single character
        size: Grid side length

    Returns:
        0 for an empty marker, the cell value, or None if the
        character is not part of the alphabet for this size
    """
    if ch in EMPTY_MARKERS:
        return 0
    if ch in "123456789":
        value = int(ch)
    elif "A" <= ch <= "Z":
        value = ord(ch) - ord("A") + 10
    else:
        return None
    return value if value <= size else None


def _units_valid(units: np.ndarray) -> bool:
    """Check that no row of a unit matrix repeats a non-zero value."""
    ordered = np.sort(units, axis=1)
    duplicates = (ordered[:, 1:] == ordered[:, :-1]) & (ordered[:, 1:] > 0)
    return not duplicates.any()


class Grid:
    """
    Square Sudoku grid of side N with N = box_size ** 2.

    Values are kept in an N x N integer matrix (0 for empty cells) with a
    parallel boolean mask marking givens. The grid is mutated in place by
    strategies, the solver and the generator; it is never resized.

    Attributes:
        size: Side length N
        box_size: Side length of a sub-box
    """

    def __init__(self, size: int = 9):
        """
        Create an empty grid.

        Args:
            size: Side length, a perfect square no larger than MAX_SIZE
                (so at most 25)

        Raises:
            ValueError: If size is not a positive perfect square or
                its values cannot be written as single characters
        """
        box_size = math.isqrt(size) if size > 0 else 0
        if size < 1 or box_size * box_size != size:
            raise ValueError(f"Invalid Sudoku size: {size} is not a perfect square")
        if size > MAX_SIZE:
            raise ValueError(f"Invalid Sudoku size: {size} exceeds the maximum of {MAX_SIZE}")

        self._size = size
        self._box_size = box_size
        self._values = np.zeros((size, size), dtype=np.int16)
        self._given = np.zeros((size, size), dtype=bool)

    @classmethod
    def from_string(cls, text: str, size: int = 9) -> 'Grid':
        """
        Parse a row-major puzzle string into a grid of givens.

        Args:
            text: Exactly size*size characters
            size: Grid side length

        Returns:
            Grid with Given and Empty cells

        Raises:
            MalformedInputError: On length mismatch or invalid character
        """
        grid = cls(size)
        expected = size * size
        if len(text) != expected:
            raise MalformedInputError(
                f"Invalid input length: expected {expected}, got {len(text)}"
            )

        for i, ch in enumerate(text):
            row, col = divmod(i, size)
            value = char_to_value(ch, size)
            if value is None:
                raise MalformedInputError(
                    f"Invalid character '{ch}' at position ({row}, {col})"
                )
            grid._values[row, col] = value
            grid._given[row, col] = value > 0

        return grid

    @classmethod
    def from_rows(cls, rows: List[List[int]]) -> 'Grid':
        """
        Create a grid of givens from a 2D list (0 for empty).

        Args:
            rows: Square 2D list of integers

        Returns:
            Grid instance
        """
        size = len(rows)
        if any(len(row) != size for row in rows):
            raise MalformedInputError("Rows must form a square matrix")

        grid = cls(size)
        for r, row in enumerate(rows):
            for c, value in enumerate(row):
                if value < 0 or value > size:
                    raise ValueOutOfRangeError(
                        f"Value {value} is out of range for {size}x{size} Sudoku"
                    )
                grid._values[r, c] = value
                grid._given[r, c] = value > 0
        return grid

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Grid':
        """
        Rebuild a grid from the form produced by to_dict().

        Args:
            data: Dictionary with 'size' and 'cells' keys

        Returns:
            Grid instance
        """
        size = data["size"]
        cells = data["cells"]
        if len(cells) != size or any(len(row) != size for row in cells):
            raise MalformedInputError(f"Expected {size}x{size} cells")

        grid = cls(size)
        for r, row in enumerate(cells):
            for c, entry in enumerate(row):
                try:
                    cell = Cell.from_dict(entry)
                except (KeyError, ValueError) as e:
                    raise MalformedInputError(f"Invalid cell at ({r}, {c}): {e}") from e
                if cell.value is not None and cell.value > size:
                    raise ValueOutOfRangeError(
                        f"Value {cell.value} is out of range for {size}x{size} Sudoku"
                    )
                grid._values[r, c] = cell.value or 0
                grid._given[r, c] = cell.is_given
        return grid

    @property
    def size(self) -> int:
        """Grid side length."""
        return self._size

    @property
    def box_size(self) -> int:
        """Sub-box side length."""
        return self._box_size

    def _in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._size and 0 <= col < self._size

    def _check_position(self, row: int, col: int) -> None:
        if not self._in_bounds(row, col):
            raise OutOfBoundsError(
                f"Invalid position ({row}, {col}) for {self._size}x{self._size} Sudoku"
            )

    def _box_origin(self, row: int, col: int) -> Tuple[int, int]:
        b = self._box_size
        return (row // b) * b, (col // b) * b

    def get(self, row: int, col: int) -> Optional[Cell]:
        """
        Get the cell at a position.

        Args:
            row: Row index
            col: Column index

        Returns:
            Cell, or None if the position is out of bounds
        """
        if not self._in_bounds(row, col):
            return None
        value = int(self._values[row, col])
        if value == 0:
            return Cell.empty()
        if self._given[row, col]:
            return Cell.of_given(value)
        return Cell.of_filled(value)

    def value(self, row: int, col: int) -> int:
        """Get the numeric value at a position (0 for empty)."""
        self._check_position(row, col)
        return int(self._values[row, col])

    def set(self, row: int, col: int, value: int) -> None:
        """
        Place or clear a value.

        Args:
            row: Row index
            col: Column index
            value: 0 clears the cell, 1..size fills it

        Raises:
            OutOfBoundsError: If the position is outside the grid
            ValueOutOfRangeError: If the value is negative or exceeds size
        """
        self._check_position(row, col)
        if value < 0 or value > self._size:
            raise ValueOutOfRangeError(
                f"Value {value} is too large for {self._size}x{self._size} Sudoku"
            )
        self._values[row, col] = value
        self._given[row, col] = False

    def mark_givens(self) -> None:
        """Turn every non-empty cell into a given."""
        self._given = self._values > 0

    def rows(self) -> np.ndarray:
        """Unit matrix with one row per grid row."""
        return self._values

    def cols(self) -> np.ndarray:
        """Unit matrix with one row per grid column."""
        return self._values.T

    def boxes(self) -> np.ndarray:
        """Unit matrix with one row per box, boxes in row-major order."""
        b, n = self._box_size, self._size
        return self._values.reshape(b, b, b, b).swapaxes(1, 2).reshape(n, n)

    def valid_rows(self) -> bool:
        return _units_valid(self.rows())

    def valid_cols(self) -> bool:
        return _units_valid(self.cols())

    def valid_boxes(self) -> bool:
        return _units_valid(self.boxes())

    def is_valid(self) -> bool:
        """True if no row, column or box holds a repeated value."""
        return self.valid_rows() and self.valid_cols() and self.valid_boxes()

    def is_complete(self) -> bool:
        return not (self._values == 0).any()

    def is_solved(self) -> bool:
        return self.is_complete() and self.is_valid()

    def can_place(self, row: int, col: int, value: int) -> bool:
        """
        Check whether a value is absent from the row, column and box.

        Args:
            row: Row index
            col: Column index
            value: Value to test

        Returns:
            False for out-of-range positions or values
        """
        if not self._in_bounds(row, col) or value < 1 or value > self._size:
            return False
        if (self._values[row, :] == value).any():
            return False
        if (self._values[:, col] == value).any():
            return False
        br, bc = self._box_origin(row, col)
        b = self._box_size
        return not (self._values[br:br + b, bc:bc + b] == value).any()

    def candidates(self, row: int, col: int) -> Set[int]:
        """
        Values still possible for a cell.

        Args:
            row: Row index
            col: Column index

        Returns:
            Set of values 1..size not present in the cell's units;
            empty for non-empty cells
        """
        self._check_position(row, col)
        if self._values[row, col]:
            return set()

        br, bc = self._box_origin(row, col)
        b = self._box_size
        used = set(self._values[row, :].tolist())
        used.update(self._values[:, col].tolist())
        used.update(self._values[br:br + b, bc:bc + b].ravel().tolist())
        return {v for v in range(1, self._size + 1) if v not in used}

    def empty_count(self) -> int:
        return int(np.count_nonzero(self._values == 0))

    def first_empty(self) -> Optional[Tuple[int, int]]:
        """First empty cell in row-major order, or None if full."""
        flat = np.flatnonzero(self._values == 0)
        if flat.size == 0:
            return None
        return divmod(int(flat[0]), self._size)

    def empty_cells(self) -> Iterator[Tuple[int, int]]:
        """Iterate over empty cell positions in row-major order."""
        for r in range(self._size):
            for c in range(self._size):
                if self._values[r, c] == 0:
                    yield r, c

    def copy(self) -> 'Grid':
        clone = Grid(self._size)
        clone._values = self._values.copy()
        clone._given = self._given.copy()
        return clone

    def diff(self, other: 'Grid') -> List[Tuple[int, int]]:
        """
        Find cells that differ between this grid and another.

        Args:
            other: Grid of the same size

        Returns:
            List of (row, col) tuples in row-major order
        """
        if not isinstance(other, Grid):
            raise TypeError("Can only diff against another Grid")
        if other.size != self._size:
            raise ValueError("Can only diff grids of the same size")

        return [
            (r, c)
            for r in range(self._size)
            for c in range(self._size)
            if self.get(r, c) != other.get(r, c)
        ]

    def to_list(self) -> List[List[int]]:
        """Values as a 2D list, 0 for empty."""
        return self._values.tolist()

    def to_dict(self) -> Dict[str, Any]:
        """JSON-ready form preserving the given/filled distinction."""
        return {
            "size": self._size,
            "cells": [
                [self.get(r, c).to_dict() for c in range(self._size)]
                for r in range(self._size)
            ],
        }

    def to_compact_string(self) -> str:
        """Row-major string, '.' for empty cells."""
        return "".join(value_to_char(v) for v in self._values.ravel().tolist())

    def __str__(self) -> str:
        n, b = self._size, self._box_size
        lines = []
        for r in range(n):
            if r > 0 and r % b == 0:
                lines.append("-" * (n * 2 + b - 1))
            parts = []
            for c in range(n):
                if c > 0 and c % b == 0:
                    parts.append("|")
                parts.append(value_to_char(int(self._values[r, c])) + " ")
            lines.append("".join(parts).rstrip())
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"Grid(size={self._size}, '{self.to_compact_string()}')"

    def __eq__(self, other):
        """Grids are equal when they hold the same values."""
        if not isinstance(other, Grid):
            return NotImplemented
        return self._size == other._size and np.array_equal(self._values, other._values)

    __hash__ = None
