"""
Tests for puzzle generation and difficulty handling

Usage:
    pytest tests/test_generator.py
"""

import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sodo.solver import (
    Difficulty,
    GenerationError,
    Grid,
    InvalidDifficultyError,
    NoSolutionFoundError,
    PuzzleGenerator,
    Solver,
    default_min_givens,
    removal_range,
)


class FailingSolver:
    """Stand-in solver whose solve step always fails."""

    def solve(self, grid):
        raise NoSolutionFoundError("No solution found")


# ---------- Difficulty ----------


@pytest.mark.parametrize("token, expected", [
    ("easy", Difficulty.EASY),
    ("Medium", Difficulty.MEDIUM),
    ("HARD", Difficulty.HARD),
    (" expert ", Difficulty.EXPERT),
])
def test_parse_difficulty(token, expected):
    assert Difficulty.parse(token) is expected


def test_parse_unknown_difficulty():
    with pytest.raises(InvalidDifficultyError, match="Invalid difficulty: insane"):
        Difficulty.parse("insane")


def test_removal_percentages():
    assert [d.removal_percent for d in Difficulty] == [40, 50, 60, 70]


# ---------- Removal arithmetic ----------


@pytest.mark.parametrize("difficulty, expected", [
    (Difficulty.EASY, (31, 33)),
    (Difficulty.MEDIUM, (38, 42)),
    (Difficulty.HARD, (46, 50)),
    (Difficulty.EXPERT, (54, 58)),
])
def test_removal_range_9x9(difficulty, expected):
    assert removal_range(9, difficulty) == expected


def test_removal_range_small_and_capped():
    assert removal_range(4, Difficulty.EASY) == (6, 6)
    assert removal_range(4, Difficulty.EXPERT) == (11, 11)
    assert removal_range(4, Difficulty.EXPERT, min_givens=6) == (10, 10)
    assert removal_range(9, Difficulty.EXPERT, min_givens=25) == (54, 56)
    assert removal_range(1, Difficulty.EXPERT) == (0, 0)


def test_default_min_givens():
    assert default_min_givens(9) == 17
    assert default_min_givens(4) == 4
    assert default_min_givens(16) == 53


# ---------- Generation ----------


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_generate_9x9_within_removal_range(difficulty):
    solver = Solver()
    puzzle = solver.generate(9, difficulty, seed=1234)
    low, high = removal_range(9, difficulty)

    assert low <= puzzle.empty_count() <= high
    assert puzzle.is_valid()
    assert solver.solve(puzzle).is_solved()

    for r in range(9):
        for c in range(9):
            cell = puzzle.get(r, c)
            assert cell.is_empty or cell.is_given


def test_generated_easy_puzzle_has_a_solution():
    solver = Solver()
    puzzle = solver.generate(9, Difficulty.EASY, seed=7)
    assert solver.count_solutions(puzzle, 1) == 1


@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_generate_4x4(difficulty):
    solver = Solver()
    puzzle = solver.generate(4, difficulty, seed=99)
    low, high = removal_range(4, difficulty)

    assert low <= puzzle.empty_count() <= high
    assert solver.count_solutions(puzzle, 1) == 1


def test_generate_1x1():
    puzzle = Solver().generate(1, Difficulty.EXPERT)
    assert puzzle.to_compact_string() == "1"


def test_seed_makes_generation_reproducible():
    first = Solver().generate(9, Difficulty.MEDIUM, seed=42)
    second = Solver().generate(9, Difficulty.MEDIUM, seed=42)
    assert first.to_compact_string() == second.to_compact_string()


def test_full_symmetry_mirrors_removals():
    puzzle = Solver().generate(9, Difficulty.HARD, seed=5, symmetry=1.0)

    unmatched = [
        (r, c)
        for r in range(9)
        for c in range(9)
        if puzzle.get(r, c).is_empty != puzzle.get(8 - r, 8 - c).is_empty
    ]
    # only the final removal may lack its partner
    assert len(unmatched) <= 2


def test_no_symmetry_still_hits_target():
    puzzle = Solver().generate(9, Difficulty.EXPERT, seed=11, symmetry=0.0)
    low, high = removal_range(9, Difficulty.EXPERT)
    assert low <= puzzle.empty_count() <= high


def test_invalid_symmetry_rejected():
    with pytest.raises(ValueError):
        PuzzleGenerator(Solver(), symmetry=1.5)


def test_failed_completion_raises_generation_error():
    generator = PuzzleGenerator(FailingSolver(), seed=0)
    with pytest.raises(GenerationError, match="No solution found"):
        generator.generate(9, Difficulty.EASY)


def test_generate_rejects_non_square_size():
    with pytest.raises(ValueError):
        Solver().generate(10, Difficulty.EASY)


def test_generated_grid_type():
    assert isinstance(Solver().generate(4, Difficulty.MEDIUM, seed=3), Grid)
