"""
Tests for the command line interface

Usage:
    pytest tests/test_cli.py
"""

import json
import sys
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from sodo.cli import main


PUZZLE = "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"
SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"


@pytest.fixture(autouse=True)
def workdir(tmp_path, monkeypatch):
    """Run every command in an empty directory so no sodo.json is picked up."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------- solve ----------


def test_solve_prints_solution(capsys):
    assert main(["solve", PUZZLE]) == 0

    out = capsys.readouterr().out
    assert "Solution:" in out
    assert "5 3 4 |6 7 8 |9 1 2" in out
    assert "Statistics:" in out


def test_solve_alias_and_json(capsys):
    assert main(["s", PUZZLE, "--json"]) == 0

    data = json.loads(capsys.readouterr().out)
    assert data["puzzle"] == PUZZLE
    assert data["solution"] == SOLUTION
    assert data["stats"]["backtracks"] == 0


def test_solve_from_file(workdir, capsys):
    puzzle_file = workdir / "puzzle.txt"
    puzzle_file.write_text(PUZZLE + "\n", encoding="utf-8")

    assert main(["solve", "--file", str(puzzle_file), "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["solution"] == SOLUTION


def test_solve_requires_exactly_one_input(workdir, capsys):
    assert main(["solve"]) == 1
    assert "Error:" in capsys.readouterr().err

    puzzle_file = workdir / "puzzle.txt"
    puzzle_file.write_text(PUZZLE, encoding="utf-8")
    assert main(["solve", PUZZLE, "--file", str(puzzle_file)]) == 1


def test_solve_without_backtracking_fails_on_empty_grid(capsys):
    assert main(["solve", "." * 81, "--no-backtrack"]) == 1
    assert "Error: No solution found" in capsys.readouterr().err


def test_solve_malformed_input(capsys):
    assert main(["solve", "123"]) == 1
    assert "Error: Invalid input length" in capsys.readouterr().err


def test_solve_saves_image(workdir, capsys):
    image = workdir / "out" / "solution.png"
    assert main(["solve", PUZZLE, "--image", str(image)]) == 0
    assert image.exists()


def test_non_square_size_is_rejected():
    with pytest.raises(SystemExit) as exc:
        main(["solve", PUZZLE, "--size", "10"])
    assert exc.value.code == 2


# ---------- generate ----------


def test_generate_small_grid(capsys):
    assert main(["generate", "--size", "4", "--difficulty", "easy", "--seed", "3"]) == 0

    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0] == "Generated easy puzzle (4x4):"
    assert len(lines[-1]) == 16
    assert lines[-1].count(".") == 6


def test_generate_uses_settings_file(workdir, capsys):
    (workdir / "sodo.json").write_text(json.dumps({"size": 4, "difficulty": "expert"}),
                                       encoding="utf-8")

    assert main(["g", "--seed", "1"]) == 0
    lines = capsys.readouterr().out.strip().splitlines()
    assert lines[0] == "Generated expert puzzle (4x4):"


@pytest.mark.parametrize("bad, argv, message", [
    ({"size": 10}, ["generate"], "not a perfect square"),
    ({"size": 36}, ["generate"], "exceeds the maximum"),
    ({"size": "9"}, ["solve", PUZZLE], "Invalid size in settings"),
    ({"symmetry": 2}, ["generate", "--size", "4"], "Invalid symmetry"),
    ({"difficulty": "insane"}, ["generate", "--size", "4"], "Invalid difficulty"),
    ({"max_iterations": -1}, ["solve", PUZZLE], "Invalid max_iterations"),
    ({"backtracking": "yes"}, ["hint", PUZZLE], "Invalid backtracking"),
])
def test_bad_settings_value_is_reported(workdir, capsys, bad, argv, message):
    (workdir / "sodo.json").write_text(json.dumps(bad), encoding="utf-8")

    assert main(argv) == 1

    captured = capsys.readouterr()
    assert "Error: " in captured.err
    assert message in captured.err
    assert captured.out == ""


def test_size_beyond_alphabet_is_rejected():
    with pytest.raises(SystemExit) as exc:
        main(["generate", "--size", "36"])
    assert exc.value.code == 2


def test_generate_rejects_unknown_difficulty():
    with pytest.raises(SystemExit):
        main(["generate", "--difficulty", "insane"])


# ---------- validate ----------


def test_validate_valid_and_complete(capsys):
    assert main(["validate", PUZZLE]) == 0
    assert capsys.readouterr().out.strip().endswith("Valid")

    assert main(["v", SOLUTION]) == 0
    assert "Valid and complete!" in capsys.readouterr().out


def test_validate_reports_invalid_units(capsys):
    assert main(["validate", "55" + "." * 79]) == 1

    out = capsys.readouterr().out
    assert "Invalid!" in out
    assert "Invalid rows" in out
    assert "Invalid boxes" in out
    assert "Invalid columns" not in out


# ---------- hint ----------


def test_hint(capsys):
    assert main(["hint", PUZZLE]) == 0

    out = capsys.readouterr().out
    assert out.startswith("Place ")
    assert "With hint applied:" in out


def test_hint_none_available(capsys):
    assert main(["h", SOLUTION]) == 0
    assert "No hint available" in capsys.readouterr().out


# ---------- strategies ----------


def test_strategies_listing(capsys):
    assert main(["strategies"]) == 0

    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("naked_singles:")
    assert lines[1].startswith("hidden_singles:")
