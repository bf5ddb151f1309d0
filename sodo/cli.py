"""
sodo - Command line interface

Solve, generate, validate and hint Sudoku puzzles of any perfect-square
size from the terminal.

Example:
    python main.py solve 53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79
    python main.py generate --difficulty hard --seed 42
    python main.py validate <puzzle> --size 4
    python main.py hint <puzzle>
"""

import sys
import json
import math
import logging
import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

from sodo.settings import load_settings
from sodo.solver import (
    Difficulty,
    Grid,
    Solver,
    SudokuError,
    get_strategy_info,
)
from sodo.solver.grid import MAX_SIZE

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATEFMT = "%H:%M:%S"


def configure_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """
    Configure logging - output to stderr and optionally to a file.

    Args:
        level: Root log level name
        log_file: Optional path of an extra log file
    """
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        handlers=handlers,
    )


def _grid_size(text: str) -> int:
    """argparse type for grid sizes; must be a positive perfect square."""
    try:
        size = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Invalid size: {text}")
    if size < 1 or math.isqrt(size) ** 2 != size:
        raise argparse.ArgumentTypeError(f"Invalid size: {size} is not a perfect square")
    if size > MAX_SIZE:
        raise argparse.ArgumentTypeError(f"Invalid size: {size} exceeds the maximum of {MAX_SIZE}")
    return size


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def check_settings(settings: Dict[str, Any]) -> None:
    """
    Validate the settings values the commands rely on.

    Args:
        settings: Merged settings dictionary

    Raises:
        ValueError: On the first value of the wrong type or out of range
    """
    size = settings["size"]
    if not _is_int(size):
        raise ValueError(f"Invalid size in settings: {size!r}")
    try:
        _grid_size(str(size))
    except argparse.ArgumentTypeError as e:
        raise ValueError(f"{e} (settings)") from None

    Difficulty.parse(str(settings["difficulty"]))

    max_iterations = settings["max_iterations"]
    if not _is_int(max_iterations) or max_iterations < 0:
        raise ValueError(f"Invalid max_iterations in settings: {max_iterations!r}")

    if not isinstance(settings["backtracking"], bool):
        raise ValueError(f"Invalid backtracking in settings: {settings['backtracking']!r}")

    symmetry = settings["symmetry"]
    if isinstance(symmetry, bool) or not isinstance(symmetry, (int, float)) \
            or not 0.0 <= symmetry <= 1.0:
        raise ValueError(f"Invalid symmetry in settings: {symmetry!r}, expected a number in [0, 1]")


def _print_stats(stats) -> None:
    print("\nStatistics:")
    print(f"  Iterations: {stats.iterations}")
    print(f"  Cells filled: {stats.cells_filled}")
    print(f"  Backtracks: {stats.backtracks}")
    print(f"  Time: {stats.computation_time_ms:.1f}ms")
    if stats.strategies_used:
        print("  Strategies:")
        for name, count in stats.strategies_used.items():
            print(f"    {name}: {count}")


def cmd_solve(args: argparse.Namespace, settings: Dict[str, Any]) -> int:
    """Handle the solve subcommand."""
    if args.puzzle is not None and args.file is not None:
        print("Error: provide either a puzzle string or --file, not both", file=sys.stderr)
        return 1

    if args.file is not None:
        try:
            text = Path(args.file).read_text(encoding='utf-8')
        except OSError as e:
            print(f"Error reading {args.file}: {e}", file=sys.stderr)
            return 1
    elif args.puzzle is not None:
        text = args.puzzle
    else:
        print("Error: provide a puzzle string or --file", file=sys.stderr)
        return 1

    size = args.size or settings["size"]
    max_iterations = (args.max_iterations if args.max_iterations is not None
                      else settings["max_iterations"])
    backtracking = settings["backtracking"] and not args.no_backtrack

    puzzle = Grid.from_string(text.strip("\r\n"), size)
    solver = Solver(max_iterations=max_iterations, backtracking=backtracking)
    solution, stats = solver.solve_with_stats(puzzle)

    if args.json:
        print(json.dumps({
            "puzzle": puzzle.to_compact_string(),
            "solution": solution.to_compact_string(),
            "stats": stats.to_dict(),
        }, indent=2))
    else:
        print("Puzzle:")
        print(puzzle)
        print("\nSolution:")
        print(solution)
        _print_stats(stats)

    if args.image:
        from sodo.render import save_grid_image
        path = save_grid_image(solution, args.image)
        logger.info(f"Solution image saved: {path}")

    return 0


def cmd_generate(args: argparse.Namespace, settings: Dict[str, Any]) -> int:
    """Handle the generate subcommand."""
    size = args.size or settings["size"]
    difficulty = Difficulty.parse(args.difficulty or settings["difficulty"])

    solver = Solver(max_iterations=settings["max_iterations"])
    puzzle = solver.generate(size, difficulty, seed=args.seed, symmetry=settings["symmetry"])

    print(f"Generated {difficulty.name.lower()} puzzle ({size}x{size}):")
    print(puzzle)
    print(puzzle.to_compact_string())

    if args.image:
        from sodo.render import save_grid_image
        path = save_grid_image(puzzle, args.image)
        logger.info(f"Puzzle image saved: {path}")

    return 0


def cmd_validate(args: argparse.Namespace, settings: Dict[str, Any]) -> int:
    """Handle the validate subcommand."""
    puzzle = Grid.from_string(args.puzzle, args.size or settings["size"])

    print("Puzzle:")
    print(puzzle)

    if puzzle.is_valid():
        print("Valid and complete!" if puzzle.is_complete() else "Valid")
        return 0

    print("Invalid!")
    if not puzzle.valid_rows():
        print("  - Invalid rows")
    if not puzzle.valid_cols():
        print("  - Invalid columns")
    if not puzzle.valid_boxes():
        print("  - Invalid boxes")
    return 1


def cmd_hint(args: argparse.Namespace, settings: Dict[str, Any]) -> int:
    """Handle the hint subcommand."""
    puzzle = Grid.from_string(args.puzzle, args.size or settings["size"])

    found = Solver().hint(puzzle)
    if found is None:
        print("No hint available")
        return 0

    print(f"Place {found.value} at row {found.row + 1}, col {found.col + 1} ({found.strategy})")
    puzzle.set(found.row, found.col, found.value)
    print("\nWith hint applied:")
    print(puzzle)
    return 0


def cmd_strategies(args: argparse.Namespace, settings: Dict[str, Any]) -> int:
    """Handle the strategies subcommand."""
    for info in get_strategy_info():
        print(f"{info['name']}: {info['description']}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="sodo",
        description="Sudoku solver and generator"
    )
    parser.add_argument(
        "--config", "-c",
        default=None,
        help="Settings file (default: sodo.json)"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--log-file",
        default=None,
        help="Also write log output to this file"
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p_solve = sub.add_parser("solve", aliases=["s"], help="Solve a puzzle")
    p_solve.add_argument("puzzle", nargs="?", default=None,
                         help="Puzzle string (81 chars for 9x9)")
    p_solve.add_argument("--file", "-f", default=None, help="Read puzzle from file")
    p_solve.add_argument("--size", "-s", type=_grid_size, default=None, help="Grid size")
    p_solve.add_argument("--no-backtrack", action="store_true",
                         help="Use logical strategies only")
    p_solve.add_argument("--max-iterations", type=int, default=None,
                         help="Cap on deduction passes")
    p_solve.add_argument("--json", action="store_true", help="Print result as JSON")
    p_solve.add_argument("--image", default=None, help="Save the solution as PNG")
    p_solve.set_defaults(handler=cmd_solve)

    p_gen = sub.add_parser("generate", aliases=["g"], help="Generate a new puzzle")
    p_gen.add_argument("--size", "-s", type=_grid_size, default=None, help="Grid size")
    p_gen.add_argument("--difficulty", "-d", default=None,
                       choices=[d.name.lower() for d in Difficulty],
                       help="Difficulty level")
    p_gen.add_argument("--seed", type=int, default=None, help="Random seed")
    p_gen.add_argument("--image", default=None, help="Save the puzzle as PNG")
    p_gen.set_defaults(handler=cmd_generate)

    p_val = sub.add_parser("validate", aliases=["v"], help="Validate a puzzle")
    p_val.add_argument("puzzle", help="Puzzle string")
    p_val.add_argument("--size", "-s", type=_grid_size, default=None, help="Grid size")
    p_val.set_defaults(handler=cmd_validate)

    p_hint = sub.add_parser("hint", aliases=["h"], help="Get a hint for the next move")
    p_hint.add_argument("puzzle", help="Puzzle string")
    p_hint.add_argument("--size", "-s", type=_grid_size, default=None, help="Grid size")
    p_hint.set_defaults(handler=cmd_hint)

    p_list = sub.add_parser("strategies", help="List deduction strategies")
    p_list.set_defaults(handler=cmd_strategies)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments, run the selected subcommand and return its exit code."""
    args = build_parser().parse_args(argv)

    settings = load_settings(args.config)
    configure_logging("DEBUG" if args.verbose else settings["log_level"], args.log_file)

    try:
        check_settings(settings)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    try:
        return args.handler(args, settings)
    except SudokuError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
