"""
sodo - Entry Point

Runs the command line interface.

Example:
    python main.py solve 53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79
    python main.py generate --size 4 --difficulty easy
"""

import sys

from sodo.cli import main


if __name__ == "__main__":
    sys.exit(main())
