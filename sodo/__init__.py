"""
sodo - Sudoku solver, validator and generator.

Subpackages and modules:
    - solver: Grid model, deduction strategies, solver and generator
    - bindings: String-in/string-out functions for embedding hosts
    - cli: Command line interface
    - settings: JSON settings file
    - render: PNG rendering
"""

__version__ = "0.1.0"
