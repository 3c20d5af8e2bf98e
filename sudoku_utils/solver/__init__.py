"""
Solver Package - Constraint-propagation engine for 9x9 puzzles.

This package provides a pluggable strategy framework: independent
deduction strategies applied in a fixed-point loop over a
candidate-tracking Grid.

Public API:
    - Cell: Single grid position (value or candidates)
    - Grid: Mutable 9x9 solving representation
    - Difficulty: Ordered strategy/puzzle tiers
    - Solution: Result of a solving run
    - SolutionMetrics: Per-strategy statistics
    - SolvingStrategy: Abstract base for strategies
    - solve(), solve_with_difficulty(), solve_with_statistics(), solve_with_guessing()
    - create_strategy(): Factory function
    - get_strategy_names(): List available strategies
    - get_strategy_info(): Get strategy metadata

Usage:
    from sudoku_utils.solver import solve, Difficulty
    from sudoku_utils.puzzle import Puzzle

    puzzle = Puzzle.from_str(text)
    solved = solve(puzzle)
    medium_only = solve(puzzle, Difficulty.MEDIUM)
"""

# Core data structures
from .cell import Cell
from .grid import Grid
from .difficulty import Difficulty
from .solution import Solution, SolutionMetrics

# Strategy framework
from .base import SolvingStrategy
from .factory import (
    create_strategy,
    get_strategy_names,
    get_strategy_info,
    implemented_strategies,
    register_strategy,
    strategy_names_for,
)

# Import strategies to register them
from . import strategies

from .engine import (
    run_to_fixed_point,
    solve,
    solve_grid,
    solve_with_difficulty,
    solve_with_guessing,
    solve_with_statistics,
)

__all__ = [
    # Data structures
    "Cell",
    "Grid",
    "Difficulty",
    "Solution",
    "SolutionMetrics",
    # Strategy framework
    "SolvingStrategy",
    "create_strategy",
    "get_strategy_names",
    "get_strategy_info",
    "implemented_strategies",
    "register_strategy",
    "strategy_names_for",
    # Solving loop
    "run_to_fixed_point",
    "solve",
    "solve_grid",
    "solve_with_difficulty",
    "solve_with_guessing",
    "solve_with_statistics",
]
