"""
sudoku-utils - Solve, classify and generate 9x9 puzzles.

Public API:
    - Puzzle: Immutable puzzle (digits 0-9, 0 = empty) with text encoding
    - PuzzleParsingError: Raised when a puzzle string is not 81 chars long
    - Difficulty: EASY < MEDIUM < HARD
    - solve(): Run the deduction strategies to a fixed point
    - evaluate_difficulty(): Lowest tier that solves a puzzle, or None
    - generate(), generate_with_difficulty(): Puzzle generation
    - GenerationError: Raised when generation runs out of attempts

Usage:
    from sudoku_utils import Puzzle, solve, evaluate_difficulty

    puzzle = Puzzle.from_str("003020600900305001001806400008102900700000008006708200002609500800203009005010300")
    solved = solve(puzzle)
    print(solved.is_solved(), evaluate_difficulty(puzzle))
"""

from .puzzle import Puzzle, PuzzleParsingError
from .solver import (
    Difficulty,
    solve,
    solve_with_difficulty,
    solve_with_guessing,
    solve_with_statistics,
)
from .evaluator import evaluate_difficulty, classify
from .generator import (
    GenerationError,
    generate,
    generate_completed_puzzle,
    generate_with_difficulty,
    remove_cells,
)

__all__ = [
    "Puzzle",
    "PuzzleParsingError",
    "Difficulty",
    "solve",
    "solve_with_difficulty",
    "solve_with_guessing",
    "solve_with_statistics",
    "evaluate_difficulty",
    "classify",
    "GenerationError",
    "generate",
    "generate_completed_puzzle",
    "generate_with_difficulty",
    "remove_cells",
]
