# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to path so "sudoku_utils" and "main" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sudoku_utils.puzzle import Puzzle


# Classic puzzle solvable with singles only, and its solution
WIKI_PUZZLE = "53..7....6..195....98....6.8...6...34..8.3..17...2...6.6....28....419..5....8..79"
WIKI_SOLUTION = (
    "534678912"
    "672195348"
    "198342567"
    "859761423"
    "426853791"
    "713924856"
    "961537284"
    "287419635"
    "345286179"
)

# Easy puzzle, digits with 0 for empty cells
EULER_PUZZLE = "003020600900305001001806400008102900700000008006708200002609500800203009005010300"

# Valid completed grid built from the shifted-row pattern
PATTERN_SOLUTION = (
    "123456789"
    "456789123"
    "789123456"
    "234567891"
    "567891234"
    "891234567"
    "345678912"
    "678912345"
    "912345678"
)

EMPTY_PUZZLE = "." * 81


def rows_of(text: str):
    """Split an 81 character puzzle into 9 row strings."""
    return [text[i:i + 9] for i in range(0, 81, 9)]


@pytest.fixture
def wiki_puzzle() -> Puzzle:
    return Puzzle.from_str(WIKI_PUZZLE)


@pytest.fixture
def wiki_solution() -> Puzzle:
    return Puzzle.from_str(WIKI_SOLUTION)


@pytest.fixture
def pattern_solution() -> Puzzle:
    return Puzzle.from_str(PATTERN_SOLUTION)


@pytest.fixture
def diagonal_puzzle(pattern_solution) -> Puzzle:
    """Pattern grid with its main diagonal cleared: one hole per row, column and box."""
    puzzle = pattern_solution
    for i in range(9):
        puzzle = puzzle.with_cell_cleared(i, i)
    return puzzle
