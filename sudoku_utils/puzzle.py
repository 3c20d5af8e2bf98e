"""
Puzzle Module - Immutable 9x9 puzzle representation and its text encoding.
"""

from dataclasses import dataclass
from typing import List, Tuple

import numpy as np

PUZZLE_LENGTH = 81
EMPTY_CHAR = "."


class PuzzleParsingError(ValueError):
    """Raised when a puzzle string cannot be decoded."""

    def __init__(self, message: str = "Input is not 81 chars long"):
        super().__init__(message)


@dataclass(frozen=True)
class Puzzle:
    """
    Immutable puzzle representation.

    Uses tuple-of-tuples for hashability and immutability.
    Cells contain digits 1-9, or 0 for empty cells. Values are stored
    as given so that is_valid() can reject out-of-range input.

    Attributes:
        grid: Tuple of 9 rows of 9 integers
    """
    grid: Tuple[Tuple[int, ...], ...]

    @classmethod
    def from_rows(cls, rows: List[List[int]]) -> 'Puzzle':
        """
        Create Puzzle from a 9x9 list of digits.

        Raises:
            ValueError: If rows is not 9x9
        """
        if len(rows) != 9 or any(len(row) != 9 for row in rows):
            raise ValueError("Puzzle must be a 9x9 grid")
        return cls(grid=tuple(tuple(int(v) for v in row) for row in rows))

    @classmethod
    def from_str(cls, text: str) -> 'Puzzle':
        """
        Decode an 81 character string, row-major.

        Digits 1-9 are clues, every other character is an empty cell.

        Raises:
            PuzzleParsingError: If text is not exactly 81 characters long
        """
        if len(text) != PUZZLE_LENGTH:
            raise PuzzleParsingError()

        values = [int(c) if c in "123456789" else 0 for c in text]
        return cls.from_rows([values[i:i + 9] for i in range(0, PUZZLE_LENGTH, 9)])

    @classmethod
    def empty(cls) -> 'Puzzle':
        return cls.from_rows([[0] * 9 for _ in range(9)])

    def to_str(self) -> str:
        """Encode as 81 characters, '.' for empty cells."""
        return "".join(
            str(v) if 1 <= v <= 9 else EMPTY_CHAR
            for row in self.grid for v in row
        )

    def __str__(self):
        return self.to_str()

    def to_list(self) -> List[List[int]]:
        return [list(row) for row in self.grid]

    def to_array(self) -> np.ndarray:
        return np.array(self.grid, dtype=np.int64)

    def get_cell(self, row: int, col: int) -> int:
        return self.grid[row][col]

    def with_cell_cleared(self, row: int, col: int) -> 'Puzzle':
        """Return a copy of the puzzle with one cell emptied."""
        rows = self.to_list()
        rows[row][col] = 0
        return Puzzle.from_rows(rows)

    def filled_positions(self) -> List[Tuple[int, int]]:
        return [(r, c) for r in range(9) for c in range(9) if self.grid[r][c] != 0]

    def count_clues(self) -> int:
        return int(np.count_nonzero(self.to_array()))

    def is_valid(self) -> bool:
        """
        Structural check: every value is 0 (empty) or 1-9.

        Row, column and box conflicts are not checked here.
        """
        array = self.to_array()
        return bool(((array >= 0) & (array <= 9)).all())

    def is_complete(self) -> bool:
        array = self.to_array()
        return bool(((array >= 1) & (array <= 9)).all())

    def has_conflicts(self) -> bool:
        """True if any row, column or box repeats a digit 1-9."""
        for unit in _units(self.to_array()):
            digits = unit[(unit >= 1) & (unit <= 9)]
            if len(np.unique(digits)) != len(digits):
                return True
        return False

    def is_solved(self) -> bool:
        return self.is_complete() and not self.has_conflicts()


def _units(array: np.ndarray) -> List[np.ndarray]:
    """Rows, columns and boxes of a 9x9 array as flat arrays."""
    boxes = array.reshape(3, 3, 3, 3).swapaxes(1, 2).reshape(9, 9)
    return list(array) + list(array.T) + list(boxes)
