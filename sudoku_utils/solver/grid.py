"""
Grid Module - Mutable candidate-tracking representation used while solving.
"""

from typing import Iterator, List, Tuple, TYPE_CHECKING

from .cell import Cell, DIGITS
from .geometry import (
    ALL_POSITIONS,
    Pos,
    box_positions,
    column_positions,
    row_positions,
)

if TYPE_CHECKING:
    from ..puzzle import Puzzle


class Grid:
    """
    9x9 arrangement of Cells, built from a Puzzle and collapsed back into one.

    The grid exclusively owns its cells. Strategies mutate cells in place
    through remove_candidate / set_value; the grid itself only offers
    row, column and box queries.

    Attributes:
        cells: cells[row][col]
    """

    def __init__(self, cells: List[List[Cell]]):
        self.cells = cells

    @classmethod
    def from_puzzle(cls, puzzle: 'Puzzle') -> 'Grid':
        """
        Create a Grid with one Cell per puzzle digit.

        Args:
            puzzle: Puzzle to solve

        Returns:
            Grid with candidates reset for every empty cell
        """
        return cls([[Cell(value) for value in row] for row in puzzle.grid])

    def to_puzzle(self) -> 'Puzzle':
        """Convert back to a Puzzle (unset cells become 0)."""
        from ..puzzle import Puzzle
        return Puzzle.from_rows(self.values())

    def values(self) -> List[List[int]]:
        return [[cell.value for cell in row] for row in self.cells]

    def copy(self) -> 'Grid':
        return Grid([[cell.copy() for cell in row] for row in self.cells])

    def cell(self, pos: Pos) -> Cell:
        return self.cells[pos[0]][pos[1]]

    def positions(self) -> Iterator[Tuple[Pos, Cell]]:
        for pos in ALL_POSITIONS:
            yield pos, self.cells[pos[0]][pos[1]]

    def empty_positions(self) -> List[Pos]:
        return [pos for pos, cell in self.positions() if cell.is_empty()]

    def is_complete(self) -> bool:
        return all(cell.is_set() for _, cell in self.positions())

    def _values_at(self, positions: List[Pos]) -> List[int]:
        return [self.cell(p).value for p in positions if self.cell(p).is_set()]

    def values_in_row(self, row: int) -> List[int]:
        return self._values_at(row_positions(row))

    def values_in_column(self, col: int) -> List[int]:
        return self._values_at(column_positions(col))

    def values_in_box(self, box: int) -> List[int]:
        return self._values_at(box_positions(box))

    @staticmethod
    def _missing(present: List[int]) -> List[int]:
        return [v for v in DIGITS if v not in present]

    def missing_values_in_row(self, row: int) -> List[int]:
        return self._missing(self.values_in_row(row))

    def missing_values_in_column(self, col: int) -> List[int]:
        return self._missing(self.values_in_column(col))

    def missing_values_in_box(self, box: int) -> List[int]:
        return self._missing(self.values_in_box(box))

    def missing_values_in(self, positions: List[Pos]) -> List[int]:
        return self._missing(self._values_at(positions))

    def positions_with_candidate(self, positions: List[Pos], value: int) -> List[Pos]:
        """Empty positions among the given ones that still list value as a candidate."""
        return [
            p for p in positions
            if self.cell(p).is_empty() and self.cell(p).contains_candidate(value)
        ]

    def places_for(self, positions: List[Pos], value: int) -> List[Pos]:
        """
        Empty positions that can still take value.

        Returns an empty list when value is already placed among positions,
        even if the other cells still list it as a candidate.
        """
        if value in self._values_at(positions):
            return []
        return self.positions_with_candidate(positions, value)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return False
        return self.cells == other.cells

    def __repr__(self):
        return f"Grid({''.join(str(v) for row in self.values() for v in row)})"
