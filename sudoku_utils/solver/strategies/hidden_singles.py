"""
Hidden Singles Strategy - Places a value that fits in only one cell of a house.
"""

from ..base import SolvingStrategy
from ..difficulty import Difficulty
from ..factory import register_strategy
from ..geometry import ALL_POSITIONS, box_index, box_positions, column_positions, row_positions
from ..grid import Grid


@register_strategy
class SetHiddenSingles(SolvingStrategy):
    """
    Sets a candidate of an empty cell when no other cell of the same row,
    column or box can hold it.

    Example: row C is missing 5, 7 and 9, but the 5 at A6 rules out C5 and
    C6. C7 is then the only cell of row C that can take 5.

        A |     |    5|     |
        B |     |     |     |
        C |3 4 1|2    |  6 8|

    A single value is placed per application; the solving loop restarts
    so that eliminations can run before the next placement.
    """
    name = "hidden_singles"
    description = "Set values that are possible in only one cell of a row, column or box"
    difficulty = Difficulty.EASY

    def apply(self, grid: Grid) -> bool:
        return self.in_rows_and_columns(grid) or self.in_boxes(grid)

    def in_rows_and_columns(self, grid: Grid) -> bool:
        for row, col in ALL_POSITIONS:
            cell = grid.cells[row][col]
            if cell.is_set():
                continue
            for value in cell.possible_values():
                if (self._only_place(grid, row_positions(row), (row, col), value)
                        or self._only_place(grid, column_positions(col), (row, col), value)):
                    return cell.set_value(value)
        return False

    def in_boxes(self, grid: Grid) -> bool:
        for pos in ALL_POSITIONS:
            cell = grid.cell(pos)
            if cell.is_set():
                continue
            house = box_positions(box_index(*pos))
            for value in cell.possible_values():
                if self._only_place(grid, house, pos, value):
                    return cell.set_value(value)
        return False

    @staticmethod
    def _only_place(grid: Grid, house, pos, value: int) -> bool:
        # Set cells count too: a peer already holding value also excludes it
        return not any(
            grid.cell(other).contains_candidate(value)
            for other in house if other != pos
        )
