"""
Existing Singles Strategy - Eliminates set values from the candidates of their peers.
"""

from ..base import SolvingStrategy
from ..difficulty import Difficulty
from ..factory import register_strategy
from ..geometry import ALL_POSITIONS, SIZE, box_index, box_positions
from ..grid import Grid


@register_strategy
class EliminateUsingExistingSingles(SolvingStrategy):
    """
    Removes the value of every set cell from the other cells of its row,
    column and box.

    Example: with a 5 at A1, no other cell of row A, column 1 or the
    top-left box can hold 5.

        A |5    |     |     |
        B |     |     |     |
        C |     |     |     |

    Rows and columns are processed first; boxes are only scanned when rows
    and columns produced no change.
    """
    name = "existing_singles"
    description = "Eliminate the values of set cells from their peers"
    difficulty = Difficulty.EASY

    def apply(self, grid: Grid) -> bool:
        return self.in_rows_and_columns(grid) or self.in_boxes(grid)

    def in_rows_and_columns(self, grid: Grid) -> bool:
        changed = False
        for row, col in ALL_POSITIONS:
            cell = grid.cells[row][col]
            if cell.is_empty():
                continue
            for other in range(SIZE):
                if other != row:
                    changed |= grid.cells[other][col].remove_candidate(cell.value)
                if other != col:
                    changed |= grid.cells[row][other].remove_candidate(cell.value)
        return changed

    def in_boxes(self, grid: Grid) -> bool:
        changed = False
        for pos in ALL_POSITIONS:
            cell = grid.cell(pos)
            if cell.is_empty():
                continue
            others = [p for p in box_positions(box_index(*pos)) if p != pos]
            changed |= self._remove_from(grid, others, cell.value)
        return changed
