"""
Pointing Strategy - Box/line interactions (pointing and claiming).
"""

from ..base import SolvingStrategy
from ..difficulty import Difficulty
from ..factory import register_strategy
from ..geometry import SIZE, box_index, box_positions, column_positions, row_positions
from ..grid import Grid


@register_strategy
class EliminateUsingPointing(SolvingStrategy):
    """
    Uses the intersection of a box with a row or column.

    * Line to box: if, within a row (column), every cell that can hold a
      missing value lies in the same box, the value must be placed in that
      part of the box, so it is removed from the box's other rows (columns).
    * Box to line: if, within a box, every cell that can hold a missing
      value lies in one row (column), the value is removed from that row
      (column) outside the box.
    """
    name = "pointing"
    description = "Eliminate candidates using box/line intersections"
    difficulty = Difficulty.MEDIUM

    def apply(self, grid: Grid) -> bool:
        return self.in_rows_and_columns(grid) or self.in_boxes(grid)

    def in_rows_and_columns(self, grid: Grid) -> bool:
        changed = False

        for row in range(SIZE):
            for value in grid.missing_values_in_row(row):
                places = grid.places_for(row_positions(row), value)
                boxes = {box_index(*p) for p in places}
                if len(boxes) == 1:
                    others = [p for p in box_positions(boxes.pop()) if p[0] != row]
                    changed |= self._remove_from(grid, others, value)

        for col in range(SIZE):
            for value in grid.missing_values_in_column(col):
                places = grid.places_for(column_positions(col), value)
                boxes = {box_index(*p) for p in places}
                if len(boxes) == 1:
                    others = [p for p in box_positions(boxes.pop()) if p[1] != col]
                    changed |= self._remove_from(grid, others, value)

        return changed

    def in_boxes(self, grid: Grid) -> bool:
        changed = False

        for box in range(SIZE):
            house = box_positions(box)
            for value in grid.missing_values_in_box(box):
                places = grid.places_for(house, value)
                if not places:
                    continue

                rows = {p[0] for p in places}
                if len(rows) == 1:
                    row = rows.pop()
                    outside = [p for p in row_positions(row) if p not in house]
                    changed |= self._remove_from(grid, outside, value)

                cols = {p[1] for p in places}
                if len(cols) == 1:
                    col = cols.pop()
                    outside = [p for p in column_positions(col) if p not in house]
                    changed |= self._remove_from(grid, outside, value)

        return changed
