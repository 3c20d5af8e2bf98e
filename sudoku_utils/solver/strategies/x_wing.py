"""
X-Wing Strategy - Two rows locking a value into the same two columns.
"""

from ..base import SolvingStrategy
from ..difficulty import Difficulty
from ..factory import register_strategy
from ..geometry import SIZE, column_positions, row_positions
from ..grid import Grid


@register_strategy
class EliminateUsingXWing(SolvingStrategy):
    """
    If a value can only go in the same two columns in each of two rows,
    it occupies one corner of the rectangle on each diagonal; the two
    columns then cannot hold it in any other row.
    """
    name = "x_wing"
    description = "Eliminate candidates using X-Wing patterns"
    difficulty = Difficulty.HARD

    def apply(self, grid: Grid) -> bool:
        changed = False

        for first_row in range(SIZE):
            for value in grid.missing_values_in_row(first_row):
                columns = self._columns_for(grid, first_row, value)
                if len(columns) != 2:
                    continue

                for second_row in range(first_row + 1, SIZE):
                    if self._columns_for(grid, second_row, value) != columns:
                        continue

                    # X-Wing found on (first_row, second_row) x columns
                    for col in columns:
                        others = [
                            p for p in column_positions(col)
                            if p[0] not in (first_row, second_row)
                        ]
                        changed |= self._remove_from(grid, others, value)

        return changed

    @staticmethod
    def _columns_for(grid: Grid, row: int, value: int):
        return [p[1] for p in grid.places_for(row_positions(row), value)]
