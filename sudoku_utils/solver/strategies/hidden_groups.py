"""
Hidden Groups Strategy - N values confined to N cells of a house.
"""

from itertools import combinations
from typing import List

from ..base import SolvingStrategy
from ..difficulty import Difficulty
from ..factory import register_strategy
from ..geometry import SIZE, Pos, box_positions, column_positions, row_positions
from ..grid import Grid

MAX_GROUP_SIZE = 4


@register_strategy
class EliminateUsingHiddenGroups(SolvingStrategy):
    """
    Hidden pairs, triples and quads.

    For every combination of 2 to 4 values missing from a house: when
    exactly as many cells as values can hold at least one of them, those
    cells must contain exactly these values and every other candidate is
    removed from them. Combinations covering all missing values are
    skipped since they carry no information.
    """
    name = "hidden_groups"
    description = "Restrict cells holding a hidden pair, triple or quad"
    difficulty = Difficulty.MEDIUM

    def apply(self, grid: Grid) -> bool:
        return (
            self._in_houses(grid, [row_positions(i) for i in range(SIZE)])
            or self._in_houses(grid, [column_positions(i) for i in range(SIZE)])
            or self._in_houses(grid, [box_positions(i) for i in range(SIZE)])
        )

    def _in_houses(self, grid: Grid, houses: List[List[Pos]]) -> bool:
        changed = False
        for house in houses:
            changed |= self._in_house(grid, house)
        return changed

    @staticmethod
    def _in_house(grid: Grid, house: List[Pos]) -> bool:
        changed = False
        missing = grid.missing_values_in(house)

        for size in range(2, min(len(missing), MAX_GROUP_SIZE) + 1):
            if size == len(missing):
                break
            for combination in combinations(missing, size):
                holders = [p for p in house if grid.cell(p).contains_any_of(combination)]
                if len(holders) == size:
                    for pos in holders:
                        changed |= grid.cell(pos).remove_candidates_outside_of(combination)

        return changed
