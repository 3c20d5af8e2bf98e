"""
Y-Wing Strategy - A bivalue pivot seeing two bivalue wings.
"""

from typing import List, Optional

from ..base import SolvingStrategy
from ..difficulty import Difficulty
from ..factory import register_strategy
from ..geometry import ALL_POSITIONS, Pos, are_related
from ..grid import Grid


def _common_value(first: List[int], second: List[int]) -> Optional[int]:
    """The shared value of two candidate pairs, if they share exactly one."""
    common = set(first) & set(second)
    if len(common) != 1:
        return None
    return common.pop()


@register_strategy
class EliminateUsingYWing(SolvingStrategy):
    """
    Wings {A, C} and {B, C} that do not see each other, plus a pivot {A, B}
    that sees both. Whichever value the pivot takes, one of the wings ends
    up as C, so C is removed from every cell that sees both wings.
    """
    name = "y_wing"
    description = "Eliminate candidates using Y-Wing patterns"
    difficulty = Difficulty.HARD

    def apply(self, grid: Grid) -> bool:
        changed = False
        bivalue = [p for p in ALL_POSITIONS if self._is_bivalue(grid, p)]

        for first_wing in bivalue:
            for second_wing in bivalue:
                if are_related(first_wing, second_wing):
                    continue
                # Earlier eliminations in this pass may have collapsed a cell
                if not (self._is_bivalue(grid, first_wing) and self._is_bivalue(grid, second_wing)):
                    continue

                first_values = grid.cell(first_wing).possible_values()
                second_values = grid.cell(second_wing).possible_values()
                common = _common_value(first_values, second_values)
                if common is None:
                    continue

                # The pivot must hold exactly the two values the wings do not share
                distinct = {v for v in first_values + second_values if v != common}
                for pivot in bivalue:
                    if not (are_related(pivot, first_wing) and are_related(pivot, second_wing)):
                        continue
                    if not self._is_bivalue(grid, pivot) or grid.cell(pivot).candidates != distinct:
                        continue

                    changed |= self._eliminate(grid, first_wing, second_wing, pivot, common)

        return changed

    @staticmethod
    def _is_bivalue(grid: Grid, pos: Pos) -> bool:
        cell = grid.cell(pos)
        return cell.is_empty() and len(cell.candidates) == 2

    def _eliminate(self, grid: Grid, first_wing: Pos, second_wing: Pos, pivot: Pos, value: int) -> bool:
        targets = [
            p for p in ALL_POSITIONS
            if p not in (first_wing, second_wing, pivot)
            and are_related(p, first_wing) and are_related(p, second_wing)
        ]
        return self._remove_from(grid, targets, value)
