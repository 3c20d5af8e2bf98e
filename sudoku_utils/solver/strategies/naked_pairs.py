"""
Naked Pairs Strategy - Two cells of a line sharing the same two candidates.
"""

from collections import defaultdict
from typing import Dict, FrozenSet, List

from ..base import SolvingStrategy
from ..difficulty import Difficulty
from ..factory import register_strategy
from ..geometry import SIZE, Pos, column_positions, row_positions
from ..grid import Grid


@register_strategy
class EliminateUsingNakedPairs(SolvingStrategy):
    """
    If exactly two empty cells of a row (or column) are restricted to the
    same pair of candidates, those two values belong to these cells and are
    removed from every other cell of the row (or column).
    """
    name = "naked_pairs"
    description = "Eliminate candidates using naked pairs in rows and columns"
    difficulty = Difficulty.MEDIUM

    def apply(self, grid: Grid) -> bool:
        changed = False
        for i in range(SIZE):
            changed |= self._in_line(grid, row_positions(i))
            changed |= self._in_line(grid, column_positions(i))
        return changed

    def _in_line(self, grid: Grid, line: List[Pos]) -> bool:
        pairs: Dict[FrozenSet[int], List[Pos]] = defaultdict(list)
        for pos in line:
            cell = grid.cell(pos)
            if cell.is_empty() and len(cell.candidates) == 2:
                pairs[frozenset(cell.candidates)].append(pos)

        changed = False
        for pair, owners in pairs.items():
            if len(owners) != 2:
                continue
            for pos in line:
                if pos not in owners:
                    changed |= grid.cell(pos).remove_candidates(sorted(pair))
        return changed
