"""
Random Guess Strategy - Assigns a random candidate to a random empty cell.

Only used to fill an empty grid during generation; a guess is not forced
by the grid state and the strategy keeps no undo information.
"""

import random
from typing import Optional

from ..base import SolvingStrategy
from ..difficulty import Difficulty
from ..factory import register_strategy
from ..grid import Grid


@register_strategy
class SetSingleRandomly(SolvingStrategy):
    """
    Picks a random empty cell and sets one of its candidates at random.

    Reports no change when the grid has no empty cell, or when the chosen
    cell has run out of candidates (a dead end).
    """
    name = "single_randomly"
    description = "Guess a random candidate for a random empty cell"
    difficulty = Difficulty.EASY
    guessing = True

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def apply(self, grid: Grid) -> bool:
        empty = grid.empty_positions()
        if not empty:
            return False

        cell = grid.cell(self.rng.choice(empty))
        values = cell.possible_values()
        if not values:
            return False

        return cell.set_value(self.rng.choice(values))
