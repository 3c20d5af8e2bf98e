"""
Base Strategy Module - Abstract base class for deduction strategies.
"""

from abc import ABC, abstractmethod
from typing import List

from .difficulty import Difficulty
from .geometry import Pos
from .grid import Grid


class SolvingStrategy(ABC):
    """
    Abstract base class for all deduction strategies.

    Subclasses must implement the apply() method and define
    name, description and difficulty class attributes. Strategies hold no
    per-puzzle state and can be reused across solves.

    Attributes:
        name: Short identifier for the strategy
        description: Human-readable description
        difficulty: Tier the strategy belongs to
        guessing: True for strategies that are not logically forced
    """
    name: str = "base"
    description: str = "Base strategy"
    difficulty: Difficulty = Difficulty.EASY
    guessing: bool = False

    @abstractmethod
    def apply(self, grid: Grid) -> bool:
        """
        Attempt one deduction pass over the grid.

        Every removal or assignment must be logically forced by the current
        grid state (except for guessing strategies).

        Args:
            grid: Grid to mutate in place

        Returns:
            True if any cell changed
        """
        pass

    @staticmethod
    def _remove_from(grid: Grid, positions: List[Pos], value: int) -> bool:
        """Remove value as a candidate from every given position."""
        changed = False
        for pos in positions:
            changed |= grid.cell(pos).remove_candidate(value)
        return changed

    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, difficulty={self.difficulty.name})"
