"""
Difficulty Module - Ordered difficulty tiers for strategies and puzzles.
"""

from enum import IntEnum, auto


class Difficulty(IntEnum):
    """
    Difficulty tier of a solving strategy or of a puzzle.

    Tiers are totally ordered (EASY < MEDIUM < HARD). A puzzle's difficulty
    is the lowest tier whose strategies are enough to solve it.
    """
    EASY = auto()
    MEDIUM = auto()
    HARD = auto()

    @classmethod
    def from_name(cls, name: str) -> 'Difficulty':
        """
        Look up a tier by case-insensitive name.

        Raises:
            ValueError: If name is not a known tier
        """
        try:
            return cls[name.strip().upper()]
        except KeyError:
            available = ", ".join(d.name.lower() for d in cls)
            raise ValueError(f"Unknown difficulty: {name}. Available: {available}") from None

    @property
    def label(self) -> str:
        """Human readable tier name."""
        return self.name.capitalize()
