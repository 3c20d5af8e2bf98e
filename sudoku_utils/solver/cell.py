"""
Cell Module - A single grid position holding a value or its remaining candidates.
"""

from dataclasses import dataclass, field
from typing import Iterable, List, Set

DIGITS = range(1, 10)


def _initial_candidates(value: int) -> Set[int]:
    return set(DIGITS) if value == 0 else {value}


@dataclass
class Cell:
    """
    Mutable cell of a solving grid.

    A cell is either set (value 1-9, candidates pinned to {value}) or empty
    (value 0, candidates are the digits still considered possible). Removing
    candidates is the primitive operation used by strategies; when a single
    candidate is left the cell assigns it automatically.

    Attributes:
        value: Confirmed digit, 0 when unset
        candidates: Digits still possible for this cell
    """
    value: int = 0
    candidates: Set[int] = field(init=False, default_factory=set)

    def __post_init__(self):
        # Raw digits outside 0-9 are treated as empty
        if not 0 <= self.value <= 9:
            self.value = 0
        self.candidates = _initial_candidates(self.value)

    def is_empty(self) -> bool:
        return self.value == 0

    def is_set(self) -> bool:
        return self.value != 0

    def possible_values(self) -> List[int]:
        """Candidates in ascending order ([value] for a set cell)."""
        return sorted(self.candidates)

    def contains_candidate(self, value: int) -> bool:
        return value in self.candidates

    def contains_any_of(self, values: Iterable[int]) -> bool:
        return any(v in self.candidates for v in values)

    def remove_candidate(self, value: int) -> bool:
        """
        Remove a value from the candidates.

        If exactly one candidate remains afterwards it becomes the cell's
        value. Set cells are left untouched.

        Args:
            value: Digit to remove

        Returns:
            True if the cell state changed
        """
        if self.is_set() or value not in self.candidates:
            return False

        self.candidates.discard(value)
        if len(self.candidates) == 1:
            self.value = next(iter(self.candidates))
        return True

    def remove_candidates(self, values: Iterable[int]) -> bool:
        """Remove every given value. Returns True if anything changed."""
        changed = False
        for value in values:
            changed |= self.remove_candidate(value)
        return changed

    def remove_candidates_outside_of(self, values: Iterable[int]) -> bool:
        """Keep only the candidates contained in values."""
        keep = set(values)
        return self.remove_candidates([v for v in DIGITS if v not in keep])

    def set_value(self, value: int) -> bool:
        """
        Force the cell to a value, discarding all other candidates.

        Args:
            value: Digit 1-9

        Returns:
            True if the cell state changed (False if out of range or already set to value)
        """
        if value not in DIGITS or value == self.value:
            return False

        self.value = value
        self.candidates = {value}
        return True

    def copy(self) -> 'Cell':
        clone = Cell(self.value)
        clone.candidates = set(self.candidates)
        return clone
