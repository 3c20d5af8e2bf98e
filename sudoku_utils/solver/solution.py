"""
Solution Module - Result of a solving run and its statistics.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from .difficulty import Difficulty
from ..puzzle import Puzzle


@dataclass
class SolutionMetrics:
    """
    Statistics collected by the solving loop.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        passes: Number of strategy applications attempted
        strategy_counts: Changes credited to each strategy, keyed by name
            (every eligible strategy is present, possibly with 0)
        ceiling: Highest strategy tier that was allowed
    """
    computation_time_ms: float = 0.0
    passes: int = 0
    strategy_counts: Dict[str, int] = field(default_factory=dict)
    ceiling: Optional[Difficulty] = None

    @property
    def total_changes(self) -> int:
        return sum(self.strategy_counts.values())

    def used(self, strategy_name: str) -> bool:
        """True if the strategy was credited with at least one change."""
        return self.strategy_counts.get(strategy_name, 0) > 0


@dataclass
class Solution:
    """
    Result of a solving run.

    Attributes:
        initial: Puzzle the run started from
        puzzle: Puzzle after the fixed point was reached
        metrics: Solving statistics
    """
    initial: Puzzle
    puzzle: Puzzle
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def is_solved(self) -> bool:
        """Check if the run reached a complete, conflict-free grid."""
        return self.puzzle.is_solved()

    @property
    def cells_filled(self) -> int:
        """Number of cells placed during the run."""
        return self.puzzle.count_clues() - self.initial.count_clues()
