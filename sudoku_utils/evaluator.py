"""
Difficulty Evaluator - Classifies a puzzle by the weakest strategy tier that solves it.
"""

import logging
from typing import Optional

from .puzzle import Puzzle
from .solver import Difficulty, solve_with_difficulty

logger = logging.getLogger(__name__)


def evaluate_difficulty(puzzle: Puzzle) -> Optional[Difficulty]:
    """
    Evaluate the difficulty of a puzzle by trying to solve it.

    Tiers are tried in ascending order; the first one whose strategies reach
    a complete, conflict-free grid is the puzzle's difficulty.

    Args:
        puzzle: Puzzle to classify

    Returns:
        Lowest sufficient Difficulty, or None if the puzzle needs guessing
        (or is invalid)
    """
    for difficulty in Difficulty:
        if solve_with_difficulty(puzzle, difficulty).is_solved():
            logger.debug(f"Puzzle {puzzle} classified as {difficulty.name}")
            return difficulty

    logger.debug(f"Puzzle {puzzle} cannot be solved without guessing")
    return None


classify = evaluate_difficulty
