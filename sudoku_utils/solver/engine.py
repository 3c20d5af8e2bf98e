"""
Solving Engine Module - Fixed-point loop applying strategies to a Grid.
"""

import logging
import random
import time
from typing import Dict, List, Optional

from .base import SolvingStrategy
from .difficulty import Difficulty
from .factory import create_strategy, implemented_strategies
from .grid import Grid
from .solution import Solution, SolutionMetrics
from ..puzzle import Puzzle

logger = logging.getLogger(__name__)


def run_to_fixed_point(
    grid: Grid,
    strategies: List[SolvingStrategy],
    counts: Optional[Dict[str, int]] = None
) -> int:
    """
    Apply strategies until none of them changes the grid.

    Strategies are tried in order; after any change the scan restarts from
    the first strategy, which is then credited for the next change. The loop
    terminates because candidates only shrink and values are only assigned.

    Args:
        grid: Grid to mutate in place
        strategies: Ordered strategies to apply
        counts: Optional dict receiving the number of changes per strategy name

    Returns:
        Number of strategy applications performed
    """
    passes = 0
    while True:
        for strategy in strategies:
            passes += 1
            if strategy.apply(grid):
                if counts is not None:
                    counts[strategy.name] = counts.get(strategy.name, 0) + 1
                break
        else:
            return passes


def solve_with_statistics(puzzle: Puzzle, difficulty: Difficulty = Difficulty.HARD) -> Solution:
    """
    Solve a puzzle and record which strategies made progress.

    Args:
        puzzle: Puzzle to solve
        difficulty: Highest strategy tier allowed

    Returns:
        Solution with the resulting puzzle (possibly incomplete) and metrics
    """
    start_time = time.perf_counter()

    strategies = implemented_strategies(difficulty)
    counts = {strategy.name: 0 for strategy in strategies}

    grid = Grid.from_puzzle(puzzle)
    passes = run_to_fixed_point(grid, strategies, counts)
    result = grid.to_puzzle()

    elapsed_ms = (time.perf_counter() - start_time) * 1000
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            f"Solve up to {difficulty.name}: {passes} passes, "
            f"{sum(counts.values())} changes, {elapsed_ms:.1f}ms, solved={result.is_solved()}"
        )

    return Solution(
        initial=puzzle,
        puzzle=result,
        metrics=SolutionMetrics(
            computation_time_ms=elapsed_ms,
            passes=passes,
            strategy_counts=counts,
            ceiling=difficulty
        )
    )


def solve_with_difficulty(puzzle: Puzzle, difficulty: Difficulty) -> Puzzle:
    """
    Solve using only strategies whose tier is at most difficulty.

    Contradictions are not reported: the returned puzzle is whatever the
    fixed point reached, so callers check is_solved() themselves.
    """
    return solve_grid(puzzle, difficulty).to_puzzle()


def solve(puzzle: Puzzle, difficulty: Difficulty = Difficulty.HARD) -> Puzzle:
    """Solve with every strategy up to difficulty (all strategies by default)."""
    return solve_with_difficulty(puzzle, difficulty)


def solve_grid(puzzle: Puzzle, difficulty: Difficulty = Difficulty.HARD) -> Grid:
    """Like solve(), but return the Grid so candidates can be inspected."""
    grid = Grid.from_puzzle(puzzle)
    run_to_fixed_point(grid, implemented_strategies(difficulty))
    return grid


def solve_with_guessing(puzzle: Puzzle, rng: Optional[random.Random] = None) -> Puzzle:
    """
    Solve with every strategy plus random guessing when stuck.

    Used to fill grids during generation; never used to classify puzzles.
    A bad guess can dead-end in an incomplete grid.

    Args:
        puzzle: Starting puzzle (usually empty)
        rng: Random source for the guesses

    Returns:
        Resulting puzzle, complete unless a guess led to a dead end
    """
    strategies = implemented_strategies()
    strategies.append(create_strategy("single_randomly", rng=rng))

    grid = Grid.from_puzzle(puzzle)
    run_to_fixed_point(grid, strategies)
    return grid.to_puzzle()
