"""
Generator Module - Builds puzzles by filling a grid and removing clues.

Generation has three stages:
1. Fill an empty puzzle with the guessing-augmented solver until a
   complete, conflict-free grid comes out.
2. Remove clues in random order as long as the deterministic solver can
   still complete the puzzle.
3. Optionally repeat until the puzzle has the requested difficulty.

The solution of a generated puzzle is not guaranteed to be unique. All
randomness comes from the random.Random passed in (or built from a seed),
so a seed reproduces the same puzzle.
"""

import logging
import random
from typing import Optional

from .evaluator import evaluate_difficulty
from .puzzle import Puzzle
from .settings import DEFAULT_SETTINGS
from .solver import Difficulty, solve, solve_with_guessing, solve_with_statistics, strategy_names_for

logger = logging.getLogger(__name__)

MAX_COMPLETION_ATTEMPTS = DEFAULT_SETTINGS["max_completion_attempts"]
MAX_GENERATION_ATTEMPTS = DEFAULT_SETTINGS["max_generation_attempts"]


class GenerationError(RuntimeError):
    """Raised when a bounded generation loop runs out of attempts."""


def _resolve_rng(rng: Optional[random.Random], seed: Optional[int]) -> random.Random:
    if rng is not None:
        return rng
    return random.Random(seed)


def generate_completed_puzzle(
    rng: Optional[random.Random] = None,
    max_attempts: int = MAX_COMPLETION_ATTEMPTS
) -> Puzzle:
    """
    Fill an empty puzzle using the solver plus random guesses.

    A guess can lead to a dead end, in which case the attempt is discarded
    and the fill restarts from scratch.

    Args:
        rng: Random source for the guesses
        max_attempts: Maximum number of fills to try

    Returns:
        Complete, conflict-free puzzle

    Raises:
        GenerationError: If no attempt produced a solved grid
    """
    rng = _resolve_rng(rng, None)
    for attempt in range(1, max_attempts + 1):
        puzzle = solve_with_guessing(Puzzle.empty(), rng)
        if puzzle.is_solved():
            logger.debug(f"Completed grid after {attempt} attempt(s)")
            return puzzle
        logger.debug(f"Fill attempt {attempt} dead-ended with {puzzle.count_clues()} cells set")

    raise GenerationError(f"Could not fill a grid in {max_attempts} attempts")


def remove_cells(puzzle: Puzzle, rng: Optional[random.Random] = None) -> Puzzle:
    """
    Remove clues while the puzzle stays solvable without guessing.

    Filled positions are shuffled and tried one by one; a removal is kept
    when the deterministic solver still completes the puzzle. Passes over the
    remaining clues repeat until one of them removes nothing.

    Args:
        puzzle: Puzzle to thin out (normally a completed grid)
        rng: Random source for the removal order

    Returns:
        Puzzle from which no single further clue can be removed
    """
    rng = _resolve_rng(rng, None)
    current = puzzle

    while True:
        candidates = current.filled_positions()
        rng.shuffle(candidates)

        removed = 0
        for row, col in candidates:
            reduced = current.with_cell_cleared(row, col)
            if solve(reduced).is_solved():
                current = reduced
                removed += 1

        logger.debug(f"Removal pass cleared {removed} cells, {current.count_clues()} clues left")
        if removed == 0:
            return current


def generate(rng: Optional[random.Random] = None, seed: Optional[int] = None,
             max_completion_attempts: int = MAX_COMPLETION_ATTEMPTS) -> Puzzle:
    """
    Generate an unsolved puzzle with no difficulty guarantee.

    Args:
        rng: Random source (takes precedence over seed)
        seed: Seed for a new random source

    Returns:
        Puzzle solvable by the deterministic strategies
    """
    rng = _resolve_rng(rng, seed)
    completed = generate_completed_puzzle(rng, max_completion_attempts)
    return remove_cells(completed, rng)


def uses_all_tier_strategies(puzzle: Puzzle, difficulty: Difficulty) -> bool:
    """
    Check that every strategy of exactly this tier is credited at least once
    when the puzzle is solved with all strategies.
    """
    metrics = solve_with_statistics(puzzle).metrics
    return all(metrics.used(name) for name in strategy_names_for(difficulty))


def generate_with_difficulty(
    difficulty: Difficulty,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    max_attempts: int = MAX_GENERATION_ATTEMPTS,
    require_all_strategies: bool = DEFAULT_SETTINGS["require_all_tier_strategies"],
    max_completion_attempts: int = MAX_COMPLETION_ATTEMPTS
) -> Puzzle:
    """
    Generate puzzles until one has the requested difficulty.

    Args:
        difficulty: Requested tier
        rng: Random source (takes precedence over seed)
        seed: Seed for a new random source
        max_attempts: Maximum number of puzzles to generate
        require_all_strategies: Also require every strategy of that tier to
            be used while solving, which filters out puzzles that only reach
            the tier without exercising its techniques

    Returns:
        Puzzle classified as difficulty

    Raises:
        GenerationError: If no matching puzzle was produced in max_attempts
    """
    rng = _resolve_rng(rng, seed)

    for attempt in range(1, max_attempts + 1):
        puzzle = generate(rng, max_completion_attempts=max_completion_attempts)
        found = evaluate_difficulty(puzzle)

        if found != difficulty:
            logger.debug(f"Attempt {attempt}: got {found.name if found else 'None'}, wanted {difficulty.name}")
            continue
        if require_all_strategies and not uses_all_tier_strategies(puzzle, difficulty):
            logger.debug(f"Attempt {attempt}: {difficulty.name} puzzle does not use every {difficulty.name} strategy")
            continue

        logger.info(f"Generated {difficulty.name} puzzle with {puzzle.count_clues()} clues after {attempt} attempt(s)")
        return puzzle

    logger.warning(f"Gave up generating a {difficulty.name} puzzle after {max_attempts} attempts")
    raise GenerationError(f"No {difficulty.name} puzzle generated in {max_attempts} attempts")
