"""
Tests for puzzle generation.

Difficulty-targeted generation against the real solver can take a while;
those runs are marked slow and deselected by default (run with -m slow).
"""

import random

import pytest

from sudoku_utils import generator
from sudoku_utils.evaluator import evaluate_difficulty
from sudoku_utils.generator import (
    GenerationError,
    generate,
    generate_completed_puzzle,
    generate_with_difficulty,
    remove_cells,
)
from sudoku_utils.puzzle import Puzzle
from sudoku_utils.solver import Difficulty, solve, solve_with_guessing

from conftest import WIKI_PUZZLE


def test_solve_with_guessing_is_reproducible():
    first = solve_with_guessing(Puzzle.empty(), random.Random(11))
    second = solve_with_guessing(Puzzle.empty(), random.Random(11))
    assert first == second
    assert first.count_clues() > 0


def test_completed_puzzle_is_solved():
    puzzle = generate_completed_puzzle(random.Random(1))
    assert puzzle.is_complete()
    assert puzzle.is_solved()


def test_completed_puzzle_gives_up():
    with pytest.raises(GenerationError):
        generate_completed_puzzle(random.Random(1), max_attempts=0)


def test_generation_error_is_runtime_error():
    assert issubclass(GenerationError, RuntimeError)


def test_remove_cells_keeps_puzzle_solvable(pattern_solution):
    puzzle = remove_cells(pattern_solution, random.Random(4))

    assert puzzle.count_clues() < 81
    assert solve(puzzle).is_solved()
    # Every remaining clue matches the completed grid
    for row, col in puzzle.filled_positions():
        assert puzzle.get_cell(row, col) == pattern_solution.get_cell(row, col)


def test_remove_cells_result_is_minimal(pattern_solution):
    """No single remaining clue can be removed without breaking solvability."""
    puzzle = remove_cells(pattern_solution, random.Random(9))
    for row, col in puzzle.filled_positions():
        assert not solve(puzzle.with_cell_cleared(row, col)).is_solved()


def test_generate_is_reproducible_with_seed():
    first = generate(seed=5)
    second = generate(seed=5)

    assert first == second
    assert not first.is_complete()
    assert solve(first).is_solved()
    assert evaluate_difficulty(first) is not None


def test_generate_with_difficulty_returns_matching_puzzle(monkeypatch):
    wiki = Puzzle.from_str(WIKI_PUZZLE)
    seen = []

    def fake_generate(rng, **kwargs):
        seen.append(rng)
        return wiki

    monkeypatch.setattr(generator, "generate", fake_generate)

    puzzle = generate_with_difficulty(Difficulty.EASY, seed=3, require_all_strategies=False)
    assert puzzle == wiki
    assert len(seen) == 1
    assert isinstance(seen[0], random.Random)


def test_generate_with_difficulty_gives_up(monkeypatch):
    calls = []

    def fake_generate(rng, **kwargs):
        calls.append(1)
        return Puzzle.from_str(WIKI_PUZZLE)

    monkeypatch.setattr(generator, "generate", fake_generate)

    with pytest.raises(GenerationError, match="HARD"):
        generate_with_difficulty(Difficulty.HARD, seed=3, max_attempts=4)
    assert len(calls) == 4


def test_generate_with_difficulty_applies_strategy_filter(monkeypatch):
    monkeypatch.setattr(generator, "generate", lambda rng, **kwargs: Puzzle.from_str(WIKI_PUZZLE))
    monkeypatch.setattr(generator, "uses_all_tier_strategies", lambda puzzle, difficulty: False)

    with pytest.raises(GenerationError):
        generate_with_difficulty(Difficulty.EASY, max_attempts=2, require_all_strategies=True)

    assert generate_with_difficulty(Difficulty.EASY, max_attempts=2, require_all_strategies=False)


def test_uses_all_tier_strategies(wiki_puzzle):
    # Nothing beyond the easy tier is needed for this puzzle
    assert not generator.uses_all_tier_strategies(wiki_puzzle, Difficulty.HARD)
    assert not generator.uses_all_tier_strategies(wiki_puzzle, Difficulty.MEDIUM)


@pytest.mark.slow
@pytest.mark.parametrize("difficulty", list(Difficulty))
def test_generate_with_difficulty_real(difficulty):
    puzzle = generate_with_difficulty(difficulty, seed=2024, require_all_strategies=False)
    assert evaluate_difficulty(puzzle) is difficulty
    assert solve(puzzle).is_solved()


@pytest.mark.slow
def test_generate_hard_with_default_filter():
    puzzle = generate_with_difficulty(Difficulty.HARD, seed=2024)

    assert evaluate_difficulty(puzzle) is Difficulty.HARD
    assert generator.uses_all_tier_strategies(puzzle, Difficulty.HARD)

    solved = solve(puzzle)
    assert solved.is_complete()
    assert not solved.has_conflicts()
