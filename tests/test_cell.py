"""
Tests for the Cell model.

Covers:
1. Construction from raw digits (including out-of-range clamping)
2. Candidate removal and auto-collapse
3. Forced assignment
"""

import pytest

from sudoku_utils.solver import Cell


def test_new_cell_from_digit():
    """Empty cells start with every candidate, set cells with their value only."""
    empty = Cell(0)
    assert empty.is_empty()
    assert not empty.is_set()
    assert empty.possible_values() == list(range(1, 10))

    given = Cell(7)
    assert given.is_set()
    assert given.value == 7
    assert given.possible_values() == [7]


def test_candidates_are_not_a_constructor_argument():
    with pytest.raises(TypeError):
        Cell(0, {1, 2})
    assert Cell(0).candidates == set(range(1, 10))


def test_out_of_range_digit_is_clamped_to_empty():
    for raw in (10, 12, -1):
        cell = Cell(raw)
        assert cell.value == 0
        assert cell.possible_values() == list(range(1, 10))


def test_remove_candidate_reports_changes():
    cell = Cell(0)
    assert cell.remove_candidate(4) is True
    assert not cell.contains_candidate(4)

    # Absent or out-of-range values are no-ops
    assert cell.remove_candidate(4) is False
    assert cell.remove_candidate(0) is False
    assert cell.remove_candidate(10) is False
    assert len(cell.possible_values()) == 8


def test_remove_candidate_collapses_last_candidate():
    cell = Cell(0)
    for value in range(1, 9):
        cell.remove_candidate(value)

    assert cell.is_set()
    assert cell.value == 9
    assert cell.possible_values() == [9]


def test_remove_candidate_on_set_cell_is_noop():
    cell = Cell(3)
    assert cell.remove_candidate(3) is False
    assert cell.value == 3
    assert cell.possible_values() == [3]


def test_contains_any_of():
    cell = Cell(0)
    cell.remove_candidates_outside_of([2, 5, 8])
    assert cell.contains_any_of([1, 5])
    assert not cell.contains_any_of([1, 3, 9])
    assert not cell.contains_any_of([])


def test_remove_candidates_outside_of():
    cell = Cell(0)
    assert cell.remove_candidates_outside_of([1, 2]) is True
    assert cell.possible_values() == [1, 2]
    assert cell.is_empty()

    # Nothing left to remove
    assert cell.remove_candidates_outside_of([1, 2, 3]) is False

    # Narrowing to one value sets it
    assert cell.remove_candidates_outside_of([2]) is True
    assert cell.value == 2


def test_set_value():
    cell = Cell(0)
    assert cell.set_value(6) is True
    assert cell.value == 6
    assert cell.possible_values() == [6]

    assert cell.set_value(6) is False
    assert cell.set_value(0) is False
    assert cell.set_value(11) is False
    assert cell.value == 6

    # Forced assignment overrides an existing value
    assert cell.set_value(2) is True
    assert cell.possible_values() == [2]


def test_copy_is_independent():
    cell = Cell(0)
    clone = cell.copy()
    clone.remove_candidate(1)

    assert cell.contains_candidate(1)
    assert not clone.contains_candidate(1)
    assert cell != clone
