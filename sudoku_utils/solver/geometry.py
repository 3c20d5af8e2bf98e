"""Position helpers shared by the grid and the strategies: rows, columns and boxes.

Positions are (row, col) tuples, 0-based. Boxes are numbered 0-8 row-major.
"""

from itertools import product
from typing import List, Tuple

Pos = Tuple[int, int]

SIZE = 9
BOX_SIZE = 3

ALL_POSITIONS: List[Pos] = list(product(range(SIZE), range(SIZE)))


def box_index(row: int, col: int) -> int:
    return (row // BOX_SIZE) * BOX_SIZE + col // BOX_SIZE


def box_origin(box: int) -> Pos:
    return (box // BOX_SIZE) * BOX_SIZE, (box % BOX_SIZE) * BOX_SIZE


def row_positions(row: int) -> List[Pos]:
    return [(row, c) for c in range(SIZE)]


def column_positions(col: int) -> List[Pos]:
    return [(r, col) for r in range(SIZE)]


def box_positions(box: int) -> List[Pos]:
    r0, c0 = box_origin(box)
    return [(r0 + i, c0 + j) for i, j in product(range(BOX_SIZE), range(BOX_SIZE))]


def are_related(first: Pos, second: Pos) -> bool:
    """True if both positions share a row, column or box (a position is related to itself)."""
    return (
        first[0] == second[0]
        or first[1] == second[1]
        or box_index(*first) == box_index(*second)
    )
