"""
Tests for text and image rendering.
"""

from PIL import Image

from sudoku_utils.printer import MARGIN, format_candidates, format_puzzle, save_puzzle_image
from sudoku_utils.puzzle import Puzzle
from sudoku_utils.solver import Grid, solve_grid


def test_format_puzzle_layout(wiki_puzzle):
    lines = format_puzzle(wiki_puzzle).splitlines()

    assert len(lines) == 13
    assert lines[0] == " " + "-" * 29
    assert lines[-1] == " " + "-" * 29
    assert lines[1] == "| 5  3    |    7    |         |"
    assert lines[4] == "|" + "-" * 29 + "|"
    assert lines[8] == "|" + "-" * 29 + "|"


def test_format_puzzle_solved_row(wiki_solution):
    lines = format_puzzle(wiki_solution).splitlines()
    assert lines[1] == "| 5  3  4 | 6  7  8 | 9  1  2 |"


def test_format_candidates_empty_grid():
    lines = format_candidates(Grid.from_puzzle(Puzzle.empty())).splitlines()

    assert len(lines) == 19
    assert lines[0] == " " + "-" * 111 + " "
    assert lines[1].count("123456789") == 9
    assert lines[2].startswith("|") and "-" not in lines[2]


def test_format_candidates_shows_set_cells(wiki_puzzle):
    grid = solve_grid(wiki_puzzle)
    first_row = format_candidates(grid).splitlines()[1]
    # 5 is set at (0, 0): only slot 5 is filled
    assert first_row.startswith("||     5     |")


def test_save_puzzle_image(tmp_path, wiki_puzzle, wiki_solution):
    path = save_puzzle_image(wiki_solution, tmp_path / "images" / "solved.png",
                             givens=wiki_puzzle, cell_size=20)

    assert path.exists()
    with Image.open(path) as image:
        assert image.format == "PNG"
        assert image.size == (9 * 20 + 2 * MARGIN, 9 * 20 + 2 * MARGIN)
        # Margin stays background, outer border is drawn
        assert image.getpixel((0, 0)) == (255, 255, 255)
        assert image.getpixel((MARGIN, MARGIN)) == (0, 0, 0)


def test_save_empty_puzzle_image(tmp_path):
    path = save_puzzle_image(Puzzle.empty(), str(tmp_path / "empty.png"))
    with Image.open(path) as image:
        assert image.size == (9 * 48 + 2 * MARGIN,) * 2
