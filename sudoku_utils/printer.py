"""
Puzzle Rendering Utilities

Functions for rendering puzzles as boxed text, dumping grid candidates for
debugging, and saving puzzles as PNG images.
"""

import logging
from pathlib import Path
from typing import List, Optional, Union

from PIL import Image, ImageDraw, ImageFont

from .puzzle import Puzzle
from .solver import Grid

logger = logging.getLogger(__name__)

# Image colors
GIVEN_COLOR = "black"
SOLVED_COLOR = "#1565C0"  # Blue
GRID_COLOR = "black"
BACKGROUND_COLOR = "white"
MARGIN = 10


def _digit(value: int) -> str:
    return str(value) if 1 <= value <= 9 else " "


def format_puzzle(puzzle: Puzzle) -> str:
    """
    Render a puzzle as a boxed 9x9 grid for human reading.

    Example:
         -----------------------------
        | 5  3    |    7    |         |
        ...
    """
    lines: List[str] = [" " + "-" * 29]
    for index, row in enumerate(puzzle.grid):
        boxes = [
            "  ".join(_digit(v) for v in row[i:i + 3])
            for i in range(0, 9, 3)
        ]
        lines.append("| " + " | ".join(boxes) + " |")
        if (index + 1) % 3 == 0 and index < 8:
            lines.append("|" + "-" * 29 + "|")
    lines.append(" " + "-" * 29)
    return "\n".join(lines)


def format_candidates(grid: Grid) -> str:
    """
    Dump the candidates of every cell, one 9-character slot per cell.

    Slot position n holds digit n when it is still a candidate.
    """
    separator = " " + "-" * 111 + " "
    spacer = "|" + "|           |           |           |" * 3 + "|"
    lines: List[str] = [separator]

    for row in range(9):
        parts = ["|| "]
        for col in range(9):
            candidates = grid.cells[row][col].candidates
            parts.append("".join(str(n) if n in candidates else " " for n in range(1, 10)))
            parts.append(" |")
            if (col + 1) % 3 == 0:
                parts.append("|")
            parts.append(" ")
        lines.append("".join(parts).rstrip())
        lines.append(separator if (row + 1) % 3 == 0 else spacer)

    return "\n".join(lines)


def save_puzzle_image(
    puzzle: Puzzle,
    path: Union[str, Path],
    givens: Optional[Puzzle] = None,
    cell_size: int = 48
) -> Path:
    """
    Save a puzzle as a PNG image.

    Annotations include:
    - Thin cell lines and thick box lines
    - Given digits in black
    - Digits filled in by the solver in blue (when givens is provided)

    Args:
        puzzle: Puzzle to draw
        path: Output file path
        givens: Original puzzle; its clues are drawn as givens
        cell_size: Cell edge length in pixels

    Returns:
        Path of the written image
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    side = 9 * cell_size + 2 * MARGIN
    image = Image.new("RGB", (side, side), BACKGROUND_COLOR)
    draw = ImageDraw.Draw(image)

    # Try to load a font, fall back to default
    try:
        font = ImageFont.truetype("arial.ttf", int(cell_size * 0.6))
    except OSError:
        font = ImageFont.load_default()

    for i in range(10):
        width = 3 if i % 3 == 0 else 1
        offset = MARGIN + i * cell_size
        draw.line([(MARGIN, offset), (side - MARGIN, offset)], fill=GRID_COLOR, width=width)
        draw.line([(offset, MARGIN), (offset, side - MARGIN)], fill=GRID_COLOR, width=width)

    for row in range(9):
        for col in range(9):
            value = puzzle.get_cell(row, col)
            if not 1 <= value <= 9:
                continue

            is_given = givens is None or givens.get_cell(row, col) != 0
            color = GIVEN_COLOR if is_given else SOLVED_COLOR

            # Center the digit in its cell
            left, top, right, bottom = draw.textbbox((0, 0), str(value), font=font)
            x = MARGIN + col * cell_size + (cell_size - (right - left)) // 2 - left
            y = MARGIN + row * cell_size + (cell_size - (bottom - top)) // 2 - top
            draw.text((x, y), str(value), fill=color, font=font)

    image.save(path, "PNG")
    logger.debug(f"Puzzle image saved: {path}")
    return path
