"""
sudoku-utils - Entry Point

Solves a puzzle given as 81 consecutive characters, or generates a new one.
Digits 1 to 9 are clues, every other character is an empty cell.

Example:
    python main.py 003020600900305001001806400008102900700000008006708200002609500800203009005010300
    python main.py --generate hard --seed 7
    python main.py <puzzle> --image solved.png --candidates
"""

import sys
import logging
import argparse
import random
from typing import Any, Dict, List, Optional

from sudoku_utils.puzzle import Puzzle, PuzzleParsingError
from sudoku_utils.printer import format_candidates, format_puzzle, save_puzzle_image
from sudoku_utils.settings import load_settings, save_settings
from sudoku_utils.solver import Difficulty, solve_grid, solve_with_statistics
from sudoku_utils.evaluator import evaluate_difficulty
from sudoku_utils.generator import GenerationError, generate, generate_with_difficulty


logger = logging.getLogger(__name__)


def configure_logging(debug: bool) -> None:
    """Configure logging - output to both console and file."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        handlers=[
            logging.StreamHandler(),  # Console output
            logging.FileHandler("sudoku.log", mode='w', encoding='utf-8')  # File output
        ]
    )


class Application:
    """
    Command line application.

    Combines saved settings with CLI flags and runs either the solve or
    the generate flow.
    """

    def __init__(self, settings: Dict[str, Any], debug_mode: bool = False):
        """
        Initialize the application.

        Args:
            settings: Loaded settings
            debug_mode: Enable debug mode via CLI (overrides saved setting)
        """
        self.settings = settings
        self.debug_mode = debug_mode or settings.get("debug_enabled", False)

    def solve(self, text: str, image_path: Optional[str] = None, show_candidates: bool = False) -> int:
        """
        Decode, solve and print a puzzle.

        Returns:
            Exit code (1 on decode failure)
        """
        try:
            puzzle = Puzzle.from_str(text)
        except PuzzleParsingError as e:
            print(f"[Error] {e}", file=sys.stderr)
            return 1

        if not puzzle.is_valid():
            logger.warning("Puzzle contains out-of-range digits, treating them as empty")

        print("Input: ")
        print(format_puzzle(puzzle))

        solution = solve_with_statistics(puzzle)
        print("Output: ")
        print(format_puzzle(solution.puzzle))

        if show_candidates:
            print(format_candidates(solve_grid(puzzle)))

        difficulty = evaluate_difficulty(puzzle)
        logger.info(
            f"Solved={solution.is_solved}, difficulty={difficulty.label if difficulty else 'unclassifiable'}, "
            f"{solution.cells_filled} cells filled in {solution.metrics.computation_time_ms:.1f}ms"
        )
        used = {name: count for name, count in solution.metrics.strategy_counts.items() if count}
        logger.debug(f"Strategy usage: {used}")

        if image_path:
            save_puzzle_image(solution.puzzle, image_path, givens=puzzle,
                              cell_size=self.settings["image_cell_size"])
            logger.info(f"Image saved: {image_path}")

        return 0

    def generate(self, difficulty_name: str, seed: Optional[int] = None,
                 image_path: Optional[str] = None) -> int:
        """
        Generate and print a puzzle.

        Returns:
            Exit code (1 if generation gave up)
        """
        rng = random.Random(seed)
        try:
            if difficulty_name == "any":
                puzzle = generate(rng, max_completion_attempts=self.settings["max_completion_attempts"])
            else:
                puzzle = generate_with_difficulty(
                    Difficulty.from_name(difficulty_name),
                    rng=rng,
                    max_attempts=self.settings["max_generation_attempts"],
                    require_all_strategies=self.settings["require_all_tier_strategies"],
                    max_completion_attempts=self.settings["max_completion_attempts"]
                )
        except GenerationError as e:
            print(f"[Error] {e}", file=sys.stderr)
            return 1

        print(puzzle.to_str())
        print(format_puzzle(puzzle))

        difficulty = evaluate_difficulty(puzzle)
        logger.info(f"Generated puzzle with {puzzle.count_clues()} clues, "
                    f"difficulty={difficulty.label if difficulty else 'unclassifiable'}")

        if image_path:
            save_puzzle_image(puzzle, image_path, cell_size=self.settings["image_cell_size"])
            logger.info(f"Image saved: {image_path}")

        return 0


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="sudoku-utils - Solve, classify and generate 9x9 puzzles"
    )
    parser.add_argument(
        "sudoku",
        nargs="?",
        help="The puzzle to solve as 81 consecutive chars. Digits 1 to 9 are considered "
             "as entries, everything else as empty cells."
    )
    parser.add_argument(
        "--generate", "-g",
        choices=["easy", "medium", "hard", "any"],
        help="Generate a puzzle of the given difficulty instead of solving one"
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for generation"
    )
    parser.add_argument(
        "--image", "-i",
        default=None,
        help="Also save the result as a PNG image at this path"
    )
    parser.add_argument(
        "--candidates", "-c",
        action="store_true",
        help="Print the remaining candidates of every cell after solving"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "--write-config",
        action="store_true",
        help="Save the effective settings to config.json"
    )
    args = parser.parse_args(argv)
    if args.sudoku is None and args.generate is None:
        parser.error("a puzzle or --generate is required")
    return args


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line application."""
    args = parse_args(argv)

    # Load persistent settings
    settings = load_settings()

    application = Application(settings, debug_mode=args.debug)
    configure_logging(application.debug_mode)

    if args.write_config:
        settings["debug_enabled"] = application.debug_mode
        save_settings(settings)

    if args.generate:
        return application.generate(args.generate, seed=args.seed, image_path=args.image)
    return application.solve(args.sudoku, image_path=args.image, show_candidates=args.candidates)


if __name__ == "__main__":
    sys.exit(main())
