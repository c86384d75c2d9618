# queens_generate
#
# Description:
# A command-line tool for generating regional queens puzzles. It grows random
# color regions, keeps the first layout the backtracking solver can solve
# (falling back to one region per column), and prints the result as a
# colored terminal grid together with its task string export. Optionally the
# Z3 solver reports whether the generated layout has a unique solution.
#
# Usage:
# queens-generate [size] [--seed N] [--check-unique] [--show-solution] [--debug]
#
# Example:
# queens-generate 9 --seed 42 --check-unique
#
# If no size is given, it defaults to an 8x8 puzzle.

import argparse
import logging
import random
import sys

from queenslab.constants import (
    DEFAULT_SIZE, MAX_GENERATION_ATTEMPTS, RESET, UNIFIED_COLORS_BG,
    BASE64_DISPLAY_ALPHABET, MARKER_SYMBOL
)
from queenslab.generator import generate_puzzle
from queenslab.partitioner import is_contiguous
from queenslab.puzzle_handler import encode_task_string
from queenslab.z3_solver import Z3QueensSolver


def display_terminal_grid(grid, title, placement=None):
    """Prints a colorized representation of a region grid, with optional markers."""
    if not grid: return
    print(f"\n--- {title} ---")
    for r, row in enumerate(grid):
        colored_chars = []
        for c, region in enumerate(row):
            color_ansi = UNIFIED_COLORS_BG[region % len(UNIFIED_COLORS_BG)][2]
            if placement is not None and placement[r] == c:
                symbol = MARKER_SYMBOL
            else:
                symbol = BASE64_DISPLAY_ALPHABET[region % len(BASE64_DISPLAY_ALPHABET)]
            colored_chars.append(f"{color_ansi} {symbol} {RESET}")
        print("".join(colored_chars))
    print("-" * (len(grid) * 3))


def build_parser():
    parser = argparse.ArgumentParser(description="Generate a solvable regional queens puzzle.")
    parser.add_argument("size", nargs="?", type=int, default=DEFAULT_SIZE, help=f"Board size (default {DEFAULT_SIZE}).")
    parser.add_argument("--seed", type=int, help="Seed for reproducible generation.")
    parser.add_argument("--max-attempts", type=int, default=MAX_GENERATION_ATTEMPTS,
                        help="Random layouts to try before using the column layout.")
    parser.add_argument("--check-unique", action="store_true", help="Count solutions with Z3 (stops at 2).")
    parser.add_argument("--show-solution", action="store_true", help="Print the solver's solution.")
    parser.add_argument("--debug", action="store_true", help="Enable verbose debug logging.")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.size < 1:
        parser.error("size must be a positive integer")
    if args.max_attempts < 0:
        parser.error("--max-attempts cannot be negative")

    logging.basicConfig(level=logging.DEBUG if args.debug else logging.INFO,
                        format='%(asctime)s - %(levelname)s - %(message)s')

    rng = random.Random(args.seed) if args.seed is not None else None
    level, placement = generate_puzzle(args.size, rng, args.max_attempts)
    region_grid = level.region_grid()

    display_terminal_grid(region_grid, "Generated Puzzle Regions")
    if args.show_solution:
        if placement is None:
            print("\nNo solution exists for this size.")
        else:
            display_terminal_grid(region_grid, "Solution", placement)

    print(f"\nContiguous regions: {'yes' if is_contiguous(region_grid) else 'no'}")
    if args.check_unique:
        count, _ = Z3QueensSolver(region_grid).solve_and_count(limit=2)
        verdict = {0: "no solution", 1: "unique solution"}.get(count, "multiple solutions")
        print(f"Z3 analysis: {verdict}")

    print("\n--- EXPORT FORMATS ---")
    print(f"Web Task String: {encode_task_string(region_grid)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
