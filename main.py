#!/usr/bin/env python3
"""
Amphipod burrow solver

Finds the minimum energy needed to sort the amphipods of a burrow diagram
into their rooms, for the 2-row puzzle and, when available, the 4-row one.
"""

import argparse
import sys
import time
from pathlib import Path

from src.burrow.encoder import encode
from src.burrow.parser import PuzzleParseError, parse_burrow, puzzle_parts
from src.solver import BranchAndBoundSolver, SearchConfig
from src.util.logger import logger, set_level

log = logger.bind(component="cli")


def solve_file(path: Path, config: SearchConfig, fold: bool = False) -> int:
    """Solve every puzzle found in ``path`` and print the costs."""
    tokens = parse_burrow(path.read_text())
    solver = BranchAndBoundSolver(config)

    for name, part_tokens in puzzle_parts(tokens, fold=fold):
        burrow, state = encode(part_tokens)
        result = solver.solve(burrow, state)

        if result.success:
            print(f"{name}: found cost of {result.cost} in {result.time_taken_ms:.1f}ms")
        else:
            print(f"{name}: no solution found in {result.time_taken_ms:.1f}ms")
        if not result.complete:
            print(f"{name}: search timed out, cost may not be minimal")

    return 0


def main(argv=None):
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Amphipod burrow solver",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py -f input.txt         # Solve part 1 (and part 2 for 4-row input)
  python main.py -f input.txt --fold  # Also solve part 2 from a 2-row input
  python main.py -e                   # Enable experimental pruning
        """,
    )

    parser.add_argument("-f", "--file", default="input.txt", help="Input file")
    parser.add_argument(
        "-e",
        "--experimental",
        action="store_true",
        help="Enable experimental pruning (may miss the optimum)",
    )
    parser.add_argument(
        "--fold", action="store_true", help="Insert the hidden rows of part 2"
    )
    parser.add_argument(
        "--timeout-ms", type=float, default=None, help="Stop each search after this"
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log search progress"
    )

    args = parser.parse_args(argv)

    if args.verbose:
        set_level("DEBUG")

    start = time.time()

    path = Path(args.file)
    if not path.exists():
        log.error(f"Input file not found: {path}")
        return 2

    if args.experimental:
        config = SearchConfig.experimental(timeout_ms=args.timeout_ms)
    else:
        config = SearchConfig(timeout_ms=args.timeout_ms)

    try:
        status = solve_file(path, config, fold=args.fold)
    except PuzzleParseError as e:
        log.error(f"Could not read burrow: {e}")
        return 1

    print(f"Global execution time (incl. parsing): {(time.time() - start) * 1000:.1f}ms")
    return status


if __name__ == "__main__":
    sys.exit(main())
