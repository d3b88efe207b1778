#!/usr/bin/env python3
"""
Debug script for the branch-and-bound solver - prints every expanded state.
"""

import argparse
import sys
from pathlib import Path

# Add parent directory to path to import src modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.burrow.encoder import encode
from src.burrow.moves import MoveGenerator, ReduceOutcome
from src.burrow.parser import parse_burrow, puzzle_parts
from src.solver import BranchAndBoundSolver, SearchConfig

EXAMPLE = """
#############
#...........#
###B#C#B#D###
  #A#D#C#A#
  #########
"""


class VerboseSolver(BranchAndBoundSolver):
    """Solver printing each popped state, up to a limit."""

    def __init__(self, config, max_prints: int = 50):
        super().__init__(config)
        self.max_prints = max_prints

    def _expand(self, state, moves, pruning, context):
        if context.states_explored > self.max_prints:
            return super()._expand(state, moves, pruning, context)

        print(f"\n--- State {context.states_explored} ---")
        print(f"Popped:  {state}")

        before = len(context.stack)
        reduced = state.copy()
        outcome = moves.reduce(reduced, context.target)
        print(f"Reduced: {reduced} -> {outcome.value}")

        super()._expand(state, moves, pruning, context)

        if outcome is ReduceOutcome.OPEN:
            options = list(MoveGenerator(moves.burrow).parking_moves(reduced))
            print(
                f"  {len(options)} parking moves, "
                f"{len(context.stack) - before} pushed, target={context.target}"
            )


def main():
    """Run the verbose solver on a file or the example burrow."""
    parser = argparse.ArgumentParser(description="Debug solver with verbose output")
    parser.add_argument("-f", "--file", default=None, help="Input file")
    parser.add_argument("-e", "--experimental", action="store_true")
    parser.add_argument(
        "--max-prints", type=int, default=50, help="States to print before going quiet"
    )

    args = parser.parse_args()

    text = Path(args.file).read_text() if args.file else EXAMPLE
    config = SearchConfig.experimental() if args.experimental else SearchConfig()
    solver = VerboseSolver(config, max_prints=args.max_prints)

    for name, tokens in puzzle_parts(parse_burrow(text)):
        burrow, state = encode(tokens)
        print(f"=== {name} ===")
        print(burrow)

        result = solver.solve(burrow, state)

        print(f"\n=== {name} Result ===")
        print(f"Success: {result.success}")
        print(f"Cost: {result.cost}")
        print(f"Bounds: {result.bound_history}")
        print(f"Time: {result.time_taken_ms:.1f}ms")
        print(f"Explored: {result.states_explored}")
        print(f"Pushed: {result.branches_pushed}")
        print(f"Pruned: {result.branches_pruned}")
        print(f"Dominated: {result.branches_dominated}")


if __name__ == "__main__":
    main()
