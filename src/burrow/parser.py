"""
Reads the burrow diagram and selects the puzzle(s) to solve.

Input looks like::

    #############
    #...........#
    ###B#C#B#D###
      #A#D#C#A#
      #########

Only the A-D letters matter, read row by row.
"""

import re
from typing import List, Tuple

from ..util.logger import logger
from .amphipod import ROOM_COUNT

log = logger.bind(component="parser")

LETTERS = re.compile(r"[^ABCD]")

# Rows unfolded from the diagram notes for the 4-row puzzle
FOLDED_ROWS = ("DCBA", "DBAC")

SHORT_LENGTH = 2 * ROOM_COUNT
LONG_LENGTH = 4 * ROOM_COUNT


class PuzzleParseError(ValueError):
    """Raised when the diagram does not hold a 2-row or 4-row burrow."""


def extract_tokens(text: str) -> str:
    return LETTERS.sub("", text)


def parse_burrow(text: str) -> str:
    tokens = extract_tokens(text)
    if len(tokens) not in (SHORT_LENGTH, LONG_LENGTH):
        raise PuzzleParseError(
            f"Expected {SHORT_LENGTH} or {LONG_LENGTH} amphipods, found {len(tokens)}"
        )
    log.debug(f"Parsed {len(tokens) // ROOM_COUNT} rows: {tokens}")
    return tokens


def fold_rows(tokens: str) -> str:
    """Insert the two hidden rows between the first and last row."""
    if len(tokens) != SHORT_LENGTH:
        raise PuzzleParseError(f"Only a 2-row burrow can be folded, got {tokens!r}")
    return tokens[:ROOM_COUNT] + "".join(FOLDED_ROWS) + tokens[ROOM_COUNT:]


def unfold_rows(tokens: str) -> str:
    """Keep the first and last row of a 4-row burrow."""
    if len(tokens) != LONG_LENGTH:
        raise PuzzleParseError(f"Only a 4-row burrow can be unfolded, got {tokens!r}")
    return tokens[:ROOM_COUNT] + tokens[3 * ROOM_COUNT :]


def puzzle_parts(tokens: str, fold: bool = False) -> List[Tuple[str, str]]:
    """Pick the puzzles to solve, as ``(name, tokens)`` pairs.

    A 2-row input is part 1 only unless ``fold`` is set. A 4-row input holds
    both: part 1 is its first and last row.
    """
    if len(tokens) == SHORT_LENGTH:
        parts = [("Part1", tokens)]
        if fold:
            parts.append(("Part2", fold_rows(tokens)))
        return parts

    return [("Part1", unfold_rows(tokens)), ("Part2", tokens)]
