"""
Burrow model: amphipod labels, search state, encoding and move generation.
"""

from .amphipod import FREE, PARKING_SPOTS, WEIGHTS, Amphipod, room_column
from .encoder import Burrow, encode
from .moves import Move, MoveGenerator, ReduceOutcome
from .parser import PuzzleParseError, parse_burrow, puzzle_parts
from .state import Key, State

__all__ = [
    "Amphipod",
    "Burrow",
    "FREE",
    "Key",
    "Move",
    "MoveGenerator",
    "PARKING_SPOTS",
    "PuzzleParseError",
    "ReduceOutcome",
    "State",
    "WEIGHTS",
    "encode",
    "parse_burrow",
    "puzzle_parts",
    "room_column",
]
