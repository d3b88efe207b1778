"""
Builds the immutable room layout and the initial search state from a token list.
"""

from typing import Iterable, List, Tuple, Union

import numpy as np

from .amphipod import FREE, HALLWAY_LENGTH, ROOM_COUNT, Amphipod
from .state import State

Token = Union[str, int, Amphipod]


class Burrow:
    """Initial room contents, row 0 being the top of every room.

    Settled amphipods never leave and misplaced ones leave from the top in
    order, so the amphipod at the top of room ``c`` is always
    ``grid[empty[c], c]``.
    """

    def __init__(self, grid: np.ndarray):
        if grid.ndim != 2 or grid.shape[1] != ROOM_COUNT:
            raise ValueError(f"Expected a (rows, {ROOM_COUNT}) grid, got {grid.shape}")
        self.grid = grid
        self.depth = grid.shape[0]
        # Plain nested lists for the hot path, numpy scalar indexing is slow
        self._rows: List[List[int]] = grid.tolist()

    @classmethod
    def from_tokens(cls, tokens: Iterable[Token]) -> "Burrow":
        labels = [_to_label(t) for t in tokens]
        if not labels or len(labels) % ROOM_COUNT != 0:
            raise ValueError(
                f"Token count must be a non-zero multiple of {ROOM_COUNT}, got {len(labels)}"
            )
        grid = np.array(labels, dtype=int).reshape(-1, ROOM_COUNT)
        return cls(grid)

    def top(self, room: int, empty: int) -> int:
        """Label of the topmost amphipod in a room with ``empty`` free slots."""
        return self._rows[empty][room]

    def initial_state(self) -> State:
        state = State(
            hallway=[FREE] * HALLWAY_LENGTH,
            mobile=[0] * ROOM_COUNT,
            empty=[0] * ROOM_COUNT,
            cost=0,
            remaining=int(self.grid.size),
        )

        # Bottom-up: a piece is placed only if everything below it is too
        for row in reversed(self._rows):
            for room, label in enumerate(row):
                if label == room and state.mobile[room] == 0:
                    state.remaining -= 1
                else:
                    state.mobile[room] += 1

        return state

    def __str__(self) -> str:
        lines = ["#" * (HALLWAY_LENGTH + 2), "#" + "." * HALLWAY_LENGTH + "#"]
        for i, row in enumerate(self._rows):
            cells = "#".join(Amphipod(v).name for v in row)
            lines.append(f"###{cells}###" if i == 0 else f"  #{cells}#")
        lines.append("  " + "#" * (2 * ROOM_COUNT + 1))
        return "\n".join(lines)


def _to_label(token: Token) -> int:
    if isinstance(token, str):
        return int(Amphipod.from_letter(token))
    return int(Amphipod(token))


def encode(tokens: Iterable[Token]) -> Tuple[Burrow, State]:
    """Encode a row-major token sequence into its burrow and initial state."""
    burrow = Burrow.from_tokens(tokens)
    return burrow, burrow.initial_state()
