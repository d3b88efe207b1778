"""
Optional pruning refinements for the branch-and-bound search.
"""

from typing import Optional

import numpy as np

from ..burrow.amphipod import ROOM_COUNT, WEIGHTS, room_column
from ..burrow.moves import Move
from ..burrow.state import State
from .config import SearchConfig

# Cheapest horizontal (+ exit) steps for the i-th amphipod entering a room: two
# parking spots sit next to every entrance, the end rooms have one more spot two
# steps away, anything else is at least three steps (or two plus a room exit).
ENTRY_EXTRAS = (1, 1, 2)
FAR_EXTRA = 3


def fill_cost_floor(depth: int) -> np.ndarray:
    """Lower bound on the energy needed to fill k open slots of each room.

    Returns an array of shape (ROOM_COUNT, depth + 1) indexed by room label and
    k. The i-th slot from the top costs at least i steps down plus its extra.
    For 4 rows this is ``(0, 2, 5, 10, 17)`` times the weight.
    """
    extras = np.full(depth, FAR_EXTRA, dtype=np.int64)
    head = min(depth, len(ENTRY_EXTRAS))
    extras[:head] = ENTRY_EXTRAS[:head]
    per_slot = np.arange(1, depth + 1, dtype=np.int64) + extras
    base = np.concatenate(([0], np.cumsum(per_slot)))
    return np.outer(np.array(WEIGHTS, dtype=np.int64), base)


class PruningPolicy:
    """Discards branches that cannot beat the best known solution.

    ``lower_bound`` sums, per room, the cheapest way to fill its open slots
    (misplaced plus empty). It never overestimates, so it never changes the
    result.

    ``forecast`` also charges a parked amphipod the steps needed to get next to
    its own room. Those steps may already be covered by the room bound, so the
    sum can overestimate and prune the branch that leads to the optimum. The
    search then still returns a real solution cost, just not always the
    cheapest one. Treat it as a heuristic and compare with a run without it.
    """

    def __init__(self, config: SearchConfig, depth: int):
        self.use_lower_bound = config.lower_bound
        self.use_forecast = config.forecast
        self.table = fill_cost_floor(depth).tolist()

    @property
    def enabled(self) -> bool:
        return self.use_lower_bound or self.use_forecast

    def bound(self, state: State) -> int:
        if not self.use_lower_bound:
            return 0
        return sum(
            self.table[room][state.mobile[room] + state.empty[room]]
            for room in range(ROOM_COUNT)
        )

    def forecast(self, move: Move) -> int:
        if not self.use_forecast:
            return 0
        return (abs(move.spot - room_column(move.label)) - 1) * WEIGHTS[move.label]

    def admits(
        self, state: State, move: Move, bound: int, target: Optional[int]
    ) -> bool:
        """Whether the branch produced by ``move`` can still improve ``target``."""
        if target is None:
            return True
        return state.cost + move.cost + bound + self.forecast(move) < target
