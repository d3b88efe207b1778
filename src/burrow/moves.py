from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from .amphipod import FREE, PARKING_SPOTS, ROOM_COUNT, WEIGHTS, room_column
from .encoder import Burrow
from .state import State


class ReduceOutcome(Enum):
    OPEN = "open"
    SOLVED = "solved"
    PRUNED = "pruned"


@dataclass(frozen=True)
class Move:
    """Room to hallway move, the only branching move."""

    room: int
    spot: int
    label: int
    cost: int


class MoveGenerator:
    """Legal moves for one burrow.

    Moves into a room are applied in place because they are always part of an
    optimal solution once possible. Only parking moves branch.
    """

    def __init__(self, burrow: Burrow):
        self.burrow = burrow

    def hallway_to_room(self, state: State, spot: int) -> bool:
        """Send the amphipod parked at ``spot`` home if its room is ready."""
        label = state.hallway[spot]
        if label == FREE:
            return False

        dst = room_column(label)
        if state.mobile[label] != 0 or not state.path_clear(spot, dst):
            return False

        state.cost += (abs(dst - spot) + state.empty[label]) * WEIGHTS[label]
        state.hallway[spot] = FREE
        state.empty[label] -= 1
        state.remaining -= 1
        return True

    def room_to_room(self, state: State, room: int) -> bool:
        """Move the top amphipod of ``room`` straight into its own room."""
        if state.mobile[room] == 0:
            return False

        row = state.empty[room]
        label = self.burrow.top(room, row)
        src = room_column(room)
        dst = room_column(label)
        if state.mobile[label] != 0 or not state.path_clear(src, dst):
            return False

        state.cost += (abs(dst - src) + row + 1 + state.empty[label]) * WEIGHTS[label]
        state.empty[room] += 1
        state.mobile[room] -= 1
        state.empty[label] -= 1
        state.remaining -= 1
        return True

    def reduce(self, state: State, target: Optional[int] = None) -> ReduceOutcome:
        """Apply forced moves in place until none is left.

        Stops early with PRUNED as soon as the cost reaches ``target`` and with
        SOLVED once the last amphipod is home; its move is already paid for.
        """
        if target is not None and state.cost >= target:
            return ReduceOutcome.PRUNED
        if state.remaining == 0:
            return ReduceOutcome.SOLVED

        progress = True
        while progress:
            progress = False

            for spot in PARKING_SPOTS:
                if self.hallway_to_room(state, spot):
                    outcome = self._check(state, target)
                    if outcome is not ReduceOutcome.OPEN:
                        return outcome
                    progress = True

            for room in range(ROOM_COUNT):
                if self.room_to_room(state, room):
                    outcome = self._check(state, target)
                    if outcome is not ReduceOutcome.OPEN:
                        return outcome
                    progress = True

        return ReduceOutcome.OPEN

    @staticmethod
    def _check(state: State, target: Optional[int]) -> ReduceOutcome:
        if target is not None and state.cost >= target:
            return ReduceOutcome.PRUNED
        if state.remaining == 0:
            return ReduceOutcome.SOLVED
        return ReduceOutcome.OPEN

    def parking_moves(self, state: State) -> Iterator[Move]:
        for room in range(ROOM_COUNT):
            if state.mobile[room] == 0:
                continue

            row = state.empty[room]
            label = self.burrow.top(room, row)
            src = room_column(room)
            for spot in PARKING_SPOTS:
                if state.hallway[spot] == FREE and state.path_clear(src, spot):
                    cost = (abs(spot - src) + row + 1) * WEIGHTS[label]
                    yield Move(room=room, spot=spot, label=label, cost=cost)

    @staticmethod
    def park(state: State, move: Move) -> State:
        """Return a copy of ``state`` with ``move`` applied."""
        next_state = state.copy()
        next_state.hallway[move.spot] = move.label
        next_state.empty[move.room] += 1
        next_state.mobile[move.room] -= 1
        next_state.cost += move.cost
        return next_state
