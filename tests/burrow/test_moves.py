import pytest

from src.burrow.amphipod import FREE, PARKING_SPOTS, Amphipod
from src.burrow.encoder import encode
from src.burrow.moves import Move, MoveGenerator, ReduceOutcome
from src.burrow.state import State

# Room A holds B over A, room B holds A over B
SWAP = "BACDABCD"


class TestMoveGenerator:
    def create_swap(self):
        burrow, state = encode(SWAP)
        return MoveGenerator(burrow), state

    def test_initial_parking_moves(self):
        moves, state = self.create_swap()
        options = list(moves.parking_moves(state))

        assert len(options) == 2 * len(PARKING_SPOTS)
        assert Move(room=0, spot=3, label=Amphipod.B, cost=20) in options
        assert Move(room=0, spot=10, label=Amphipod.B, cost=90) in options
        assert Move(room=1, spot=5, label=Amphipod.A, cost=2) in options
        assert Move(room=1, spot=0, label=Amphipod.A, cost=5) in options

    def test_parking_respects_obstruction(self):
        moves, state = self.create_swap()
        state.hallway[3] = Amphipod.D

        spots = {}
        for move in moves.parking_moves(state):
            spots.setdefault(move.room, set()).add(move.spot)

        assert spots[0] == {0, 1}
        assert spots[1] == {5, 7, 9, 10}

    def test_no_parking_from_settled_rooms(self):
        burrow, state = encode("ABCDABCD")

        assert list(MoveGenerator(burrow).parking_moves(state)) == []

    def test_park_copies_state(self):
        moves, state = self.create_swap()
        parked = moves.park(state, Move(room=1, spot=5, label=Amphipod.A, cost=2))

        assert parked.hallway[5] == Amphipod.A
        assert parked.mobile == [1, 0, 0, 0]
        assert parked.empty == [0, 1, 0, 0]
        assert parked.cost == 2
        assert parked.remaining == state.remaining
        assert state.hallway[5] == FREE
        assert state.mobile == [1, 1, 0, 0]

    def test_forced_moves_step_by_step(self):
        moves, state = self.create_swap()
        state = moves.park(state, Move(room=1, spot=7, label=Amphipod.A, cost=4))

        # Room A still holds the B
        assert not moves.hallway_to_room(state, 7)
        assert not moves.hallway_to_room(state, 0)

        # B goes straight from room A to room B: 2 across, 1 up, 1 down
        assert moves.room_to_room(state, 0)
        assert state.cost == 4 + 40
        assert state.mobile == [0, 0, 0, 0]
        assert state.empty == [1, 0, 0, 0]
        assert state.remaining == 1

        # A walks 5 cells and drops 1
        assert moves.hallway_to_room(state, 7)
        assert state.cost == 4 + 40 + 6
        assert state.hallway[7] == FREE
        assert state.empty == [0, 0, 0, 0]
        assert state.remaining == 0

    def test_room_to_room_blocked(self):
        moves, state = self.create_swap()
        state = moves.park(state, Move(room=1, spot=3, label=Amphipod.A, cost=2))

        assert not moves.room_to_room(state, 0)
        assert not moves.room_to_room(state, 1)

    def test_hallway_to_room_blocked(self):
        moves, _ = self.create_swap()
        state = State(empty=[1, 0, 0, 0], remaining=2)
        state.hallway[5] = Amphipod.A
        state.hallway[3] = Amphipod.B

        assert not moves.hallway_to_room(state, 5)
        assert state.cost == 0

    def test_reduce_reaches_solution(self):
        moves, state = self.create_swap()
        state = moves.park(state, Move(room=1, spot=5, label=Amphipod.A, cost=2))

        assert moves.reduce(state) is ReduceOutcome.SOLVED
        assert state.cost == 46
        assert state.solved

    @pytest.mark.parametrize("target", [30, 46])
    def test_reduce_prunes_at_target(self, target):
        moves, state = self.create_swap()
        state = moves.park(state, Move(room=1, spot=5, label=Amphipod.A, cost=2))

        assert moves.reduce(state, target) is ReduceOutcome.PRUNED

    def test_reduce_without_forced_moves(self):
        moves, state = self.create_swap()
        before = state.copy()

        assert moves.reduce(state) is ReduceOutcome.OPEN
        assert state == before

    def test_reduce_solved_state(self):
        burrow, state = encode("ABCDABCD")

        assert MoveGenerator(burrow).reduce(state) is ReduceOutcome.SOLVED
        assert state.cost == 0
