import numpy as np

from src.burrow.amphipod import Amphipod
from src.burrow.encoder import encode
from src.burrow.moves import Move
from src.solver.config import SearchConfig
from src.solver.pruning import PruningPolicy, fill_cost_floor


class TestFillCostFloor:
    def test_four_rows(self):
        table = fill_cost_floor(4)

        assert table.shape == (4, 5)
        np.testing.assert_array_equal(table[0], [0, 2, 5, 10, 17])
        np.testing.assert_array_equal(table[3], [0, 2000, 5000, 10000, 17000])

    def test_two_rows(self):
        np.testing.assert_array_equal(fill_cost_floor(2)[1], [0, 20, 50])

    def test_deeper_rooms_use_far_extra(self):
        np.testing.assert_array_equal(fill_cost_floor(5)[0], [0, 2, 5, 10, 17, 25])


class TestPruningPolicy:
    def test_disabled_by_default(self):
        _, state = encode("BCBDADCA")
        policy = PruningPolicy(SearchConfig(), depth=2)
        move = Move(room=0, spot=10, label=Amphipod.B, cost=90)

        assert not policy.enabled
        assert policy.bound(state) == 0
        assert policy.forecast(move) == 0

    def test_lower_bound(self):
        _, state = encode("BCBDADCA")
        policy = PruningPolicy(SearchConfig(lower_bound=True), depth=2)

        # Open slots per room: 1, 2, 1, 2
        assert policy.bound(state) == 2 + 50 + 200 + 5000

    def test_forecast(self):
        policy = PruningPolicy(SearchConfig(forecast=True), depth=2)

        far = Move(room=0, spot=10, label=Amphipod.B, cost=90)
        near = Move(room=0, spot=3, label=Amphipod.B, cost=20)

        assert policy.forecast(far) == 5 * 10
        assert policy.forecast(near) == 0

    def test_admits(self):
        _, state = encode("BACDABCD")
        policy = PruningPolicy(SearchConfig(lower_bound=True), depth=2)
        move = Move(room=1, spot=5, label=Amphipod.A, cost=2)
        bound = policy.bound(state)

        assert bound == 2 + 20
        assert policy.admits(state, move, bound, target=None)
        assert policy.admits(state, move, bound, target=25)
        assert not policy.admits(state, move, bound, target=24)

    def test_admits_with_forecast(self):
        _, state = encode("BACDABCD")
        policy = PruningPolicy(SearchConfig.experimental(), depth=2)
        # Parked two cells past the one next to room A
        move = Move(room=1, spot=5, label=Amphipod.A, cost=2)
        bound = policy.bound(state)

        assert policy.admits(state, move, bound, target=27)
        assert not policy.admits(state, move, bound, target=26)
