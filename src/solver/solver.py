"""
Depth-first branch-and-bound search for the cheapest way to sort the burrow.
"""

import time
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ..burrow.encoder import Burrow
from ..burrow.moves import MoveGenerator, ReduceOutcome
from ..burrow.state import State
from ..util.logger import logger
from .config import SearchConfig
from .pruning import PruningPolicy
from .visited import VisitedStore


@dataclass
class SearchResult:
    """Result of one search."""

    cost: Optional[int]
    success: bool
    complete: bool
    states_explored: int
    branches_pushed: int
    branches_pruned: int
    branches_dominated: int
    bound_history: List[int]
    time_taken_ms: float


@dataclass
class SearchContext:
    """Mutable state of a single search, never shared between searches."""

    stack: List[State]
    visited: VisitedStore
    target: Optional[int] = None
    bound_history: List[int] = field(default_factory=list)
    states_explored: int = 0
    branches_pushed: int = 0
    branches_pruned: int = 0

    def offer_solution(self, cost: int) -> bool:
        if self.target is not None and cost >= self.target:
            return False
        self.target = cost
        self.bound_history.append(cost)
        return True


class BranchAndBoundSolver:
    """Branch-and-bound solver over burrow states."""

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        visited_factory: Callable[[], VisitedStore] = VisitedStore,
    ):
        """Initialize the solver.

        Args:
            config: Search configuration, defaults to an exhaustive search
            visited_factory: Builds the memo table of each search
        """
        self.config = config or SearchConfig()
        self.visited_factory = visited_factory
        self.logger = logger.bind(component="search")

    def solve(self, burrow: Burrow, state: Optional[State] = None) -> SearchResult:
        """Find the minimum energy needed to sort the burrow.

        Args:
            burrow: Initial room layout
            state: Starting state, defaults to the burrow's initial state

        Returns:
            SearchResult with ``cost`` None if no solution exists
        """
        start_time = time.time()

        if state is None:
            state = burrow.initial_state()

        moves = MoveGenerator(burrow)
        pruning = PruningPolicy(self.config, burrow.depth)
        context = SearchContext(stack=[state.copy()], visited=self.visited_factory())

        self.logger.info(
            f"Searching {burrow.depth}-row burrow, {state.remaining} amphipods to move"
        )

        complete = True
        while context.stack:
            if self._timed_out(start_time):
                self.logger.warning(
                    f"Timeout after {self.config.timeout_ms}ms, "
                    f"{len(context.stack)} states left unexplored"
                )
                complete = False
                break

            current = context.stack.pop()
            context.states_explored += 1
            self._expand(current, moves, pruning, context)

            if context.states_explored % self.config.log_every == 0:
                self.logger.debug(
                    f"{context.states_explored} states explored, "
                    f"stack={len(context.stack)} visited={len(context.visited)} "
                    f"target={context.target}"
                )

        elapsed_ms = (time.time() - start_time) * 1000
        self.logger.info(
            f"Search finished in {elapsed_ms:.1f}ms: cost={context.target} "
            f"explored={context.states_explored} pushed={context.branches_pushed}"
        )

        return SearchResult(
            cost=context.target,
            success=context.target is not None,
            complete=complete,
            states_explored=context.states_explored,
            branches_pushed=context.branches_pushed,
            branches_pruned=context.branches_pruned,
            branches_dominated=context.visited.dominated,
            bound_history=context.bound_history,
            time_taken_ms=elapsed_ms,
        )

    def _expand(
        self,
        state: State,
        moves: MoveGenerator,
        pruning: PruningPolicy,
        context: SearchContext,
    ) -> None:
        """Reduce a popped state, then push its parking branches."""
        outcome = moves.reduce(state, context.target)

        if outcome is ReduceOutcome.SOLVED:
            if context.offer_solution(state.cost):
                self.logger.debug(
                    f"New best cost {state.cost} after "
                    f"{context.states_explored} states"
                )
            return
        if outcome is ReduceOutcome.PRUNED:
            return

        # The room bound does not change with the parked amphipod
        bound = pruning.bound(state) if context.target is not None else 0

        for move in moves.parking_moves(state):
            if not pruning.admits(state, move, bound, context.target):
                context.branches_pruned += 1
                continue

            next_state = moves.park(state, move)
            if context.visited.offer(next_state.key(), next_state.cost):
                context.stack.append(next_state)
                context.branches_pushed += 1

    def _timed_out(self, start_time: float) -> bool:
        if self.config.timeout_ms is None:
            return False
        return (time.time() - start_time) * 1000 > self.config.timeout_ms
