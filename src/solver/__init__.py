"""
Branch-and-bound solver for the amphipod burrow.

Finds the minimum energy needed to move every amphipod into its own room.
"""

from .config import SearchConfig
from .pruning import PruningPolicy, fill_cost_floor
from .solver import BranchAndBoundSolver, SearchContext, SearchResult
from .visited import VisitedStore

__all__ = [
    "BranchAndBoundSolver",
    "PruningPolicy",
    "SearchConfig",
    "SearchContext",
    "SearchResult",
    "VisitedStore",
    "fill_cost_floor",
]
