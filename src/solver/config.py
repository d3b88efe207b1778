"""
Configuration for the branch-and-bound search.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class SearchConfig:
    """Configuration for the branch-and-bound search."""

    # Pruning refinements
    lower_bound: bool = False  # Admissible per-room fill cost, never changes the result
    forecast: bool = False  # Non-admissible: may miss the optimum, see PruningPolicy

    # Optional wall-clock cutoff, checked between pops (None = exhaustive)
    timeout_ms: Optional[float] = None

    # Progress log interval, in popped states
    log_every: int = 100_000

    @classmethod
    def experimental(cls, **kwargs) -> "SearchConfig":
        """Both refinements on, as the CLI experimental flag does."""
        return cls(lower_bound=True, forecast=True, **kwargs)
