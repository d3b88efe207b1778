from typing import Dict, Optional

from ..burrow.state import Key


class VisitedStore:
    """Cheapest cost at which each board configuration has been reached."""

    def __init__(self):
        self._costs: Dict[Key, int] = {}
        self.dominated = 0

    def offer(self, key: Key, cost: int) -> bool:
        """Record ``cost`` for ``key`` if it improves on what is stored.

        Returns False when the configuration was already reached at a cost
        lower or equal, in which case the branch should be dropped.
        """
        stored = self._costs.get(key)
        if stored is not None and cost >= stored:
            self.dominated += 1
            return False
        self._costs[key] = cost
        return True

    def get(self, key: Key) -> Optional[int]:
        return self._costs.get(key)

    def __contains__(self, key: Key) -> bool:
        return key in self._costs

    def __len__(self) -> int:
        return len(self._costs)
