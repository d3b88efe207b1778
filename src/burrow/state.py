from dataclasses import dataclass, field
from typing import List, Tuple

from .amphipod import FREE, HALLWAY_LENGTH, ROOM_COUNT


@dataclass(frozen=True)
class Key:
    """Board configuration fingerprint, cost excluded."""

    hallway: Tuple[int, ...]
    mobile: Tuple[int, ...]
    empty: Tuple[int, ...]


@dataclass
class State:
    """One search node.

    Attributes:
        hallway: FREE or the label parked in each hallway cell
        mobile: misplaced amphipods left in each room
        empty: free slots at the entrance of each room
        cost: energy spent so far
        remaining: amphipods (rooms and hallway) not in their final spot
    """

    hallway: List[int] = field(default_factory=lambda: [FREE] * HALLWAY_LENGTH)
    mobile: List[int] = field(default_factory=lambda: [0] * ROOM_COUNT)
    empty: List[int] = field(default_factory=lambda: [0] * ROOM_COUNT)
    cost: int = 0
    remaining: int = 0

    def copy(self) -> "State":
        return State(
            hallway=self.hallway[:],
            mobile=self.mobile[:],
            empty=self.empty[:],
            cost=self.cost,
            remaining=self.remaining,
        )

    def key(self) -> Key:
        return Key(tuple(self.hallway), tuple(self.mobile), tuple(self.empty))

    @property
    def solved(self) -> bool:
        return self.remaining == 0

    def path_clear(self, src: int, dst: int) -> bool:
        """Check that every hallway cell strictly between src and dst is free."""
        if src > dst:
            src, dst = dst, src
        for cell in range(src + 1, dst):
            if self.hallway[cell] != FREE:
                return False
        return True

    def __str__(self) -> str:
        cells = "".join("." if v == FREE else "ABCD"[v] for v in self.hallway)
        return (
            f"#{cells}# mobile={self.mobile} empty={self.empty} "
            f"cost={self.cost} remaining={self.remaining}"
        )
