from enum import IntEnum
from typing import Tuple


class Amphipod(IntEnum):
    A = 0
    B = 1
    C = 2
    D = 3

    @property
    def weight(self) -> int:
        return WEIGHTS[self.value]

    @property
    def column(self) -> int:
        """Hallway column directly above this amphipod's destination room."""
        return room_column(self.value)

    @classmethod
    def from_letter(cls, letter: str) -> "Amphipod":
        try:
            return cls[letter]
        except KeyError:
            raise ValueError(f"Unknown amphipod label: {letter!r}") from None


ROOM_COUNT = 4
HALLWAY_LENGTH = 11

# Cells above the rooms (2, 4, 6, 8) can be crossed but never stopped in
PARKING_SPOTS: Tuple[int, ...] = (0, 1, 3, 5, 7, 9, 10)

WEIGHTS: Tuple[int, ...] = (1, 10, 100, 1000)

FREE = -1


def room_column(room: int) -> int:
    return (room + 1) * 2
