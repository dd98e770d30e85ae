"""Shared constants and enumerations for the crossword helper."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


EMPTY: Optional[str] = None

# Reusing one existing letter must outweigh any centering distance on a 50x50 grid.
INTERSECTION_WEIGHT = 100

MIN_GRID_SIZE = 5
MAX_GRID_SIZE = 50
DEFAULT_GRID_SIZE = 15
MIN_WORD_COUNT = 2

WILDCARD = "?"


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def is_horizontal(self) -> bool:
        return self is Direction.ACROSS

    @property
    def step(self) -> Tuple[int, int]:
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    @property
    def perpendicular(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS

    @classmethod
    def from_horizontal(cls, is_horizontal: bool) -> "Direction":
        return cls.ACROSS if is_horizontal else cls.DOWN


class ShiftDirection(str, Enum):
    """Directions in which the grid contents can be shifted."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def step(self) -> Tuple[int, int]:
        return _SHIFT_STEPS[self]


_SHIFT_STEPS = {
    ShiftDirection.UP: (-1, 0),
    ShiftDirection.DOWN: (1, 0),
    ShiftDirection.LEFT: (0, -1),
    ShiftDirection.RIGHT: (0, 1),
}


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols
