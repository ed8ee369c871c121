from enum import Enum
from typing import Dict, Optional, Tuple

from .grid import Cell


class Direction(str, Enum):
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def offset(self) -> Tuple[int, int]:
        return OFFSETS[self]


# (drow, dcol)
OFFSETS: Dict[Direction, Tuple[int, int]] = {
    Direction.UP: (-1, 0),
    Direction.DOWN: (1, 0),
    Direction.LEFT: (0, -1),
    Direction.RIGHT: (0, 1),
}

_BY_OFFSET = {v: k for k, v in OFFSETS.items()}


def step(cell: Cell, direction: Direction) -> Cell:
    dr, dc = OFFSETS[direction]
    return cell[0] + dr, cell[1] + dc


def direction_between(a: Cell, b: Cell) -> Optional[Direction]:
    """Direction that moves a onto b, or None if they are not 4-adjacent."""
    return _BY_OFFSET.get((b[0] - a[0], b[1] - a[1]))
