from dataclasses import dataclass
from typing import List, Sequence, Tuple

from .tiles import OPEN, WALL
from .tiles import is_open as _tile_open

Cell = Tuple[int, int]  # (row, col)


def grid_dims(logical_w: int, logical_h: int) -> Tuple[int, int]:
    """(rows, cols) of the occupancy grid for a logical maze size."""
    return 2 * logical_h + 1, 2 * logical_w + 1


def logical_to_grid(r: int, c: int) -> Cell:
    return 2 * r + 1, 2 * c + 1


@dataclass(frozen=True)
class Grid:
    cells: Tuple[Tuple[int, ...], ...]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        return cls(cells=tuple(tuple(row) for row in rows))

    @property
    def rows(self) -> int:
        return len(self.cells)

    @property
    def cols(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> int:
        return self.cells[row][col]

    def is_open(self, row: int, col: int) -> bool:
        return self.in_bounds(row, col) and _tile_open(self.cells[row][col])

    def open_cells(self) -> List[Cell]:
        return [
            (r, c)
            for r, row in enumerate(self.cells)
            for c, t in enumerate(row)
            if t == OPEN
        ]

    def as_matrix(self) -> List[List[int]]:
        return [list(row) for row in self.cells]

    def to_text(self, wall: str = "#", floor: str = ".") -> str:
        return "\n".join(
            "".join(wall if t == WALL else floor for t in row) for row in self.cells
        )
