# src/labsnake/mapgen/carve.py
# Iterative recursive-backtracking carve over logical cells.
# Logical cell (r, c) sits at grid index (2r+1, 2c+1); passages sit between them.

from typing import List, Tuple

from ..grid import Cell, Grid, grid_dims, logical_to_grid
from ..rng import Mulberry32
from ..tiles import OPEN, WALL

# Candidate order matters for reproducibility: up, down, left, right.
LOGICAL_STEPS: Tuple[Cell, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def empty_wall_grid(logical_w: int, logical_h: int) -> List[List[int]]:
    """Return a fresh (2H+1)x(2W+1) grid filled with walls."""
    rows, cols = grid_dims(logical_w, logical_h)
    return [[WALL for _ in range(cols)] for _ in range(rows)]


def _unvisited_neighbours(
    r: int, c: int, visited: List[List[bool]]
) -> List[Tuple[int, int, int, int]]:
    h = len(visited)
    w = len(visited[0])
    out = []
    for dr, dc in LOGICAL_STEPS:
        nr, nc = r + dr, c + dc
        if 0 <= nr < h and 0 <= nc < w and not visited[nr][nc]:
            out.append((nr, nc, dr, dc))
    return out


def carve_maze(logical_w: int, logical_h: int, rng: Mulberry32) -> Grid:
    """
    Carve a perfect maze (spanning tree over logical cells) and freeze it.
    Every logical cell is visited exactly once, so the result is connected
    and acyclic.
    """
    grid = empty_wall_grid(logical_w, logical_h)
    visited = [[False] * logical_w for _ in range(logical_h)]

    stack: List[Cell] = [(0, 0)]
    visited[0][0] = True
    sr, sc = logical_to_grid(0, 0)
    grid[sr][sc] = OPEN

    while stack:
        r, c = stack[-1]
        candidates = _unvisited_neighbours(r, c, visited)
        if not candidates:
            stack.pop()
            continue

        nr, nc, dr, dc = rng.choice(candidates)
        gr, gc = logical_to_grid(r, c)
        # Wall between the two rooms, then the room itself
        grid[gr + dr][gc + dc] = OPEN
        ngr, ngc = logical_to_grid(nr, nc)
        grid[ngr][ngc] = OPEN

        visited[nr][nc] = True
        stack.append((nr, nc))

    return Grid.from_rows(grid)
