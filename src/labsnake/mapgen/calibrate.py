# src/labsnake/mapgen/calibrate.py
# Difficulty calibration: BFS distance between entry and exit, plus move budget.

from __future__ import annotations

import math
from collections import deque
from typing import Dict, List, Optional

from ..directions import Direction, direction_between
from ..grid import Cell, Grid

UNREACHABLE = -1

# BFS expansion order: up, down, left, right
_STEPS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _bfs_parents(grid: Grid, entry: Cell, exit: Cell) -> Optional[Dict[Cell, Optional[Cell]]]:
    if not grid.is_open(*entry):
        return None
    parents: Dict[Cell, Optional[Cell]] = {entry: None}
    queue = deque([entry])
    while queue:
        cur = queue.popleft()
        if cur == exit:
            return parents
        r, c = cur
        for dr, dc in _STEPS:
            nxt = (r + dr, c + dc)
            if nxt in parents or not grid.is_open(*nxt):
                continue
            parents[nxt] = cur
            queue.append(nxt)
    return None


def solve_path(grid: Grid, entry: Cell, exit: Cell) -> Optional[List[Cell]]:
    """Shortest open path from entry to exit, both endpoints included."""
    parents = _bfs_parents(grid, entry, exit)
    if parents is None:
        return None
    path: List[Cell] = []
    cur: Optional[Cell] = exit
    while cur is not None:
        path.append(cur)
        cur = parents[cur]
    path.reverse()
    return path


def shortest_path_length(grid: Grid, entry: Cell, exit: Cell) -> int:
    """Number of moves on the shortest path, or UNREACHABLE (-1)."""
    if not grid.is_open(*entry):
        return UNREACHABLE
    dist = {entry: 0}
    queue = deque([entry])
    while queue:
        cur = queue.popleft()
        if cur == exit:
            return dist[cur]
        r, c = cur
        for dr, dc in _STEPS:
            nxt = (r + dr, c + dc)
            if nxt in dist or not grid.is_open(*nxt):
                continue
            dist[nxt] = dist[cur] + 1
            queue.append(nxt)
    return UNREACHABLE


def derive_budget(shortest: int, slack: float) -> int:
    """shortest + ceil(shortest * slack)"""
    if shortest < 0:
        raise ValueError(f"shortest path length must be >= 0, got {shortest}")
    if slack < 0:
        raise ValueError(f"slack fraction must be >= 0, got {slack}")
    return shortest + math.ceil(shortest * slack)


def path_directions(path: List[Cell]) -> List[Direction]:
    out: List[Direction] = []
    for a, b in zip(path, path[1:]):
        d = direction_between(a, b)
        if d is None:
            raise ValueError(f"cells {a} and {b} are not adjacent")
        out.append(d)
    return out
