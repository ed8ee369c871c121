# tests/test_calibrate.py
import pytest

from labsnake.directions import Direction
from labsnake.grid import Grid
from labsnake.mapgen.calibrate import (
    UNREACHABLE, derive_budget, path_directions, shortest_path_length, solve_path,
)
from labsnake.mapgen.generator import generate_grid

# 0 = open, 1 = wall
LOOP = Grid.from_rows([
    [1, 1, 1, 1, 1],
    [1, 0, 0, 0, 1],
    [1, 0, 1, 0, 1],
    [1, 0, 0, 0, 1],
    [1, 1, 1, 1, 1],
])

SPLIT = Grid.from_rows([
    [1, 1, 1, 1, 1],
    [1, 0, 1, 0, 1],
    [1, 1, 1, 1, 1],
])

def test_bfs_distance_on_hand_grid():
    assert shortest_path_length(LOOP, (1, 1), (3, 3)) == 4
    assert shortest_path_length(LOOP, (1, 1), (1, 3)) == 2
    assert shortest_path_length(LOOP, (1, 1), (1, 1)) == 0

def test_unreachable_and_blocked_entry():
    assert shortest_path_length(SPLIT, (1, 1), (1, 3)) == UNREACHABLE
    assert solve_path(SPLIT, (1, 1), (1, 3)) is None
    assert shortest_path_length(LOOP, (0, 0), (1, 1)) == UNREACHABLE
    assert solve_path(LOOP, (0, 0), (1, 1)) is None

def test_solve_path_endpoints_and_adjacency():
    p = solve_path(LOOP, (1, 1), (3, 3))
    assert p[0] == (1, 1) and p[-1] == (3, 3)
    assert len(p) - 1 == 4
    for (r0, c0), (r1, c1) in zip(p, p[1:]):
        assert abs(r0 - r1) + abs(c0 - c1) == 1
        assert LOOP.is_open(r1, c1)

def test_generated_mazes_always_reach_exit():
    for size in range(1, 11):
        for seed in (1, 42, 777):
            g = generate_grid(size, size, seed)
            exit = (g.rows - 2, g.cols - 2)
            d = shortest_path_length(g, (1, 1), exit)
            assert d != UNREACHABLE, f"{size}x{size} seed {seed}"
            assert len(solve_path(g, (1, 1), exit)) == d + 1
            # corner to corner needs at least the Manhattan distance
            assert d >= (g.rows - 3) + (g.cols - 3)

def test_derive_budget():
    assert derive_budget(10, 0.5) == 15
    assert derive_budget(10, 0.0) == 10
    assert derive_budget(0, 0.6) == 0
    assert derive_budget(7, 0.1) == 8     # ceil(0.7)
    assert derive_budget(20, 0.25) == 25

def test_derive_budget_rejects_bad_input():
    with pytest.raises(ValueError):
        derive_budget(-1, 0.5)
    with pytest.raises(ValueError):
        derive_budget(10, -0.1)

def test_path_directions():
    p = [(1, 1), (1, 2), (2, 2), (2, 1), (1, 1)]
    assert path_directions(p) == [Direction.RIGHT, Direction.DOWN, Direction.LEFT, Direction.UP]
    assert path_directions([(1, 1)]) == []
    with pytest.raises(ValueError):
        path_directions([(1, 1), (3, 1)])
