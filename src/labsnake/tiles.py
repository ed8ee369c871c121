# Occupancy values for the maze grid

OPEN = 0
WALL = 1


def is_open(tile: int) -> bool:
    return tile == OPEN


def is_wall(tile: int) -> bool:
    return tile == WALL
