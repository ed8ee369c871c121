# src/labsnake/mapgen/generator.py
# Canonical maze generator: same (width, height, seed) -> same grid, bit for bit.

from ..grid import Grid
from ..rng import Mulberry32
from .carve import carve_maze


def validate_dims(logical_w: int, logical_h: int) -> None:
    for name, v in (("logical_w", logical_w), ("logical_h", logical_h)):
        if isinstance(v, bool) or not isinstance(v, int):
            raise ValueError(f"{name} must be an int, got {v!r}")
        if v < 1:
            raise ValueError(f"{name} must be >= 1, got {v}")


def generate_grid(logical_w: int, logical_h: int, seed: int) -> Grid:
    validate_dims(logical_w, logical_h)
    if isinstance(seed, bool) or not isinstance(seed, int):
        raise ValueError(f"seed must be an int, got {seed!r}")
    rng = Mulberry32(seed)
    return carve_maze(logical_w, logical_h, rng)
