# src/labsnake/levels.py
# Level catalog: a fixed table of generation parameters expanded into levels.
# Levels ship as code, so rebuilding the table must reproduce identical grids.

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Iterable, Optional, Tuple

from .grid import Cell, Grid
from .mapgen.calibrate import UNREACHABLE, derive_budget, shortest_path_length
from .mapgen.generator import generate_grid

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LevelConfig:
    logical_w: int
    logical_h: int
    seed: int
    slack: float
    label: str


@dataclass(frozen=True)
class Level:
    id: int
    label: str
    grid: Grid
    entry: Cell
    exit: Cell
    max_moves: int
    shortest: int
    rows: int
    cols: int


def _cfg(size: int, seed: int, slack: float, label: str) -> LevelConfig:
    return LevelConfig(size, size, seed, slack, label)


# Six tiers of five. Slack shrinks as the mazes grow; 0.00 means the
# optimal path is the only winning path.
LEVEL_CONFIGS: Tuple[LevelConfig, ...] = (
    _cfg(5, 42, 0.60, "First Steps"),
    _cfg(5, 137, 0.50, "Easy Path"),
    _cfg(5, 256, 0.40, "Gentle Curves"),
    _cfg(5, 389, 0.35, "Warming Up"),
    _cfg(5, 512, 0.30, "Open Field"),

    _cfg(6, 623, 0.30, "The Garden"),
    _cfg(6, 741, 0.25, "Winding Way"),
    _cfg(6, 867, 0.20, "Fork Road"),
    _cfg(6, 933, 0.15, "Twisted Path"),
    _cfg(6, 1042, 0.12, "Narrow Escape"),

    _cfg(7, 1111, 0.15, "The Labyrinth"),
    _cfg(7, 1234, 0.12, "Deep Tunnels"),
    _cfg(7, 1389, 0.10, "Dark Corridors"),
    _cfg(7, 1456, 0.08, "Lost Passage"),
    _cfg(7, 1567, 0.05, "Ancient Ruins"),

    _cfg(8, 1678, 0.10, "The Dungeon"),
    _cfg(8, 1789, 0.07, "Crystal Cave"),
    _cfg(8, 1890, 0.05, "Iron Maze"),
    _cfg(8, 1945, 0.03, "Shadow Keep"),
    _cfg(8, 2020, 0.01, "Precision"),

    _cfg(9, 2111, 0.06, "Expert Trial"),
    _cfg(9, 2222, 0.04, "Mind Bender"),
    _cfg(9, 2345, 0.02, "Razor Edge"),
    _cfg(9, 2456, 0.01, "No Mercy"),
    _cfg(9, 2567, 0.00, "Perfect Path"),

    _cfg(10, 2678, 0.03, "Master Class"),
    _cfg(10, 2789, 0.02, "Grand Maze"),
    _cfg(10, 2890, 0.01, "Final Frontier"),
    _cfg(10, 2945, 0.00, "Omega"),
    _cfg(10, 3000, 0.00, "Serpent Master"),
)

TIERS = ("easy", "medium", "hard", "expert", "master", "grandmaster")
LEVELS_PER_TIER = 5


def build_level(level_id: int, cfg: LevelConfig) -> Level:
    if cfg.slack < 0:
        raise ValueError(f"level {level_id}: slack must be >= 0, got {cfg.slack}")

    grid = generate_grid(cfg.logical_w, cfg.logical_h, cfg.seed)
    entry = (1, 1)
    exit = (grid.rows - 2, grid.cols - 2)

    shortest = shortest_path_length(grid, entry, exit)
    if shortest == UNREACHABLE:
        logger.error("level %d (%s): exit %s unreachable from %s", level_id, cfg.label, exit, entry)
        raise RuntimeError(f"level {level_id}: exit unreachable; generator invariant broken")

    max_moves = derive_budget(shortest, cfg.slack)
    logger.debug(
        "level %d %r: %dx%d seed=%d shortest=%d budget=%d",
        level_id, cfg.label, cfg.logical_w, cfg.logical_h, cfg.seed, shortest, max_moves,
    )
    return Level(
        id=level_id,
        label=cfg.label,
        grid=grid,
        entry=entry,
        exit=exit,
        max_moves=max_moves,
        shortest=shortest,
        rows=grid.rows,
        cols=grid.cols,
    )


def build_catalog(configs: Iterable[LevelConfig]) -> Tuple[Level, ...]:
    levels = tuple(build_level(i, cfg) for i, cfg in enumerate(configs, start=1))
    logger.debug("catalog built: %d levels", len(levels))
    return levels


@lru_cache(maxsize=1)
def default_catalog() -> Tuple[Level, ...]:
    return build_catalog(LEVEL_CONFIGS)


def get_level(catalog: Tuple[Level, ...], level_id: int) -> Level:
    if not 1 <= level_id <= len(catalog):
        raise KeyError(f"no level with id {level_id}")
    return catalog[level_id - 1]


def next_level_id(catalog: Tuple[Level, ...], level_id: int) -> Optional[int]:
    return level_id + 1 if level_id < len(catalog) else None


def tier_for(level_id: int) -> str:
    idx = (level_id - 1) // LEVELS_PER_TIER
    return TIERS[min(max(idx, 0), len(TIERS) - 1)]
