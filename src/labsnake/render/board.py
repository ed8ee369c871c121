# src/labsnake/render/board.py
from __future__ import annotations

from functools import lru_cache
from typing import Sequence, Tuple

import pygame

from ..directions import Direction
from ..grid import Cell, Grid
from ..tiles import is_wall

RGB = Tuple[int, int, int]

WALL_COLOR: RGB = (40, 36, 64)
FLOOR_COLOR: RGB = (14, 14, 22)
ENTRY_COLOR: RGB = (60, 120, 255)
EXIT_COLOR: RGB = (255, 200, 40)
BODY_COLOR: RGB = (40, 200, 90)
HEAD_COLOR: RGB = (90, 255, 140)
EYE_COLOR: RGB = (10, 10, 10)


def body_color(i: int, n: int) -> RGB:
    """Fade from dim tail to bright neck."""
    if n <= 1:
        return BODY_COLOR
    t = i / (n - 1)
    r, g, b = BODY_COLOR
    return (int(r * (0.5 + 0.5 * t)), int(g * (0.5 + 0.5 * t)), int(b * (0.5 + 0.5 * t)))


class BoardRenderer:
    """
    Draws a maze grid plus the snake path:
      - walls/floor from the occupancy grid
      - entry and exit markers
      - body segments and a head with eyes pointing along `facing`
    """
    def __init__(self, tile_size: int):
        self.tile_size = tile_size

    @lru_cache(maxsize=4)
    def _cell_surface(self, color: RGB) -> pygame.Surface:
        img = pygame.Surface((self.tile_size, self.tile_size))
        img.fill(color)
        return img

    def size_for(self, grid: Grid) -> Tuple[int, int]:
        return grid.cols * self.tile_size, grid.rows * self.tile_size

    def _rect(self, cell: Cell, inset: int = 0) -> pygame.Rect:
        r, c = cell
        s = self.tile_size
        return pygame.Rect(c * s + inset, r * s + inset, s - 2 * inset, s - 2 * inset)

    def draw_grid(self, screen: pygame.Surface, grid: Grid, origin: Tuple[int, int] = (0, 0)) -> None:
        ox, oy = origin
        s = self.tile_size
        for r, row in enumerate(grid.cells):
            for c, t in enumerate(row):
                color = WALL_COLOR if is_wall(t) else FLOOR_COLOR
                screen.blit(self._cell_surface(color), (ox + c * s, oy + r * s))

    def draw_markers(self, screen: pygame.Surface, entry: Cell, exit: Cell, origin: Tuple[int, int] = (0, 0)) -> None:
        inset = max(2, self.tile_size // 5)
        for cell, color in ((entry, ENTRY_COLOR), (exit, EXIT_COLOR)):
            pygame.draw.rect(screen, color, self._rect(cell, inset).move(origin), border_radius=inset)

    def draw_snake(
        self,
        screen: pygame.Surface,
        path: Sequence[Cell],
        facing: Direction,
        origin: Tuple[int, int] = (0, 0),
    ) -> None:
        if not path:
            return
        inset = max(1, self.tile_size // 8)
        n = len(path)
        for i, cell in enumerate(path[:-1]):
            pygame.draw.rect(screen, body_color(i, n), self._rect(cell, inset).move(origin), border_radius=inset)

        head = self._rect(path[-1], inset // 2).move(origin)
        pygame.draw.rect(screen, HEAD_COLOR, head, border_radius=inset * 2)
        self._draw_eyes(screen, head, facing)

    def _draw_eyes(self, screen: pygame.Surface, head: pygame.Rect, facing: Direction) -> None:
        dr, dc = facing.offset
        cx, cy = head.center
        # push eyes toward the front, spread them across the side axis
        fx, fy = cx + dc * head.width // 4, cy + dr * head.height // 4
        sx, sy = dr * head.width // 5, dc * head.height // 5
        radius = max(1, head.width // 10)
        for sign in (-1, 1):
            pygame.draw.circle(screen, EYE_COLOR, (fx + sign * sx, fy + sign * sy), radius)
