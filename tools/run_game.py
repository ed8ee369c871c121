# tools/run_game.py
# Playable runner: catalog + session state machine + progress file.
# - Arrows / WASD move, R resets, N goes to the next level after a win
# - PageDown / PageUp go to the next / previous unlocked level
# - Mouse drags are treated as swipes
# - Esc quits

from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pygame

from labsnake.config import Settings
from labsnake.engine.state import Status, apply_move, create_session, reset
from labsnake.levels import default_catalog, get_level, next_level_id
from labsnake.logging_config import configure_logging
from labsnake.progress import ProgressFile, record_completion
from labsnake.render.board import BoardRenderer
from labsnake.ui.controls import classify_swipe, direction_for_key, is_reset_key, page_step
from labsnake.ui.hud import HudState, render_hud

logger = logging.getLogger("labsnake.run_game")


def first_open_level(progress, catalog) -> int:
    for lvl in catalog:
        if progress.is_unlocked(lvl.id) and not progress.is_completed(lvl.id):
            return lvl.id
    return 1


def main() -> None:
    settings = Settings.from_env()
    ap = argparse.ArgumentParser()
    ap.add_argument("--level", type=int, default=0, help="Start level (default: first unfinished)")
    ap.add_argument("--tile", type=int, default=settings.tile_size, help="Tile size in pixels")
    ap.add_argument("--progress", type=Path, default=settings.progress_path, help="Progress JSON path")
    ap.add_argument("--log-level", default=settings.log_level)
    args = ap.parse_args()
    configure_logging(args.log_level.upper())

    catalog = default_catalog()
    store = ProgressFile(args.progress)
    progress = store.load()

    def on_win(level_id: int) -> None:
        nonlocal progress
        progress = record_completion(progress, level_id)
        store.save(progress)
        logger.info("level %d complete; unlocked %s", level_id, progress.unlocked)

    level_id = args.level or first_open_level(progress, catalog)
    session = create_session(get_level(catalog, level_id), on_win=on_win)

    pygame.init()
    clock = pygame.time.Clock()
    board = BoardRenderer(args.tile)
    bar_h = args.tile + args.tile // 2

    def open_window():
        w, h = board.size_for(session.level.grid)
        pygame.display.set_caption(f"Lab Snake - Level {session.level.id}: {session.level.label}")
        return pygame.display.set_mode((w, h + bar_h))

    def switch_to(new_id: int):
        nonlocal session
        session = create_session(get_level(catalog, new_id), on_win=on_win)
        return open_window()

    screen = open_window()
    drag_start = None
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                name = pygame.key.name(ev.key)
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif is_reset_key(name):
                    reset(session)
                elif ev.key == pygame.K_n and session.status is Status.WON:
                    nxt = next_level_id(catalog, session.level.id)
                    if nxt is not None:
                        screen = switch_to(nxt)
                elif page_step(name):
                    cand = session.level.id + page_step(name)
                    if 1 <= cand <= len(catalog) and progress.is_unlocked(cand):
                        screen = switch_to(cand)
                else:
                    d = direction_for_key(name)
                    if d is not None:
                        apply_move(session, d)
            elif ev.type == pygame.MOUSEBUTTONDOWN and ev.button == 1:
                drag_start = (ev.pos, pygame.time.get_ticks())
            elif ev.type == pygame.MOUSEBUTTONUP and ev.button == 1 and drag_start:
                (x0, y0), t0 = drag_start
                drag_start = None
                d = classify_swipe(ev.pos[0] - x0, ev.pos[1] - y0, pygame.time.get_ticks() - t0)
                if d is not None:
                    apply_move(session, d)

        lvl = session.level
        screen.fill((0, 0, 0))
        board.draw_grid(screen, lvl.grid)
        board.draw_markers(screen, lvl.entry, lvl.exit)
        board.draw_snake(screen, session.path, session.facing)
        w, h = board.size_for(lvl.grid)
        render_hud(screen, (0, h), w, bar_h, HudState.from_session(session))

        pygame.display.flip()
        clock.tick(60)

    pygame.quit()


if __name__ == "__main__":
    main()
