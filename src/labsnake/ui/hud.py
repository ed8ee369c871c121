from dataclasses import dataclass
from typing import Optional

import pygame

from ..engine.state import SessionState, Status


@dataclass
class HudState:
    level_id: int
    label: str
    moves_left: int
    max_moves: int
    status: Status

    @classmethod
    def from_session(cls, session: SessionState) -> "HudState":
        lvl = session.level
        return cls(lvl.id, lvl.label, session.moves_left, lvl.max_moves, session.status)


def result_message(hud: HudState) -> Optional[str]:
    used = hud.max_moves - hud.moves_left
    if hud.status is Status.WON:
        return f"Level complete! {used}/{hud.max_moves} moves  [N] next  [R] retry"
    if hud.status is Status.LOST:
        return f"Out of moves ({used}/{hud.max_moves})  [R] retry"
    return None


def render_hud(screen, origin_xy: tuple, width: int, height: int, hud: HudState) -> None:
    """
    Draw a one-line status bar: level, label and move counter, with the
    result message once the session is over. Does not touch session state.
    """
    ox, oy = origin_xy
    pygame.draw.rect(screen, (24, 24, 24), pygame.Rect(ox, oy, width, height))
    font = pygame.font.SysFont(None, max(14, height * 2 // 3))

    left = f"{hud.level_id:02d}  {hud.label}"
    low = hud.moves_left <= max(3, hud.max_moves // 10)
    moves = f"MOVES {hud.moves_left}/{hud.max_moves}"
    msg = result_message(hud)

    img = font.render(msg or left, True, (220, 220, 220))
    screen.blit(img, (ox + height // 3, oy + (height - img.get_height()) // 2))
    if msg is None:
        img = font.render(moves, True, (255, 90, 90) if low else (220, 220, 220))
        screen.blit(img, (ox + width - img.get_width() - height // 3, oy + (height - img.get_height()) // 2))
