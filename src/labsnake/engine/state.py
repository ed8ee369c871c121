# src/labsnake/engine/state.py
# Session state machine for one attempt at one level.
# Moves are transactional: an illegal move changes nothing at all.

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, List, Optional, Union

from ..directions import Direction, step
from ..grid import Cell
from ..levels import Level

logger = logging.getLogger(__name__)

START_FACING = Direction.RIGHT

WinSink = Callable[[int], None]


class Status(str, Enum):
    IN_PROGRESS = "playing"
    WON = "won"
    LOST = "lost"


@dataclass
class SessionState:
    level: Level
    path: List[Cell] = field(default_factory=list)
    facing: Direction = START_FACING
    moves_left: int = 0
    status: Status = Status.IN_PROGRESS
    on_win: Optional[WinSink] = None

    def __post_init__(self) -> None:
        if not self.path:
            self.path = [self.level.entry]
            self.moves_left = self.level.max_moves

    @property
    def head(self) -> Cell:
        return self.path[-1]

    @property
    def moves_used(self) -> int:
        return self.level.max_moves - self.moves_left

    @property
    def finished(self) -> bool:
        return self.status is not Status.IN_PROGRESS


def create_session(level: Level, *, on_win: Optional[WinSink] = None) -> SessionState:
    return SessionState(level=level, on_win=on_win)


def reset(session: SessionState) -> SessionState:
    """Back to the initial state for the same level. Safe from any status."""
    session.path = [session.level.entry]
    session.facing = START_FACING
    session.moves_left = session.level.max_moves
    session.status = Status.IN_PROGRESS
    return session


def _as_direction(direction: Union[Direction, str]) -> Optional[Direction]:
    if isinstance(direction, Direction):
        return direction
    try:
        return Direction(direction)
    except (ValueError, TypeError):
        return None


def apply_move(session: SessionState, direction: Union[Direction, str]) -> SessionState:
    """
    Try one step. Rejected moves (finished session, unknown direction, out of
    bounds, wall) are no-ops. The win check runs before the loss check, so
    reaching the exit on the last move still wins.
    """
    if session.status is not Status.IN_PROGRESS:
        return session
    d = _as_direction(direction)
    if d is None:
        return session

    level = session.level
    nr, nc = step(session.head, d)
    if not level.grid.is_open(nr, nc):
        return session

    session.facing = d
    session.path.append((nr, nc))
    session.moves_left -= 1

    if (nr, nc) == level.exit:
        session.status = Status.WON
        logger.debug("level %d won in %d moves", level.id, session.moves_used)
        if session.on_win is not None:
            session.on_win(level.id)
        return session

    if session.moves_left <= 0:
        session.status = Status.LOST
        logger.debug("level %d lost at %s", level.id, session.head)
    return session
