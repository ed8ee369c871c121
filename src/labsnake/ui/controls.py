# src/labsnake/ui/controls.py
# Raw input -> Direction / reset. Keys are matched by name so this stays
# free of pygame; the runner passes pygame.key.name(...) or event.unicode.

from typing import Dict, Optional

from ..directions import Direction

SWIPE_THRESHOLD = 20  # min px on the dominant axis
SWIPE_MAX_TIME = 400  # ms

KEY_DIRECTIONS: Dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

RESET_KEYS = frozenset({"r"})


def direction_for_key(key_name: str) -> Optional[Direction]:
    return KEY_DIRECTIONS.get(key_name.lower())


def is_reset_key(key_name: str) -> bool:
    return key_name.lower() in RESET_KEYS


def classify_swipe(dx: float, dy: float, dt_ms: float) -> Optional[Direction]:
    """Screen-space swipe (y grows downward) to a direction, or None if too slow/short."""
    if dt_ms > SWIPE_MAX_TIME:
        return None
    adx, ady = abs(dx), abs(dy)
    if adx < SWIPE_THRESHOLD and ady < SWIPE_THRESHOLD:
        return None
    if adx > ady:
        return Direction.RIGHT if dx > 0 else Direction.LEFT
    return Direction.DOWN if dy > 0 else Direction.UP


# Level browsing: PageDown = next level, PageUp = previous
PAGE_STEPS: Dict[str, int] = {"page down": 1, "page up": -1}


def page_step(key_name: str) -> int:
    return PAGE_STEPS.get(key_name.lower(), 0)
