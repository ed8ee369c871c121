from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Progress:
    completed: Tuple[int, ...] = ()
    unlocked: Tuple[int, ...] = (1,)

    def is_completed(self, level_id: int) -> bool:
        return level_id in self.completed

    def is_unlocked(self, level_id: int) -> bool:
        return level_id in self.unlocked

    def to_dict(self) -> dict:
        return {"completed": list(self.completed), "unlocked": list(self.unlocked)}


def _add_unique(ids: Tuple[int, ...], level_id: int) -> Tuple[int, ...]:
    return ids if level_id in ids else (*ids, level_id)


def record_completion(progress: Progress, level_id: int) -> Progress:
    """Mark level_id completed and unlock the one after it."""
    return Progress(
        completed=_add_unique(progress.completed, level_id),
        unlocked=_add_unique(progress.unlocked, level_id + 1),
    )


def _is_id_list(v: object) -> bool:
    return isinstance(v, list) and all(isinstance(x, int) and not isinstance(x, bool) for x in v)


class ProgressFile:
    """Completed/unlocked level ids stored as a small JSON file."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> Progress:
        if not self.path.exists():
            return Progress()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("ignoring unreadable progress file %s: %s", self.path, e)
            return Progress()

        if not isinstance(data, dict) or not (
            _is_id_list(data.get("completed")) and _is_id_list(data.get("unlocked"))
        ):
            logger.warning("ignoring malformed progress file %s", self.path)
            return Progress()

        # Level 1 is always playable
        return Progress(
            completed=tuple(data["completed"]),
            unlocked=_add_unique(tuple(data["unlocked"]), 1),
        )

    def save(self, progress: Progress) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(progress.to_dict()), encoding="utf-8")
        except OSError as e:
            logger.warning("could not save progress to %s: %s", self.path, e)

    def clear(self) -> None:
        try:
            self.path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning("could not remove progress file %s: %s", self.path, e)
