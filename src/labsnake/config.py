import os
from dataclasses import dataclass, field
from pathlib import Path


def _default_progress_path() -> Path:
    return Path.home() / ".labsnake" / "progress.json"


@dataclass(frozen=True)
class Settings:
    progress_path: Path = field(default_factory=_default_progress_path)
    log_level: str = "INFO"
    tile_size: int = 24  # pixels per grid cell in the pygame/Pillow renderers

    @classmethod
    def from_env(cls) -> "Settings":
        base = cls()
        tile = os.environ.get("LABSNAKE_TILE")
        return cls(
            progress_path=Path(os.environ.get("LABSNAKE_PROGRESS", base.progress_path)).expanduser(),
            log_level=os.environ.get("LABSNAKE_LOG_LEVEL", base.log_level).upper(),
            tile_size=int(tile) if tile else base.tile_size,
        )


# Global settings (launchers may build their own via Settings.from_env())
SETTINGS = Settings()
