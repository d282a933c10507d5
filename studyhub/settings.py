"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/StudyHub/settings.json

Set ``STUDYHUB_HOME`` to keep settings, the database, cached sounds and
logs somewhere else.

Usage::

    settings = load_settings()
    settings.dark_mode = True
    save_settings(settings)
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from loguru import logger

from .timer.session import (
    BREAK_MINUTES_RANGE,
    DEFAULT_BREAK_MINUTES,
    DEFAULT_WORK_MINUTES,
    WORK_MINUTES_RANGE,
    clamp_minutes,
)


DEFAULT_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "StudyHub"


def app_support_dir() -> Path:
    override = os.environ.get("STUDYHUB_HOME")
    if override:
        return Path(override)
    return DEFAULT_SUPPORT_DIR


def settings_path() -> Path:
    return app_support_dir() / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    work_duration_minutes: int = DEFAULT_WORK_MINUTES
    break_duration_minutes: int = DEFAULT_BREAK_MINUTES

    # ── appearance ────────────────────────────────────────────────────
    dark_mode: bool = False

    # ── audio ─────────────────────────────────────────────────────────
    sound_enabled: bool = True
    sound_volume: int = 70                 # 0-100

    # ── diagnostics ───────────────────────────────────────────────────
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        self.work_duration_minutes = clamp_minutes(
            self.work_duration_minutes, WORK_MINUTES_RANGE, DEFAULT_WORK_MINUTES,
        )
        self.break_duration_minutes = clamp_minutes(
            self.break_duration_minutes, BREAK_MINUTES_RANGE, DEFAULT_BREAK_MINUTES,
        )
        self.sound_volume = max(0, min(int(self.sound_volume), 100))


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""
    path = path or settings_path()
    if not path.exists():
        return Settings()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
        # Only use keys that exist in the dataclass
        valid_keys = {f.name for f in fields(Settings)}
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Ignoring unreadable settings file {}: {}", path, exc)
        return Settings()


def save_settings(settings: Settings, path: Path | None = None) -> None:
    """Write settings to disk as JSON."""
    path = path or settings_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
    logger.debug("Settings saved to {}", path)
