from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from queens.core.gestures import DOUBLE_PRESS_WINDOW_MS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Runtime configuration, read from ``QUEENS_*`` environment variables."""

    home_dir: Path
    levels_dir: Optional[Path] = None
    double_press_window_ms: int = DOUBLE_PRESS_WINDOW_MS
    log_level: str = "INFO"

    @property
    def ledger_path(self) -> Path:
        return self.home_dir / "progress.json"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> Settings:
        env = os.environ if environ is None else environ
        home = env.get("QUEENS_HOME")
        levels = env.get("QUEENS_LEVELS_DIR")
        return cls(
            home_dir=Path(home).expanduser() if home else Path.home() / ".queens",
            levels_dir=Path(levels).expanduser() if levels else None,
            double_press_window_ms=_int_setting(env, "QUEENS_DOUBLE_PRESS_MS", DOUBLE_PRESS_WINDOW_MS),
            log_level=env.get("QUEENS_LOG_LEVEL", "INFO").upper(),
        )


def _int_setting(env: Mapping[str, str], name: str, default: int) -> int:
    raw = env.get(name)
    if raw is None or raw == "":
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer", name, raw)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive", name, raw)
        return default
    return value
