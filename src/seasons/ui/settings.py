"""User-facing settings."""

from __future__ import annotations

import os
from dataclasses import dataclass

LOG_LEVEL_ENV = "SEASONS_LOG_LEVEL"


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    tile_size: int = 80  # px per square
    show_legal_moves: bool = True

    # Status panel
    message_timeout_ms: int = 5000  # game-over messages stay up

    # Diagnostics
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> AppSettings:
        """Defaults, with the log level overridable through the environment."""
        settings = cls()
        level = os.environ.get(LOG_LEVEL_ENV)
        if level:
            settings.log_level = level.strip().upper()
        return settings
