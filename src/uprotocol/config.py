"""Runtime settings from environment variables."""

from __future__ import annotations

import os


class Settings:
    """uProtocol tool settings, read from environment variables with defaults."""

    def __init__(self) -> None:
        self.log_level: str = os.getenv("UPROTOCOL_LOG_LEVEL", "WARNING").upper()
        self.debug: bool = os.getenv("UPROTOCOL_DEBUG", "").lower() in ("1", "true", "yes")
