"""
Bridgeware configuration: all environment variables in one place.

Read from environment at import time.
"""

from __future__ import annotations

import logging
import os


class Settings:
    """Settings from environment variables."""

    # Application
    ENVIRONMENT: str = os.environ.get("BRIDGEWARE_ENVIRONMENT", "development")

    # Logging (empty LOG_LEVEL: DEBUG in development, INFO elsewhere)
    LOG_LEVEL: str = os.environ.get("BRIDGEWARE_LOG_LEVEL", "").upper()
    TRACE_ACTIONS: bool = os.environ.get("BRIDGEWARE_TRACE_ACTIONS", "true").lower() == "true"

    @property
    def log_level(self) -> int:
        name = self.LOG_LEVEL or ("DEBUG" if self.ENVIRONMENT == "development" else "INFO")
        level = logging.getLevelName(name)
        return level if isinstance(level, int) else logging.INFO


# Singleton instance
settings = Settings()


def configure_logging(level: int | None = None) -> None:
    """Root logging setup for scripts and the example app. Libraries never call this."""
    logging.basicConfig(
        level=level if level is not None else settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
