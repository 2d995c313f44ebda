"""Logging setup driven by application settings."""

import logging

from tablednd.config import get_settings


def configure_logging(level: str | None = None) -> None:
    """
    Configure root logging for a host application.

    Args:
        level: Logging level name. If None, reads ``log_level`` from settings.
    """
    settings = get_settings()
    if level is None:
        level = "DEBUG" if settings.debug else settings.log_level
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
