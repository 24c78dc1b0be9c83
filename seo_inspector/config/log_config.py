"""Logging setup shared by the CLI and the API."""
from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

from seo_inspector.config.settings import settings


def configure_logging(level: str | int | None = None, console: Console | None = None) -> None:
    """Route the ``seo_inspector`` loggers through a Rich handler.

    Args:
        level: Log level name or number; defaults to ``settings.logging.level``
        console: Console to write to (stderr when omitted)
    """
    if level is None:
        level = settings.logging.level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))

    logger = logging.getLogger("seo_inspector")
    for existing in list(logger.handlers):
        if isinstance(existing, RichHandler):
            logger.removeHandler(existing)
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
