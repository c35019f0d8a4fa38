"""
Logging setup for the Task Tracker backend.

Modules log through logging.getLogger(__name__); this only configures the
root handler once, at application start.
"""

import logging
import sys

from .config import get_settings


def setup_logging() -> None:
    """Configure log format and level from settings."""
    settings = get_settings()
    level = logging.DEBUG if settings.debug else settings.log_level.upper()

    logging.basicConfig(
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        level=level,
    )

    # Route uvicorn's loggers through the root handler
    for name in ["uvicorn", "uvicorn.error", "fastapi"]:
        logging.getLogger(name).handlers.clear()
        logging.getLogger(name).propagate = True

    # Quiet the HTTP client used by supabase-py
    logging.getLogger("httpx").setLevel(logging.WARNING)
