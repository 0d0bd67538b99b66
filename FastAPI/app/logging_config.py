"""Process-wide logging for the talent management API."""

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s | %(message)s"

# Chatty at INFO: per-request access lines and SQL echo.
QUIET_LOGGERS = ("uvicorn.access", "sqlalchemy.engine", "httpx")


def _resolve_level(level: int | str | None) -> int:
    if level is None:
        from app.config import settings

        level = settings.log_level
    if isinstance(level, str):
        return getattr(logging, level.upper(), logging.INFO)
    return level


def setup_logging(level: int | str | None = None, stream=None) -> None:
    """Install a single stdout handler on the root logger.

    ``level`` falls back to ``settings.log_level``. Calling this again replaces
    the previous handler instead of stacking another one.
    """
    resolved = _resolve_level(level)
    handler = logging.StreamHandler(stream or sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(resolved)

    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
