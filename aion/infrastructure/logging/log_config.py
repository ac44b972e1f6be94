"""Logging setup for the Aion service.

Levels are configured per category in Settings, so chatty third-party
loggers (httpx, uvicorn access logs) can be turned down independently of
the application's own loggers.
"""

import logging
import sys

from aion.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

# Settings field -> loggers whose level it controls.
LOGGER_CATEGORIES: dict[str, tuple[str, ...]] = {
    "log_level_http": ("httpx", "httpcore"),
    "log_level_uvicorn": ("uvicorn", "uvicorn.access", "uvicorn.error"),
    "log_level_llm": (
        "aion.infrastructure.llm",
        "aion.application.services.suggestion_service",
        "aion.application.services.life_insight_service",
    ),
    "log_level_store": ("aion.infrastructure.store",),
}


def parse_level(name: str) -> int:
    """Level constant for ``name``; unknown names fall back to INFO."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def setup_logging(settings: Settings | None = None) -> dict[str, int]:
    """Apply the configured levels and return them keyed by logger name.

    Installs a stderr handler on the root logger only when nothing else
    (uvicorn, pytest) has installed one already.
    """
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(parse_level(settings.log_level))
    if not root.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)

    applied: dict[str, int] = {}
    for field_name, logger_names in LOGGER_CATEGORIES.items():
        level = parse_level(getattr(settings, field_name))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)
            applied[name] = level

    logging.getLogger(__name__).debug("Log levels applied: %s", applied)
    return applied
