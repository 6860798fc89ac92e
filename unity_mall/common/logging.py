"""
Logging configuration helpers.
Process-wide logging is configured once from the API settings; modules log through named loggers.
"""

from __future__ import annotations

import logging

from unity_mall.api.api_config import get_api_config

_LOGGING_CONFIGURED = False

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def resolve_log_level(level_name: str) -> int:
    """Map a level name like `debug` to its logging constant, falling back to INFO."""

    level = getattr(logging, level_name.strip().upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Configure process-wide logging from environment settings."""

    global _LOGGING_CONFIGURED
    if _LOGGING_CONFIGURED:
        return

    config = get_api_config()
    logging.basicConfig(
        level=resolve_log_level(config.log_level),
        format=LOG_FORMAT,
    )
    _LOGGING_CONFIGURED = True
