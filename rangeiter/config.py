"""Environment-variable configuration for the command line front end."""

from __future__ import annotations

import logging
import os

LOG_LEVEL_ENV = "RANGEITER_LOG_LEVEL"
DEFAULT_LIMIT_ENV = "RANGEITER_DEFAULT_LIMIT"

_DEFAULT_LOG_LEVEL = logging.INFO

logger = logging.getLogger(__name__)


def resolve_log_level() -> int:
    """Resolve the default log level from the environment."""
    configured = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not configured:
        return _DEFAULT_LOG_LEVEL
    level = logging.getLevelName(configured)
    if isinstance(level, int):
        return level
    return _DEFAULT_LOG_LEVEL


def resolve_default_limit() -> int | None:
    """Resolve the default cap on printed values, None when unset or invalid."""
    configured = os.environ.get(DEFAULT_LIMIT_ENV, "").strip()
    if not configured:
        return None
    try:
        limit = int(configured)
    except ValueError:
        logger.warning("Ignoring non-integer %s=%r", DEFAULT_LIMIT_ENV, configured)
        return None
    if limit < 0:
        logger.warning("Ignoring negative %s=%r", DEFAULT_LIMIT_ENV, configured)
        return None
    return limit
