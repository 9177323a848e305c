"""Configuration getter functions."""

import logging
import os
from datetime import date
from typing import Any

from .env_loader import load_global_config

logger = logging.getLogger(__name__)

DEFAULT_LOOKBACK_DAYS = 7
TRUTHY_VALUES = {"1", "true", "yes", "on"}


def get_config(key: str, default: Any = None) -> Any:
    """
    Get configuration value with priority:
    1. Environment variable
    2. Global config file
    3. Default value

    Args:
        key: Configuration key
        default: Default value if not found

    Returns:
        Configuration value or default
    """
    # 1. Check environment variable
    env_value = os.environ.get(key)
    if env_value:
        return env_value

    # 2. Check global config
    global_config = load_global_config()
    if key in global_config:
        return global_config[key]

    # 3. Return default
    return default


def is_verbose() -> bool:
    """Return True when SALESREPORT_VERBOSE is set to a truthy value."""
    value = get_config("SALESREPORT_VERBOSE", default="")
    return str(value).strip().lower() in TRUTHY_VALUES


def get_lookback_days() -> int:
    """Get the demo export window in days (default: 7).

    Booleans, non-integers, negative values and windows reaching past
    ``date.min`` fall back to the default.
    """
    value = get_config("SALESREPORT_LOOKBACK_DAYS", default=DEFAULT_LOOKBACK_DAYS)
    if isinstance(value, bool):
        logger.warning("Invalid SALESREPORT_LOOKBACK_DAYS %r, using %d", value, DEFAULT_LOOKBACK_DAYS)
        return DEFAULT_LOOKBACK_DAYS
    try:
        days = int(value)
    except (TypeError, ValueError):
        logger.warning("Invalid SALESREPORT_LOOKBACK_DAYS %r, using %d", value, DEFAULT_LOOKBACK_DAYS)
        return DEFAULT_LOOKBACK_DAYS
    if days < 0:
        logger.warning("Negative SALESREPORT_LOOKBACK_DAYS %d, using %d", days, DEFAULT_LOOKBACK_DAYS)
        return DEFAULT_LOOKBACK_DAYS
    max_days = (date.today() - date.min).days
    if days > max_days:
        logger.warning(
            "SALESREPORT_LOOKBACK_DAYS %d exceeds %d, using %d", days, max_days, DEFAULT_LOOKBACK_DAYS
        )
        return DEFAULT_LOOKBACK_DAYS
    return days
