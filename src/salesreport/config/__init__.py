"""
Configuration management for salesreport.

Supports multiple configuration sources in order of priority:
1. Environment variables (highest priority)
2. Global config file (~/.salesreport/config.yml)
3. Default values (lowest priority)
"""

from .env_loader import get_global_config_path, load_global_config
from .getters import (
    DEFAULT_LOOKBACK_DAYS,
    get_config,
    get_lookback_days,
    is_verbose,
)

CONFIG_KEYS = (
    "SALESREPORT_VERBOSE",
    "SALESREPORT_LOOKBACK_DAYS",
)

__all__ = [
    "CONFIG_KEYS",
    # env_loader
    "get_global_config_path",
    "load_global_config",
    # getters
    "DEFAULT_LOOKBACK_DAYS",
    "get_config",
    "get_lookback_days",
    "is_verbose",
]
