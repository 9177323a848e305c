"""Global configuration file loading."""

import logging
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".salesreport"
CONFIG_FILE_NAME = "config.yml"


def get_global_config_path() -> Path:
    """Return the path of ~/.salesreport/config.yml."""
    return Path.home() / CONFIG_DIR_NAME / CONFIG_FILE_NAME


def load_global_config() -> dict[str, Any]:
    """Load global configuration from ~/.salesreport/config.yml.

    A file that is not valid YAML, or whose top level is not a mapping, is
    ignored with a warning.
    """
    config_path = get_global_config_path()
    if not config_path.exists():
        return {}

    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.warning("Ignoring unreadable config file %s: %s", config_path, e)
        return {}

    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config file %s: expected a mapping", config_path)
        return {}
    return data
