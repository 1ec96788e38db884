"""
Configuration loading and logging setup.

Configuration lives in a YAML file; every section falls back to defaults
when the file or a key is missing.

    logging:
      level: INFO
      format: '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    pipeline:
      root: 0
      sort_output: true
"""

import copy
import logging
import os
from typing import Dict, Optional

import yaml

from errors import ConfigError

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def default_config() -> Dict:
    """Default configuration."""
    return {
        'logging': {
            'level': 'INFO',
            'format': LOG_FORMAT,
        },
        'pipeline': {
            'root': 0,
            'sort_output': True,
        },
    }


def load_config(config_path: Optional[str] = None) -> Dict:
    """
    Load configuration from `config_path`, merged over the defaults.

    Args:
        config_path: YAML file; None or a missing file yields defaults

    Raises:
        ConfigError: If the document is not a mapping of sections
    """
    config = default_config()
    if config_path is None:
        return config
    if not os.path.exists(config_path):
        logger.warning(f"Config file {config_path} not found, using defaults")
        return config

    with open(config_path, 'r') as f:
        try:
            loaded = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"invalid YAML: {e}", config_path) from e

    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        raise ConfigError("top level must be a mapping", config_path)

    for section, values in loaded.items():
        if values is None:
            continue
        if not isinstance(values, dict):
            raise ConfigError(f"section '{section}' must be a mapping", config_path)
        merged = copy.deepcopy(config.get(section, {}))
        merged.update(values)
        config[section] = merged

    logger.info(f"Loaded config from {config_path}")
    return config


def setup_logging(config: Dict) -> None:
    """Configure the root logger from the 'logging' section."""
    section = config.get('logging', {})
    level_name = str(section.get('level', 'INFO')).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ConfigError(f"unknown log level '{level_name}'")
    logging.basicConfig(level=level, format=section.get('format', LOG_FORMAT))
