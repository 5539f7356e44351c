"""Configuration management for aoc-solver.

This module provides Hydra-based configuration loading with command-line
overrides, plus built-in defaults for installs without a conf directory.
"""

from .config_manager import (
    ConfigManager, load_config, get_config, get_parameter, default_config, reset_config
)
from .validators import validate_config, ConfigValidationError

__all__ = [
    'ConfigManager',
    'load_config',
    'get_config',
    'get_parameter',
    'default_config',
    'reset_config',
    'validate_config',
    'ConfigValidationError'
]
