"""
trimgraph v0.1.0

Configuration management for trimgraph.

Author: trimgraph Development Team
License: MIT - See LICENSE
"""

from .parser import ConfigParser, ConfigValidationError
from .schema import DEFAULT_CONFIG, TEMPLATES, save_config_template, validate_config

__all__ = [
    "ConfigParser",
    "ConfigValidationError",
    "DEFAULT_CONFIG",
    "TEMPLATES",
    "save_config_template",
    "validate_config",
]
