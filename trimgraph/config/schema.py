"""
trimgraph v0.1.0

Configuration schema for trimgraph.

Defines all available configuration parameters with defaults and validation.

Author: trimgraph Development Team
License: MIT - See LICENSE
"""

import copy
from typing import Dict, Any, List
from pathlib import Path
import yaml


# Default configuration values
DEFAULT_CONFIG = {
    # ========================================================================
    # Execution
    # ========================================================================
    'execution': {
        'threads': 4,  # 0 = use all available cores
    },

    # ========================================================================
    # Filtering
    # ========================================================================
    'filter': {
        'ignore_segments': False,  # Keep every S line
        'ignore_links': False,  # Keep every L line
        'ignore_jumps': False,  # Keep every J line
        'unknown_selection': 'error',  # 'error' or 'warn' for unmatched names
    },

    # ========================================================================
    # Logging
    # ========================================================================
    'logging': {
        'level': 'INFO',
    },
}

TEMPLATES = ('default', 'lenient', 'segments-only')

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')


def default_config() -> Dict[str, Any]:
    """Return a fresh copy of the default configuration."""
    return copy.deepcopy(DEFAULT_CONFIG)


def save_config_template(output_path: Path, template: str = 'default'):
    """
    Save a configuration template to file.

    Args:
        output_path: Output file path
        template: Template type ('default', 'lenient', 'segments-only')
    """
    if template not in TEMPLATES:
        raise ValueError(f"Unknown template {template!r}, expected one of {TEMPLATES}")

    config = default_config()

    # Customize for specific templates
    if template == 'lenient':
        config['filter']['unknown_selection'] = 'warn'

    elif template == 'segments-only':
        config['filter']['ignore_links'] = True
        config['filter']['ignore_jumps'] = True

    with open(output_path, 'w') as f:
        yaml.dump(config, f, default_flow_style=False, sort_keys=False)


def _section(config: Dict[str, Any], name: str, errors: List[str]) -> Dict[str, Any]:
    """Return a config section, recording an error if it is not a mapping."""
    section = config.get(name, {})
    if section is None:
        return {}
    if not isinstance(section, dict):
        errors.append(f"Invalid {name} section: {section!r} (must be a mapping)")
        return {}
    return section


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate configuration dictionary.

    Args:
        config: Configuration to validate

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    execution = _section(config, 'execution', errors)
    filter_config = _section(config, 'filter', errors)
    logging_config = _section(config, 'logging', errors)
    if errors:
        return errors

    threads = execution.get('threads')
    if isinstance(threads, bool) or not isinstance(threads, int) or threads < 0:
        errors.append(f"Invalid execution.threads: {threads!r} (must be an integer >= 0)")

    for flag in ('ignore_segments', 'ignore_links', 'ignore_jumps'):
        if not isinstance(filter_config.get(flag), bool):
            errors.append(f"Invalid filter.{flag}: {filter_config.get(flag)!r} (must be true/false)")

    policy = filter_config.get('unknown_selection')
    if policy not in ('error', 'warn'):
        errors.append(f"Invalid filter.unknown_selection: {policy!r} (must be 'error' or 'warn')")

    level = logging_config.get('level')
    if not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS:
        errors.append(f"Invalid logging.level: {level!r}")

    return errors

# trimgraph v0.1.0
# Any usage is subject to this software's license.
