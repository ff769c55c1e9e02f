#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
trimgraph v0.1.0

Configuration parser: YAML config loading, merging, and validation.

Author: trimgraph Development Team
License: MIT - See LICENSE
"""

import os
import re
import yaml
from pathlib import Path
from typing import Any, Dict, Optional, Union

from .schema import default_config, validate_config


class ConfigValidationError(Exception):
    """Raised when configuration validation fails."""
    pass


class ConfigParser:
    """
    Parse and validate trimgraph configuration files.

    Features:
    - Load YAML configuration files
    - Merge with default values
    - Environment variable substitution (${VAR} and ${VAR:-default})
    - CLI parameter overrides
    - Schema validation
    - Dotted notation access (e.g., config.get('execution.threads'))
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration parser.

        Args:
            config_file: Path to YAML configuration file (optional)
        """
        self.config_file = Path(config_file) if config_file else None
        self._config: Dict[str, Any] = default_config()

        if self.config_file:
            self._load_user_config()

    def _load_user_config(self):
        """Load and merge user configuration file."""
        if not self.config_file.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {self.config_file}"
            )

        try:
            with open(self.config_file, 'r') as f:
                user_config = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigValidationError(
                f"Invalid YAML in config file {self.config_file}: {e}"
            )

        if user_config is None:
            return
        if not isinstance(user_config, dict):
            raise ConfigValidationError(
                f"Config file {self.config_file} must contain a mapping at top level"
            )

        # User values override defaults
        self._config = self._deep_merge(self._config, user_config)
        self._config = self._substitute_env_vars(self._config)

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """
        Deep merge two dictionaries.

        Args:
            base: Base dictionary (defaults)
            override: Override dictionary (user values)

        Returns:
            Merged dictionary
        """
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            elif value is None and isinstance(result.get(key), dict):
                # An empty section (all keys commented out) keeps its defaults
                continue
            else:
                result[key] = value

        return result

    def _substitute_env_vars(self, config: Any) -> Any:
        """
        Recursively substitute environment variables in configuration.

        Supports:
        - ${VAR}: Replace with environment variable VAR
        - ${VAR:-default}: Replace with VAR, or 'default' if not set

        A string that is entirely one reference is parsed as YAML after
        substitution, so 'threads: ${TRIM_THREADS:-4}' yields an int.
        """
        if isinstance(config, dict):
            return {k: self._substitute_env_vars(v) for k, v in config.items()}

        elif isinstance(config, list):
            return [self._substitute_env_vars(item) for item in config]

        elif isinstance(config, str):
            pattern = r'\$\{([^}:]+)(?::-(.*?))?\}'

            def replace_var(match):
                return os.environ.get(match.group(1), match.group(2) or '')

            if re.fullmatch(pattern, config):
                return yaml.safe_load(re.sub(pattern, replace_var, config))
            return re.sub(pattern, replace_var, config)

        else:
            return config

    def merge_cli_overrides(self, overrides: Dict[str, Any]):
        """
        Merge command-line overrides into configuration.

        Args:
            overrides: Dictionary of override values. Keys use dotted
                notation (e.g., 'filter.ignore_links'); None values are skipped.
        """
        for key, value in overrides.items():
            if value is None:
                continue
            keys = key.split('.')

            target = self._config
            for k in keys[:-1]:
                if k not in target:
                    target[k] = {}
                if not isinstance(target[k], dict):
                    raise ConfigValidationError(
                        f"Cannot set {key}: section {k!r} must be a mapping, got {target[k]!r}"
                    )
                target = target[k]

            target[keys[-1]] = value

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get configuration value by key.

        Supports dotted notation for nested access.
        """
        value = self._config

        for k in key.split('.'):
            if isinstance(value, dict) and k in value:
                value = value[k]
            else:
                return default

        return value

    def to_dict(self) -> Dict[str, Any]:
        """Export configuration as dictionary."""
        return self._config.copy()

    def validate(self) -> bool:
        """
        Validate configuration against the schema.

        Returns:
            True if valid

        Raises:
            ConfigValidationError: If validation fails
        """
        errors = validate_config(self._config)
        if errors:
            raise ConfigValidationError(
                "Configuration validation failed: " + "; ".join(errors)
            )
        return True

    def to_trim_options(self):
        """Build TrimOptions for a pipeline run from this configuration."""
        from ..pipeline import TrimOptions

        self.validate()
        return TrimOptions(
            threads=self.get('execution.threads'),
            ignore_segments=self.get('filter.ignore_segments'),
            ignore_links=self.get('filter.ignore_links'),
            ignore_jumps=self.get('filter.ignore_jumps'),
            unknown_selection=self.get('filter.unknown_selection'),
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"ConfigParser(config_file={self.config_file})"

# trimgraph v0.1.0
# Any usage is subject to this software's license.
