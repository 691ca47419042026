# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Configuration management utilities for the widget_accessibility_utility package.

This module provides a centralized configuration system that manages the rule
parameters (suspicious phrases, candidate fields, fallback labels, container
markers), user-provided settings, and environment variables.
"""

import os
import yaml
import json
from pathlib import Path
from typing import Dict, Any, Optional
from copy import deepcopy

from widget_accessibility_utility.utils.logging_helper import (
    setup_logger,
    ConfigurationError,
)

# Configure module-level logger
logger = setup_logger(__name__)


class ConfigManager:
    """
    Centralized configuration manager for the annotation rules.

    This class handles:
    - Default options
    - User-provided options
    - Environment variables
    - Option merging and cascade
    """

    def __init__(
        self, defaults: Dict[str, Any] = None, env_prefix: str = "WIDGET_A11Y_"
    ):
        """
        Initialize a configuration manager.

        Args:
            defaults: Dictionary of default options
            env_prefix: Prefix for environment variables
        """
        self.defaults = defaults or {}
        self.env_prefix = env_prefix
        self.user_config = {}

    def get_config(
        self, user_options: Dict[str, Any] = None, section: str = None
    ) -> Dict[str, Any]:
        """
        Get the resolved configuration with defaults, environment vars, and user options.

        Args:
            user_options: User-provided option overrides
            section: Optional section name to retrieve (e.g., 'annotate')

        Returns:
            Dict with the resolved configuration options
        """
        if section and section in self.defaults:
            config = deepcopy(self.defaults[section])
        else:
            config = deepcopy(self.defaults)

        # Apply stored user config
        if section and section in self.user_config:
            config.update(self.user_config[section])
        elif not section:
            config.update(self.user_config)

        self._apply_env_vars(config, section)

        # Runtime user options take highest precedence
        if user_options:
            config.update(user_options)

        return config

    def update_defaults(
        self, new_defaults: Dict[str, Any], section: str = None
    ) -> None:
        """
        Update default configuration values.

        Args:
            new_defaults: Dictionary of new default values
            section: Optional section to update
        """
        if section:
            if section not in self.defaults:
                self.defaults[section] = {}
            self.defaults[section].update(new_defaults)
        else:
            self.defaults.update(new_defaults)

    def set_user_config(self, config: Dict[str, Any], section: str = None) -> None:
        """
        Set persistent user configuration.

        Args:
            config: Dictionary of configuration options
            section: Optional section name
        """
        if section:
            if section not in self.user_config:
                self.user_config[section] = {}
            self.user_config[section].update(config)
        else:
            self.user_config.update(config)

    def _apply_env_vars(self, config: Dict[str, Any], section: str = None) -> None:
        """
        Apply relevant environment variables to the configuration.

        Args:
            config: Configuration dictionary to update
            section: Optional section name to scope environment variables
        """
        prefix = self.env_prefix
        if section:
            prefix = f"{prefix}{section.upper()}_"

        for env_var, value in os.environ.items():
            if not env_var.startswith(prefix):
                continue

            option_name = env_var[len(prefix) :].lower()

            # Convert value type based on existing config if possible
            if option_name in config:
                existing_type = type(config[option_name])
                try:
                    if existing_type == bool:
                        value = value.lower() in ("true", "1", "yes", "y")
                    elif existing_type == int:
                        value = int(value)
                    elif existing_type == list:
                        # Split by commas for list values
                        value = [item.strip() for item in value.split(",")]
                    elif existing_type == dict:
                        # key=value pairs separated by commas
                        value = dict(
                            (key.strip(), item.strip())
                            for key, item in (
                                pair.split("=", 1) for pair in value.split(",")
                            )
                        )
                except (ValueError, TypeError):
                    logger.warning(
                        f"Could not convert environment variable {env_var} to {existing_type.__name__}"
                    )
                    continue

            config[option_name] = value
            logger.debug(f"Applied environment variable {env_var}")


def validate_options(
    options: Dict[str, Any],
    required_fields: Optional[Dict[str, type]] = None,
    optional_fields: Optional[Dict[str, type]] = None,
) -> None:
    """
    Validate configuration options against schemas.

    Args:
        options: The options dictionary to validate
        required_fields: Dictionary mapping field names to expected types
        optional_fields: Dictionary mapping optional field names to expected types

    Raises:
        ConfigurationError: If validation fails
    """
    if required_fields:
        for field, field_type in required_fields.items():
            if field not in options:
                raise ConfigurationError(f"Required field '{field}' is missing")

            if not isinstance(options[field], field_type):
                raise ConfigurationError(
                    f"Field '{field}' has incorrect type. "
                    f"Expected {_type_name(field_type)}, got {type(options[field]).__name__}"
                )

    if optional_fields:
        for field, field_type in optional_fields.items():
            if field in options and not isinstance(options[field], field_type):
                raise ConfigurationError(
                    f"Field '{field}' has incorrect type. "
                    f"Expected {_type_name(field_type)}, got {type(options[field]).__name__}"
                )


def _type_name(field_type) -> str:
    if isinstance(field_type, tuple):
        return " or ".join(t.__name__ for t in field_type)
    return field_type.__name__


def load_config_file(file_path: str) -> Dict[str, Any]:
    """
    Load configuration from a file.

    Supports YAML (.yaml, .yml) and JSON (.json) formats.

    Args:
        file_path: Path to the configuration file

    Returns:
        Dictionary with configuration options

    Raises:
        ConfigurationError: If file cannot be loaded or parsed
    """
    path = Path(file_path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {file_path}")

    suffix = path.suffix.lower()
    if suffix not in (".yaml", ".yml", ".json"):
        raise ConfigurationError(
            f"Unsupported configuration file format: {path.suffix}. "
            "Supported formats: YAML (.yaml, .yml), JSON (.json)"
        )

    try:
        with open(path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                return json.load(f)
            return yaml.safe_load(f) or {}
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Error parsing configuration file: {e}")
    except OSError as e:
        raise ConfigurationError(f"Error loading configuration file: {e}")


# Option types accepted by the annotate section
ANNOTATE_OPTION_TYPES = {
    "suspicious_phrases": (list, tuple),
    "candidate_fields": (list, tuple),
    "fallback_labels": dict,
    "contextual_widgets": (list, tuple),
    "label_prefix": str,
    "default_label": str,
    "role_conflict_marker": str,
    "escape_labels": bool,
}

# Global instance for shared configuration
config_manager = ConfigManager(
    {
        "annotate": {
            "suspicious_phrases": [
                "click here",
                "here",
                "read more",
                "more",
                "details",
                "link",
            ],
            # Checked in order, first match wins
            "candidate_fields": [
                "button",
                "link_text",
                "read_more_text",
                "cta_text",
                "text",
            ],
            "fallback_labels": {
                "image-box": "Image box",
                "icon-box": "Icon box",
            },
            "contextual_widgets": ["call-to-action"],
            "label_prefix": "Learn more about ",
            "default_label": "Learn more",
            "role_conflict_marker": "swiper",
            "escape_labels": True,
        },
    }
)
