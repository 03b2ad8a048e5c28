"""
Configuration management for regclass.

Handles loading, merging, and discovery of configuration files.
"""
import importlib.resources as importlib_resources
import logging
import os
from typing import Optional

import yaml

from regclass.classifiers.specifier import SpecifierClassifier
from regclass.config_validator import ConfigValidator
from regclass.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

PROJECT_CONFIG_FILE = "regclass.config.yaml"


class ConfigManager:
    """Manages regclass configuration loading and merging operations."""

    def __init__(self):
        self.validator = ConfigValidator()

    def load_config(self, path: str) -> dict:
        """Load configuration from YAML file."""
        try:
            with open(path, "r") as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError("Invalid YAML in configuration file", path=path, original_exception=e) from e

    def deep_merge(self, default: dict, user: dict) -> dict:
        """Deep merge user config into default config."""
        result = default.copy()
        for key, value in user.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self.deep_merge(result[key], value)
            else:
                result[key] = value
        return result

    def load_package_default_config(self) -> dict:
        """Load default config from package."""
        import regclass.config
        default_config_path = importlib_resources.files(regclass.config) / "default.yaml"
        with default_config_path.open("r") as f:
            return yaml.safe_load(f)

    def load_and_merge_config(self, user_config_path: str) -> dict:
        """Load user config, merge with package default and validate."""
        default_config = self.load_package_default_config()
        user_config = self.load_config(user_config_path)
        if not isinstance(user_config, dict):
            raise ConfigurationError("Configuration must be a mapping", path=user_config_path)

        config = self.deep_merge(default_config, user_config)
        errors = self.validator.validate_config(config)
        if errors:
            raise ConfigurationError("Invalid configuration", path=user_config_path, errors=errors)

        logger.debug(f"Loaded configuration from {user_config_path}")
        return config

    def discover_and_load_config(self, config_arg: Optional[str]) -> dict:
        """Discover config file with priority order."""

        # Priority 1: --config argument
        if config_arg:
            if os.path.exists(config_arg):
                return self.load_and_merge_config(config_arg)
            else:
                raise ConfigurationError(f"Config file not found: {config_arg}", path=config_arg)

        # Priority 2: regclass.config.yaml in current directory
        if os.path.exists(PROJECT_CONFIG_FILE):
            return self.load_and_merge_config(PROJECT_CONFIG_FILE)

        # Priority 3: Package default config
        return self.load_package_default_config()

    def build_specifier_classifier(self, config: dict) -> SpecifierClassifier:
        """Create a specifier classifier with the configured extra exclusions."""
        specifier_config = config.get("specifier") or {}
        return SpecifierClassifier(
            extra_scheme_prefixes=specifier_config.get("extra_scheme_prefixes") or [],
            extra_core_packages=specifier_config.get("extra_core_packages") or [],
        )
