"""Configuration validation for regclass."""

from typing import Any, Dict, List

VALID_LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


class ConfigValidator:
    """Validates regclass configuration."""

    def validate_config(self, config: Dict[str, Any]) -> List[str]:
        """Validate complete configuration.

        Args:
            config: Configuration dictionary

        Returns:
            List of validation error messages (empty if valid)
        """
        errors = []

        if "specifier" in config:
            errors.extend(self.validate_specifier(config["specifier"]))

        if "logging" in config:
            errors.extend(self.validate_logging(config["logging"]))

        return errors

    def validate_specifier(self, specifier_config: Any) -> List[str]:
        """Validate the specifier section.

        Args:
            specifier_config: Specifier configuration dictionary

        Returns:
            List of validation error messages
        """
        if not isinstance(specifier_config, dict):
            return ["'specifier' section must be a mapping"]

        errors = []
        for key in ("extra_scheme_prefixes", "extra_core_packages"):
            values = specifier_config.get(key)
            if values is None:
                continue
            if not isinstance(values, list):
                errors.append(f"'specifier.{key}' must be a list")
                continue
            for value in values:
                if not isinstance(value, str) or not value.strip():
                    errors.append(f"'specifier.{key}' entries must be non-empty strings, got {value!r}")

        return errors

    def validate_logging(self, logging_config: Any) -> List[str]:
        if not isinstance(logging_config, dict):
            return ["'logging' section must be a mapping"]

        errors = []
        level = logging_config.get("level")
        if level is not None and (not isinstance(level, str) or level.upper() not in VALID_LOG_LEVELS):
            errors.append(f"'logging.level' must be one of {', '.join(sorted(VALID_LOG_LEVELS))}")

        log_file = logging_config.get("file")
        if log_file is not None and not isinstance(log_file, str):
            errors.append("'logging.file' must be a string or null")

        return errors
