"""
Exception hierarchy for regclass.

The classifiers themselves never raise: every negative outcome is a normal
return value. These exceptions cover the surrounding I/O only, i.e. reading
local registry item files and loading configuration.

Each exception includes:
- Clear error message
- The file path involved, when there is one
- Suggested user action
"""

from typing import Optional


class RegistryClassError(Exception):
    """
    Base exception for all regclass errors.

    Should be used directly only for failures that don't fit one of the
    more specific subclasses.
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        suggested_action: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        """
        Initialize RegistryClassError.

        Args:
            message: Human-readable error message
            path: File the error relates to
            suggested_action: Suggested action for the user to resolve the issue
            original_exception: The original exception that was caught
        """
        self.message = message
        self.path = path
        self.suggested_action = suggested_action
        self.original_exception = original_exception

        error_parts = [message]

        if path:
            error_parts.append(f"Path: {path}")

        if suggested_action:
            error_parts.append(f"Action: {suggested_action}")

        if original_exception:
            error_parts.append(f"Original error: {str(original_exception)}")

        super().__init__(" | ".join(error_parts))


class RegistryItemLoadError(RegistryClassError):
    """
    Raised when a local registry item file cannot be read.

    This typically indicates:
    - The file does not exist or is too large
    - The file is not a .json file
    - The content is empty, invalid JSON, or not a JSON object
    """

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        reason: Optional[str] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.reason = reason

        super().__init__(
            message=message,
            path=path,
            suggested_action="Check that the file is a registry item definition in JSON format",
            original_exception=original_exception,
        )


class ConfigurationError(RegistryClassError):
    """Raised when a configuration file is missing or malformed."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        errors: Optional[list] = None,
        original_exception: Optional[Exception] = None,
    ):
        self.errors = errors or []

        if self.errors:
            message = f"{message}: {'; '.join(self.errors)}"

        super().__init__(
            message=message,
            path=path,
            suggested_action="Fix the configuration file or pass a different one with --config",
            original_exception=original_exception,
        )
