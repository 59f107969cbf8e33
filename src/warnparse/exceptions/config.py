from __future__ import annotations

from typing import Any

from warnparse.exceptions.base import WarnparseError


class ConfigError(WarnparseError):
    """Exception for configuration loading, parsing, and validation errors.

    Raised when configuration cannot be loaded, parsed, or validated. This
    includes YAML parsing failures, Pydantic validation errors, and invalid
    environment variable values.

    Attributes:
        message: Human-readable error message describing the configuration issue.
        field: Optional field name that caused the error (e.g., "parsing.encoding").
        value: Optional value that failed validation (for debugging).

    Examples:
        ```python
        # YAML parsing failure
        raise ConfigError(
            "Failed to parse warnparse.yaml: invalid YAML syntax at line 10"
        )

        # Invalid prefix pattern
        raise ConfigError(
            "strip_prefix is not a valid regular expression",
            field="parsing.strip_prefix",
            value="[unclosed",
        )
        ```
    """

    def __init__(
        self,
        message: str,
        field: str | None = None,
        value: Any = None,
    ) -> None:
        """Initialize the ConfigError.

        Args:
            message: Human-readable error message.
            field: Optional field name that caused the error.
            value: Optional value that failed validation.
        """
        self.field = field
        self.value = value
        super().__init__(message)
