from __future__ import annotations


class WarnparseError(Exception):
    """Base exception class for all warnparse-specific errors.

    This is the root of the warnparse exception hierarchy. Catching it at the
    CLI boundary handles every library failure while letting system exceptions
    propagate naturally.

    Attributes:
        message: Human-readable error message describing what went wrong.

    Example:
        ```python
        try:
            issues = parser.parse(stream)
        except WarnparseError as e:
            logger.error("parse_failed", error=e.message)
            sys.exit(1)
        ```
    """

    def __init__(self, message: str) -> None:
        """Initialize the WarnparseError.

        Args:
            message: Human-readable error message.
        """
        self.message = message
        super().__init__(message)
