from __future__ import annotations

from warnparse.exceptions.base import WarnparseError


class ParsingError(WarnparseError):
    """A non-recoverable error occurred while parsing tool output.

    The caller should abort the current parse and report the failure. No
    partial result is available.

    Attributes:
        message: Human-readable error message.
        parser_id: ID of the parser that failed (if known).
        line_number: Input line where the problem was detected (if known).
    """

    def __init__(
        self,
        message: str,
        parser_id: str | None = None,
        line_number: int | None = None,
    ) -> None:
        """Initialize the ParsingError.

        Args:
            message: Human-readable error message.
            parser_id: ID of the parser that failed.
            line_number: Input line where the problem was detected.
        """
        self.parser_id = parser_id
        self.line_number = line_number
        super().__init__(message)


class ParsingCanceledError(WarnparseError):
    """Parsing was aborted by an operator.

    Raised distinctly from ParsingError so callers can suppress error
    reporting for user-initiated aborts.

    Attributes:
        message: Human-readable error message.
        parser_id: ID of the parser that was canceled (if known).
    """

    def __init__(
        self,
        message: str = "Parsing has been canceled",
        parser_id: str | None = None,
    ) -> None:
        """Initialize the ParsingCanceledError.

        Args:
            message: Human-readable error message.
            parser_id: ID of the parser that was canceled.
        """
        self.parser_id = parser_id
        super().__init__(message)


class ParserNotFoundError(WarnparseError):
    """No parser is registered under the requested ID.

    Attributes:
        message: Human-readable error message.
        parser_id: The ID that was looked up.
        available: IDs that are registered.
    """

    def __init__(
        self,
        message: str,
        parser_id: str | None = None,
        available: list[str] | None = None,
    ) -> None:
        """Initialize the ParserNotFoundError.

        Args:
            message: Human-readable error message.
            parser_id: The ID that was looked up.
            available: IDs that are registered.
        """
        self.parser_id = parser_id
        self.available = available or []
        super().__init__(message)
