"""Base class for all warnings parsers.

A warnings parser turns the textual output of a build tool or compiler into
an ``Issues`` collection. Parsers based on a regular expression should extend
``RegexpLineParser`` or ``RegexpDocumentParser`` instead of this class.
"""

from __future__ import annotations

import threading
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, TextIO

from warnparse.categories import classify_if_empty, classify_warning
from warnparse.exceptions import ParsingCanceledError, ParsingError
from warnparse.lines import convert_line_number
from warnparse.logging import get_logger
from warnparse.models import IssueBuilder, Issues

__all__ = [
    "LineTransformer",
    "ParseStatus",
    "ParseOutcome",
    "WarningsParser",
    "identity",
]

logger = get_logger(__name__)

LineTransformer = Callable[[str], str]


def identity(line: str) -> str:
    """Line transformer that returns its input unchanged."""
    return line


class ParseStatus(str, Enum):
    """Outcome of a parse run.

    Attributes:
        SUCCESS: The source was parsed and issues are available.
        FAILED: Parsing stopped with a non-recoverable ParsingError.
        CANCELED: Parsing was aborted by an operator.
    """

    SUCCESS = "success"
    FAILED = "failed"
    CANCELED = "canceled"


@dataclass(frozen=True, slots=True)
class ParseOutcome:
    """Tagged result of WarningsParser.try_parse().

    Attributes:
        status: Whether the parse succeeded, failed or was canceled.
        issues: The parsed issues (empty unless status is SUCCESS).
        error: The error that stopped parsing (None on SUCCESS).
    """

    status: ParseStatus
    issues: Issues
    error: ParsingError | ParsingCanceledError | None = None

    @property
    def success(self) -> bool:
        return self.status is ParseStatus.SUCCESS

    @classmethod
    def ok(cls, issues: Issues) -> ParseOutcome:
        return cls(status=ParseStatus.SUCCESS, issues=issues)

    @classmethod
    def failed(cls, error: ParsingError) -> ParseOutcome:
        return cls(status=ParseStatus.FAILED, issues=Issues(), error=error)

    @classmethod
    def canceled(cls, error: ParsingCanceledError) -> ParseOutcome:
        return cls(status=ParseStatus.CANCELED, issues=Issues(), error=error)


class WarningsParser(ABC):
    """Parses tool output for compiler warnings and returns the found issues.

    Each parser has a fixed ID that identifies it and is set as the type of
    every issue it creates. An optional line transformer rewrites each input
    line before it is handed to the matching logic, e.g. to strip prefixes
    injected by build wrappers.

    Parsers keep no state between parse() calls. The transformer is guarded
    by a lock so it can be replaced while other threads read it; a running
    parse keeps the transformer it started with.

    Example:
        ```python
        parser = GccParser(transformer=lambda line: line.removeprefix("[cc] "))
        with open("build.log", encoding="utf-8") as stream:
            issues = parser.parse(stream)
        ```
    """

    _transient_attributes: tuple[str, ...] = ("_lock", "_transformer")

    convert_line_number = staticmethod(convert_line_number)
    classify_warning = staticmethod(classify_warning)
    classify_if_empty = staticmethod(classify_if_empty)

    def __init__(
        self,
        parser_id: str,
        *,
        transformer: LineTransformer | None = None,
    ) -> None:
        """Initialize the parser.

        Args:
            parser_id: ID of the parser.
            transformer: Optional line transformer; identity if omitted.

        Raises:
            ValueError: If parser_id is None.
        """
        if parser_id is None:
            raise ValueError("Parser ID must not be None")
        self._id = parser_id
        self._lock = threading.Lock()
        self._transformer: LineTransformer | None = None
        if transformer is not None:
            self.set_transformer(transformer)

    @abstractmethod
    def parse(self, source: TextIO) -> Issues:
        """Parse the text source for issues.

        Args:
            source: The stream to read the tool output from.

        Returns:
            The parsed issues.

        Raises:
            ParsingError: A non-recoverable error occurred during parsing.
            ParsingCanceledError: Parsing has been aborted by the operator.
        """
        raise NotImplementedError

    def try_parse(self, source: TextIO) -> ParseOutcome:
        """Parse the source and report the outcome instead of raising.

        Only ParsingError and ParsingCanceledError are converted; any other
        exception is a bug and propagates.
        """
        log = logger.bind(parser_id=self._id)
        try:
            issues = self.parse(source)
        except ParsingCanceledError as e:
            log.info("parse_canceled", reason=e.message)
            return ParseOutcome.canceled(e)
        except ParsingError as e:
            log.warning("parse_failed", error=e.message, line_number=e.line_number)
            return ParseOutcome.failed(e)
        log.debug("parse_finished", issues=len(issues))
        return ParseOutcome.ok(issues)

    @property
    def id(self) -> str:
        """The ID of this parser."""
        return self._id

    def get_id(self) -> str:
        return self._id

    @property
    def transformer(self) -> LineTransformer:
        """The line transformer, or the identity function if none is set."""
        return self.get_transformer()

    @transformer.setter
    def transformer(self, transformer: LineTransformer) -> None:
        self.set_transformer(transformer)

    def get_transformer(self) -> LineTransformer:
        with self._lock:
            transformer = self._transformer
        return transformer if transformer is not None else identity

    def set_transformer(self, transformer: LineTransformer) -> None:
        """Install a line transformer applied to every input line.

        Args:
            transformer: Function mapping an input line to the line to parse.

        Raises:
            ValueError: If transformer is None.
            TypeError: If transformer is not callable.
        """
        if transformer is None:
            raise ValueError("Line transformer must not be None")
        if not callable(transformer):
            raise TypeError(
                f"Line transformer must be callable, got {type(transformer).__name__}"
            )
        with self._lock:
            self._transformer = transformer

    def get_line_number(self, line_number: str | None) -> int:
        """Convert a textual line number, 0 if it is not a valid number."""
        return convert_line_number(line_number)

    def issue_builder(self) -> IssueBuilder:
        """Return a new issue builder with the ID of this parser as type."""
        return IssueBuilder().set_type(self._id)

    def canceled(self) -> ParsingCanceledError:
        """Create the error raised when an operator aborts this parser."""
        return ParsingCanceledError(
            f"Parsing with {self} has been canceled", parser_id=self._id
        )

    def __str__(self) -> str:
        return f"{self._id} ({type(self).__name__})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(parser_id={self._id!r})"

    # Pickling keeps the ID and matching state; transient attributes such as
    # the transformer are reset on load.

    def __getstate__(self) -> dict[str, Any]:
        return {
            key: value
            for key, value in self.__dict__.items()
            if key not in self._transient_attributes
        }

    def __setstate__(self, state: dict[str, Any]) -> None:
        for key in self._transient_attributes:
            setattr(self, key, None)
        self.__dict__.update(state)
        self._lock = threading.Lock()
