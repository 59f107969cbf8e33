"""Issue records and the fluent builder used by parsers to create them.

Issues are immutable, frozen dataclasses with slots. Parsers never construct
them directly; they obtain a builder seeded with their ID (see
``WarningsParser.issue_builder``) and populate it from the matched text.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from warnparse.constants import NO_LINE, UNDEFINED
from warnparse.lines import convert_line_number

__all__ = [
    "Severity",
    "Issue",
    "IssueBuilder",
]


class Severity(str, Enum):
    """Severity of an issue.

    Attributes:
        ERROR: A compile or tool error.
        WARNING_HIGH: A warning with high priority.
        WARNING_NORMAL: A regular warning (default).
        WARNING_LOW: A note or informational message.
    """

    ERROR = "error"
    WARNING_HIGH = "high"
    WARNING_NORMAL = "normal"
    WARNING_LOW = "low"

    @classmethod
    def guess(cls, value: str | None) -> Severity:
        """Map a severity word reported by a tool to a Severity.

        Unknown or empty values map to WARNING_NORMAL.

        Example:
            >>> Severity.guess("Fatal")
            <Severity.ERROR: 'error'>
        """
        if not value:
            return cls.WARNING_NORMAL
        word = value.strip().lower()
        if word in ("error", "e", "fatal", "failure", "severe"):
            return cls.ERROR
        if word in ("high", "critical", "major"):
            return cls.WARNING_HIGH
        if word in ("note", "info", "information", "i", "low", "minor", "hint"):
            return cls.WARNING_LOW
        return cls.WARNING_NORMAL


@dataclass(frozen=True, slots=True)
class Issue:
    """A single diagnostic finding parsed from tool output.

    Attributes:
        file_name: Path of the affected file, "-" if unknown.
        line_start: First affected line (0 = no specific line).
        line_end: Last affected line, same as line_start if not reported.
        column_start: First affected column (0 = unknown).
        column_end: Last affected column (0 = unknown).
        category: Short classification label, possibly empty.
        type: ID of the parser that produced the issue.
        severity: Severity of the issue.
        message: Human-readable message.
        description: Additional details (e.g., a rule explanation).
    """

    file_name: str = UNDEFINED
    line_start: int = NO_LINE
    line_end: int = NO_LINE
    column_start: int = 0
    column_end: int = 0
    category: str = ""
    type: str = UNDEFINED
    severity: Severity = Severity.WARNING_NORMAL
    message: str = ""
    description: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        data = asdict(self)
        data["severity"] = self.severity.value
        return data


def _to_int(value: int | str | None) -> int:
    if isinstance(value, int):
        return value
    return convert_line_number(value)


class IssueBuilder:
    """Fluent builder for Issue instances.

    Every setter returns the builder itself. Line and column setters accept
    either integers or the raw text captured from the tool output; text is
    normalized with convert_line_number().

    Example:
        >>> issue = (
        ...     IssueBuilder()
        ...     .set_type("gcc")
        ...     .set_file_name("main.c")
        ...     .set_line_start("12")
        ...     .set_message("unused variable 'x'")
        ...     .build()
        ... )
        >>> issue.line_start, issue.line_end
        (12, 12)
    """

    def __init__(self) -> None:
        self._file_name: str = UNDEFINED
        self._line_start: int = NO_LINE
        self._line_end: int | None = None
        self._column_start: int = 0
        self._column_end: int = 0
        self._category: str = ""
        self._type: str = UNDEFINED
        self._severity: Severity = Severity.WARNING_NORMAL
        self._message: str = ""
        self._description: str = ""

    @property
    def type(self) -> str:
        """The issue type currently set on this builder."""
        return self._type

    def set_file_name(self, file_name: str | None) -> IssueBuilder:
        self._file_name = file_name.strip() if file_name else UNDEFINED
        return self

    def set_line_start(self, line: int | str | None) -> IssueBuilder:
        self._line_start = _to_int(line)
        return self

    def set_line_end(self, line: int | str | None) -> IssueBuilder:
        self._line_end = _to_int(line)
        return self

    def set_column_start(self, column: int | str | None) -> IssueBuilder:
        self._column_start = _to_int(column)
        return self

    def set_column_end(self, column: int | str | None) -> IssueBuilder:
        self._column_end = _to_int(column)
        return self

    def set_category(self, category: str | None) -> IssueBuilder:
        self._category = category or ""
        return self

    def set_type(self, issue_type: str | None) -> IssueBuilder:
        self._type = issue_type if issue_type is not None else UNDEFINED
        return self

    def set_severity(self, severity: Severity | str | None) -> IssueBuilder:
        if isinstance(severity, Severity):
            self._severity = severity
        else:
            self._severity = Severity.guess(severity)
        return self

    def set_message(self, message: str | None) -> IssueBuilder:
        self._message = message.strip() if message else ""
        return self

    def set_description(self, description: str | None) -> IssueBuilder:
        self._description = description.strip() if description else ""
        return self

    def build(self) -> Issue:
        """Create the issue from the current builder state.

        The builder can be reused afterwards; later changes do not affect
        issues that were already built.
        """
        line_end = self._line_start if self._line_end is None else self._line_end
        return Issue(
            file_name=self._file_name,
            line_start=self._line_start,
            line_end=line_end,
            column_start=self._column_start,
            column_end=self._column_end,
            category=self._category,
            type=self._type,
            severity=self._severity,
            message=self._message,
            description=self._description,
        )
