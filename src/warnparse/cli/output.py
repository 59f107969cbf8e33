"""Output formatting utilities for the warnparse CLI."""

from __future__ import annotations

import json
from enum import Enum
from typing import Any

from rich.markup import escape
from rich.table import Table

from warnparse.models import Issues, Severity

__all__ = [
    "OutputFormat",
    "format_error",
    "format_json",
    "format_summary",
    "issues_table",
]

_SEVERITY_STYLES = {
    Severity.ERROR: "bold red",
    Severity.WARNING_HIGH: "red",
    Severity.WARNING_NORMAL: "yellow",
    Severity.WARNING_LOW: "cyan",
}


class OutputFormat(str, Enum):
    """Supported output formats for the parse command.

    Values:
        TEXT: Rich table for humans.
        JSON: Machine-readable JSON array of issues.
    """

    TEXT = "text"
    JSON = "json"


def format_error(
    message: str, details: list[str] | None = None, suggestion: str | None = None
) -> str:
    """Format an error message with optional details and suggestion.

    Example:
        >>> print(format_error("Unknown parser 'foo'",
        ...                    suggestion="Run 'warnparse parsers'"))
        Error: Unknown parser 'foo'
        Suggestion: Run 'warnparse parsers'
    """
    lines = [f"Error: {message}"]

    if details:
        for detail in details:
            lines.append(f"  {detail}")

    if suggestion:
        lines.append(f"Suggestion: {suggestion}")

    return "\n".join(lines)


def format_json(data: Any) -> str:
    """Format data as JSON with 2-space indentation."""
    return json.dumps(data, indent=2)


def format_summary(issues: Issues) -> str:
    """One-line count of issues per severity, e.g. "3 issues (1 error, 2 normal)"."""
    total = len(issues)
    noun = "issue" if total == 1 else "issues"
    counts = [
        f"{issues.size_of(severity)} {severity.value}"
        for severity in Severity
        if issues.size_of(severity)
    ]
    if not counts:
        return f"{total} {noun}"
    return f"{total} {noun} ({', '.join(counts)})"


def issues_table(issues: Issues, title: str | None = None) -> Table:
    """Build a Rich table with one row per issue."""
    table = Table(title=title, show_lines=False)
    table.add_column("File", overflow="fold")
    table.add_column("Line", justify="right")
    table.add_column("Severity")
    table.add_column("Category")
    table.add_column("Message", overflow="fold")

    for issue in issues:
        location = str(issue.line_start)
        if issue.column_start:
            location = f"{location}:{issue.column_start}"
        table.add_row(
            escape(issue.file_name),
            location,
            f"[{_SEVERITY_STYLES[issue.severity]}]{issue.severity.value}[/]",
            escape(issue.category) or "-",
            escape(issue.message),
        )
    return table
