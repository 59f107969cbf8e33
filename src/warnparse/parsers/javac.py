"""javac and Maven compiler plugin output parser."""

from __future__ import annotations

import re
import threading

from warnparse.models import Issue, IssueBuilder, Severity
from warnparse.parsers.base import LineTransformer
from warnparse.parsers.regexp import RegexpLineParser

__all__ = ["JavacParser"]


class JavacParser(RegexpLineParser):
    """Parse javac warnings in plain and Maven format.

    Supported forms::

        Foo.java:12: warning: [unchecked] unchecked call to add(E)
        [WARNING] /src/Foo.java:[12,8] [deprecation] getDate() has been deprecated

    The lint key in brackets (``[deprecation]``) becomes the capitalized
    category. Messages without one are classified from their text, which
    catches the "internal proprietary API" warnings javac reports without a
    key.
    """

    PATTERN = (
        r"^(?:\[(?P<level>WARNING|ERROR)\]\s+)?"
        r"(?P<file>\S.*?\.java):"
        r"(?:\[(?P<maven_line>\d+)(?:,(?P<column>\d+))?\]|"
        r"(?P<line>\d+):\s*(?P<kind>warning|error):)"
        r"\s*(?:\[(?P<key>[\w-]+)\]\s*)?(?P<message>.+)$"
    )

    def __init__(
        self,
        parser_id: str = "javac",
        *,
        transformer: LineTransformer | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        super().__init__(
            parser_id,
            self.PATTERN,
            transformer=transformer,
            cancel_event=cancel_event,
        )

    def is_line_interesting(self, line: str) -> bool:
        return ".java:" in line

    def create_issue(
        self, match: re.Match[str], builder: IssueBuilder, line_number: int
    ) -> Issue | None:
        level = match.group("level") or match.group("kind") or "warning"
        message = match.group("message")
        return (
            builder.set_file_name(match.group("file"))
            .set_line_start(match.group("maven_line") or match.group("line"))
            .set_column_start(match.group("column"))
            .set_severity(
                Severity.ERROR if level.lower() == "error" else Severity.WARNING_NORMAL
            )
            .set_category(self.classify_if_empty(match.group("key"), message))
            .set_message(message)
            .build()
        )
