"""Python warnings parser."""

from __future__ import annotations

import re
import threading

from warnparse.models import Issue, IssueBuilder, Severity
from warnparse.parsers.base import LineTransformer
from warnparse.parsers.regexp import RegexpLineParser

__all__ = ["PythonWarningsParser"]

# Categories that say nothing beyond "this is a warning"
_GENERIC_CATEGORIES = frozenset({"Warning", "UserWarning"})


class PythonWarningsParser(RegexpLineParser):
    """Parse warnings printed by the ``warnings`` module and pytest summaries.

    Example line::

        /app/models.py:42: DeprecationWarning: datetime.utcnow() is deprecated

    Generic categories (``UserWarning``) are replaced by a category guessed
    from the message.
    """

    PATTERN = (
        r"^\s*(?P<file>\S.*?\.py):(?P<line>\d+): "
        r"(?P<category>\w*Warning): (?P<message>.*)$"
    )

    def __init__(
        self,
        parser_id: str = "python",
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
        return "Warning: " in line

    def create_issue(
        self, match: re.Match[str], builder: IssueBuilder, line_number: int
    ) -> Issue | None:
        category = match.group("category")
        if category in _GENERIC_CATEGORIES:
            category = ""
        message = match.group("message")
        return (
            builder.set_file_name(match.group("file"))
            .set_line_start(match.group("line"))
            .set_severity(Severity.WARNING_NORMAL)
            .set_category(self.classify_if_empty(category, message))
            .set_message(message)
            .build()
        )
