"""Rust compiler error parser."""

from __future__ import annotations

import re
import threading

from warnparse.models import Issue, IssueBuilder, Severity
from warnparse.parsers.base import LineTransformer
from warnparse.parsers.regexp import RegexpDocumentParser

__all__ = ["RustCompilerParser"]


class RustCompilerParser(RegexpDocumentParser):
    """Parse rustc and cargo diagnostics.

    A diagnostic spans two lines: the headline with optional error code and
    the ``-->`` location line. Headlines without a location (e.g. "aborting
    due to previous error") are skipped.
    """

    PATTERN = (
        r"^(?P<severity>error|warning)(?:\[(?P<code>E\d+)\])?: (?P<message>.+)\n"
        r"\s*--> (?P<file>[^:\n]+):(?P<line>\d+):(?P<column>\d+)"
    )

    def __init__(
        self,
        parser_id: str = "rustc",
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

    def create_issue(self, match: re.Match[str], builder: IssueBuilder) -> Issue | None:
        message = match.group("message")
        severity = (
            Severity.ERROR
            if match.group("severity") == "error"
            else Severity.WARNING_NORMAL
        )
        return (
            builder.set_file_name(match.group("file"))
            .set_line_start(match.group("line"))
            .set_column_start(match.group("column"))
            .set_severity(severity)
            .set_category(self.classify_if_empty(match.group("code"), message))
            .set_message(message)
            .build()
        )
