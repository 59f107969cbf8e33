"""GCC and Clang diagnostic parser."""

from __future__ import annotations

import re
import threading

from warnparse.models import Issue, IssueBuilder, Severity
from warnparse.parsers.base import LineTransformer
from warnparse.parsers.regexp import RegexpLineParser

__all__ = ["GccParser"]

_SEVERITIES = {
    "error": Severity.ERROR,
    "fatal error": Severity.ERROR,
    "warning": Severity.WARNING_NORMAL,
    "note": Severity.WARNING_LOW,
}


class GccParser(RegexpLineParser):
    """Parse ``file:line[:column]: warning|error|note: message [-Wflag]``.

    Windows paths with a drive letter (``C:\\src\\foo.c``) are accepted. The
    warning flag, if reported, becomes the capitalized category (without
    the ``-W`` prefix); otherwise the category is guessed from the message.
    """

    PATTERN = (
        r"^(?P<file>(?:[A-Za-z]:[\\/])?[^\s:][^:]*):"
        r"(?P<line>\d+):(?:(?P<column>\d+):)?\s*"
        r"(?P<severity>fatal error|error|warning|note):\s*"
        r"(?P<message>.*?)(?:\s+\[(?P<flag>-W[^\]]+)\])?$"
    )

    def __init__(
        self,
        parser_id: str = "gcc",
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
        return "warning" in line or "error" in line or "note" in line

    def create_issue(
        self, match: re.Match[str], builder: IssueBuilder, line_number: int
    ) -> Issue | None:
        message = match.group("message")
        flag = match.group("flag") or ""
        return (
            builder.set_file_name(match.group("file"))
            .set_line_start(match.group("line"))
            .set_column_start(match.group("column"))
            .set_severity(_SEVERITIES[match.group("severity")])
            .set_category(self.classify_if_empty(flag.removeprefix("-W"), message))
            .set_message(message)
            .build()
        )
