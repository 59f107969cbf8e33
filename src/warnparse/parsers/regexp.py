"""Base classes for parsers driven by a regular expression."""

from __future__ import annotations

import re
import threading
from abc import abstractmethod
from collections.abc import Iterator
from typing import TextIO

from warnparse.logging import get_logger
from warnparse.models import Issue, IssueBuilder, Issues
from warnparse.parsers.base import LineTransformer, WarningsParser

__all__ = ["RegexpLineParser", "RegexpDocumentParser"]

logger = get_logger(__name__)


def _strip_newline(line: str) -> str:
    return line.rstrip("\r\n")


class _RegexpParser(WarningsParser):
    """Shared state of the regexp parsers: compiled pattern and cancel event."""

    _transient_attributes = (*WarningsParser._transient_attributes, "_cancel_event")

    def __init__(
        self,
        parser_id: str,
        pattern: str | re.Pattern[str],
        *,
        flags: int = 0,
        transformer: LineTransformer | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        super().__init__(parser_id, transformer=transformer)
        if isinstance(pattern, re.Pattern):
            self._pattern = pattern
        else:
            self._pattern = re.compile(pattern, flags)
        self._cancel_event = cancel_event

    @property
    def pattern(self) -> re.Pattern[str]:
        return self._pattern

    def _check_canceled(self) -> None:
        if self._cancel_event is not None and self._cancel_event.is_set():
            raise self.canceled()

    def _transformed_lines(self, source: TextIO) -> Iterator[str]:
        transform = self.get_transformer()
        for line in source:
            yield transform(_strip_newline(line))


class RegexpLineParser(_RegexpParser):
    """Parser that matches its pattern against every line of the input.

    Subclasses implement create_issue() and may override
    is_line_interesting() as a cheap pre-filter before the pattern runs.
    Lines are numbered from 1.
    """

    def parse(self, source: TextIO) -> Issues:
        issues = Issues()
        log = logger.bind(parser_id=self.id)
        log.debug("parse_started", mode="line")

        line_number = 0
        for line in self._transformed_lines(source):
            line_number += 1
            self._check_canceled()
            if not self.is_line_interesting(line):
                continue
            match = self._pattern.search(line)
            if match is None:
                continue
            issue = self.create_issue(match, self.issue_builder(), line_number)
            if issue is not None:
                issues.add(issue)

        log.debug("parse_finished", lines=line_number, issues=len(issues))
        return issues

    def is_line_interesting(self, line: str) -> bool:
        """Return False to skip the line without running the pattern."""
        return True

    @abstractmethod
    def create_issue(
        self, match: re.Match[str], builder: IssueBuilder, line_number: int
    ) -> Issue | None:
        """Create an issue from a matching line.

        Args:
            match: The pattern match on the transformed line.
            builder: A fresh builder seeded with this parser's ID.
            line_number: Position of the line in the input (1-based).

        Returns:
            The issue, or None to ignore this match.
        """
        raise NotImplementedError


class RegexpDocumentParser(_RegexpParser):
    """Parser that matches its pattern against the whole document.

    Every line is transformed first; the lines are then joined with "\\n"
    and scanned with finditer(), so patterns may span several lines.
    re.MULTILINE is enabled by default; flags are ignored when the pattern is
    passed precompiled.
    """

    def __init__(
        self,
        parser_id: str,
        pattern: str | re.Pattern[str],
        *,
        multiline: bool = True,
        flags: int = 0,
        transformer: LineTransformer | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        if multiline:
            flags |= re.MULTILINE
        super().__init__(
            parser_id,
            pattern,
            flags=flags,
            transformer=transformer,
            cancel_event=cancel_event,
        )

    def parse(self, source: TextIO) -> Issues:
        issues = Issues()
        log = logger.bind(parser_id=self.id)
        log.debug("parse_started", mode="document")

        document = "\n".join(self._transformed_lines(source))
        self._check_canceled()
        for match in self._pattern.finditer(document):
            self._check_canceled()
            issue = self.create_issue(match, self.issue_builder())
            if issue is not None:
                issues.add(issue)

        log.debug("parse_finished", characters=len(document), issues=len(issues))
        return issues

    @abstractmethod
    def create_issue(self, match: re.Match[str], builder: IssueBuilder) -> Issue | None:
        """Create an issue from a match in the document.

        Args:
            match: The pattern match.
            builder: A fresh builder seeded with this parser's ID.

        Returns:
            The issue, or None to ignore this match.
        """
        raise NotImplementedError
