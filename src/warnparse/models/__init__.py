"""Issue data models produced by the parsers."""

from __future__ import annotations

from warnparse.models.issue import Issue, IssueBuilder, Severity
from warnparse.models.issues import Issues

__all__ = [
    "Issue",
    "IssueBuilder",
    "Issues",
    "Severity",
]
