"""Ordered collection of parsed issues."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable, Iterator
from typing import Any, overload

from warnparse.models.issue import Issue, Severity

__all__ = ["Issues"]


class Issues:
    """Ordered collection of the issues returned by a parser.

    Issues keep the order in which they were added. Duplicates are allowed:
    a tool reporting the same warning twice yields two entries.
    """

    def __init__(self, issues: Iterable[Issue] = ()) -> None:
        self._issues: list[Issue] = list(issues)

    def add(self, issue: Issue) -> Issues:
        self._issues.append(issue)
        return self

    def add_all(self, issues: Iterable[Issue]) -> Issues:
        self._issues.extend(issues)
        return self

    def filter(self, predicate: Callable[[Issue], bool]) -> Issues:
        """Return a new collection with the issues matching the predicate."""
        return Issues(issue for issue in self._issues if predicate(issue))

    def by_category(self, category: str) -> Issues:
        return self.filter(lambda issue: issue.category == category)

    def size_of(self, severity: Severity) -> int:
        """Number of issues with the given severity."""
        return sum(1 for issue in self._issues if issue.severity is severity)

    @property
    def categories(self) -> dict[str, int]:
        """Issue count per non-empty category, in first-seen order."""
        counts = Counter(issue.category for issue in self._issues if issue.category)
        return dict(counts)

    def is_empty(self) -> bool:
        return not self._issues

    def to_dicts(self) -> list[dict[str, Any]]:
        return [issue.to_dict() for issue in self._issues]

    def __len__(self) -> int:
        return len(self._issues)

    def __iter__(self) -> Iterator[Issue]:
        return iter(self._issues)

    @overload
    def __getitem__(self, index: int) -> Issue: ...

    @overload
    def __getitem__(self, index: slice) -> list[Issue]: ...

    def __getitem__(self, index: int | slice) -> Issue | list[Issue]:
        return self._issues[index]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Issues):
            return NotImplemented
        return self._issues == other._issues

    def __repr__(self) -> str:
        return f"Issues(size={len(self._issues)})"
