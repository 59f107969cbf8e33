"""Tests for the Issues collection."""

from __future__ import annotations

from warnparse.models import Issue, Issues, Severity


def _issue(
    message: str, category: str = "", severity: Severity = Severity.WARNING_NORMAL
) -> Issue:
    return Issue(message=message, category=category, severity=severity)


class TestIssues:
    """Tests for Issues."""

    def test_empty(self) -> None:
        issues = Issues()
        assert issues.is_empty()
        assert len(issues) == 0
        assert issues.to_dicts() == []
        assert issues.categories == {}

    def test_keeps_insertion_order_and_duplicates(self) -> None:
        a, b = _issue("a"), _issue("b")
        issues = Issues().add(a).add(b).add(a)

        assert list(issues) == [a, b, a]
        assert issues[0] is a
        assert issues[1:] == [b, a]

    def test_add_all(self) -> None:
        issues = Issues([_issue("a")]).add_all([_issue("b"), _issue("c")])
        assert [issue.message for issue in issues] == ["a", "b", "c"]

    def test_filter_returns_new_collection(self) -> None:
        issues = Issues([_issue("keep"), _issue("drop")])
        kept = issues.filter(lambda issue: issue.message == "keep")

        assert len(kept) == 1
        assert len(issues) == 2

    def test_by_category(self) -> None:
        issues = Issues(
            [_issue("a", "Deprecation"), _issue("b"), _issue("c", "Deprecation")]
        )
        assert [issue.message for issue in issues.by_category("Deprecation")] == [
            "a",
            "c",
        ]

    def test_size_of(self) -> None:
        issues = Issues(
            [
                _issue("a", severity=Severity.ERROR),
                _issue("b"),
                _issue("c", severity=Severity.ERROR),
            ]
        )
        assert issues.size_of(Severity.ERROR) == 2
        assert issues.size_of(Severity.WARNING_NORMAL) == 1
        assert issues.size_of(Severity.WARNING_LOW) == 0

    def test_categories_skip_empty(self) -> None:
        issues = Issues(
            [
                _issue("a", "Deprecation"),
                _issue("b"),
                _issue("c", "unchecked"),
                _issue("d", "Deprecation"),
            ]
        )
        assert issues.categories == {"Deprecation": 2, "unchecked": 1}

    def test_equality(self) -> None:
        assert Issues([_issue("a")]) == Issues([_issue("a")])
        assert Issues([_issue("a")]) != Issues([_issue("b")])

    def test_repr(self) -> None:
        assert repr(Issues([_issue("a")])) == "Issues(size=1)"
