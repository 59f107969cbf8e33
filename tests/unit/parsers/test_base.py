"""Tests for the WarningsParser base class."""

from __future__ import annotations

import io
import pickle
import threading
from typing import TextIO

import pytest

from warnparse.exceptions import ParsingCanceledError, ParsingError
from warnparse.models import IssueBuilder, Issues
from warnparse.parsers.base import ParseStatus, WarningsParser, identity


class LineEchoParser(WarningsParser):
    """Creates one issue per non-empty line, message = transformed line."""

    def parse(self, source: TextIO) -> Issues:
        transform = self.get_transformer()
        issues = Issues()
        for line in source:
            text = transform(line.rstrip("\n"))
            if text:
                issues.add(self.issue_builder().set_message(text).build())
        return issues


class FailingParser(WarningsParser):
    def __init__(self, error: Exception) -> None:
        super().__init__("failing")
        self._error = error

    def parse(self, source: TextIO) -> Issues:
        raise self._error


class TestIdentity:
    def test_id(self) -> None:
        parser = LineEchoParser("echo")
        assert parser.id == "echo"
        assert parser.get_id() == "echo"

    def test_empty_id_is_allowed(self) -> None:
        assert LineEchoParser("").id == ""

    def test_none_id_is_rejected(self) -> None:
        with pytest.raises(ValueError, match="must not be None"):
            LineEchoParser(None)  # type: ignore[arg-type]

    def test_id_is_read_only(self) -> None:
        parser = LineEchoParser("echo")
        with pytest.raises(AttributeError):
            parser.id = "other"  # type: ignore[misc]

    def test_str(self) -> None:
        assert str(LineEchoParser("echo")) == "echo (LineEchoParser)"

    def test_cannot_instantiate_abstract_base(self) -> None:
        with pytest.raises(TypeError):
            WarningsParser("abstract")  # type: ignore[abstract]


class TestTransformer:
    def test_default_is_identity(self) -> None:
        parser = LineEchoParser("echo")
        transform = parser.get_transformer()
        assert transform is identity
        for text in ["", "abc", "  spaced  ", "\x1b[31mred"]:
            assert transform(text) == text

    def test_property_never_none(self) -> None:
        assert LineEchoParser("echo").transformer is not None

    def test_set_transformer(self) -> None:
        parser = LineEchoParser("echo")
        parser.set_transformer(str.upper)
        assert parser.get_transformer()("abc") == "ABC"

    def test_property_setter(self) -> None:
        parser = LineEchoParser("echo")
        parser.transformer = str.strip
        assert parser.transformer("  x  ") == "x"

    def test_constructor_transformer(self) -> None:
        parser = LineEchoParser("echo", transformer=str.lower)
        assert parser.get_transformer()("ABC") == "abc"

    def test_set_none_is_rejected_and_keeps_previous(self) -> None:
        parser = LineEchoParser("echo")
        parser.set_transformer(str.upper)

        with pytest.raises(ValueError, match="must not be None"):
            parser.set_transformer(None)  # type: ignore[arg-type]

        assert parser.get_transformer()("abc") == "ABC"

    def test_set_none_before_any_transformer_keeps_identity(self) -> None:
        parser = LineEchoParser("echo")
        with pytest.raises(ValueError):
            parser.set_transformer(None)  # type: ignore[arg-type]
        assert parser.get_transformer() is identity

    def test_set_non_callable_is_rejected(self) -> None:
        parser = LineEchoParser("echo")
        with pytest.raises(TypeError, match="callable"):
            parser.set_transformer("upper")  # type: ignore[arg-type]

    def test_transformer_applied_during_parse(self) -> None:
        parser = LineEchoParser(
            "echo", transformer=lambda line: line.removeprefix("> ")
        )
        issues = parser.parse(io.StringIO("> first\n> second\n"))
        assert [issue.message for issue in issues] == ["first", "second"]

    def test_parse_does_not_change_transformer(self) -> None:
        parser = LineEchoParser("echo", transformer=str.upper)
        transform = parser.get_transformer()
        parser.parse(io.StringIO("a\nb\n"))
        assert parser.get_transformer() is transform
        assert parser.id == "echo"

    def test_concurrent_set_transformer(self) -> None:
        """Verify installs from many threads leave one of the installed functions."""
        parser = LineEchoParser("echo")
        candidates = [lambda line, i=i: f"{i}:{line}" for i in range(20)]

        threads = [
            threading.Thread(target=parser.set_transformer, args=(candidate,))
            for candidate in candidates
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert parser.get_transformer() in candidates


class TestHelpers:
    def test_get_line_number(self) -> None:
        parser = LineEchoParser("echo")
        assert parser.get_line_number("17") == 17
        assert parser.get_line_number("seventeen") == 0

    def test_static_helpers(self) -> None:
        assert WarningsParser.convert_line_number("5") == 5
        assert WarningsParser.classify_warning("is deprecated") == "Deprecation"
        assert WarningsParser.classify_if_empty("", "proprietary") == "Proprietary API"


class TestIssueBuilder:
    def test_builder_seeded_with_id(self) -> None:
        parser = LineEchoParser("echo")
        builder = parser.issue_builder()
        assert isinstance(builder, IssueBuilder)
        assert builder.type == "echo"
        assert builder.build().type == "echo"

    def test_builders_are_independent(self) -> None:
        parser = LineEchoParser("echo")
        first = parser.issue_builder()
        second = parser.issue_builder()

        assert first is not second
        first.set_message("changed").set_type("other")

        assert second.type == "echo"
        assert second.build().message == ""

    def test_parsed_issues_have_parser_type(self) -> None:
        issues = LineEchoParser("echo").parse(io.StringIO("a\nb\n"))
        assert {issue.type for issue in issues} == {"echo"}


class TestTryParse:
    def test_success(self) -> None:
        outcome = LineEchoParser("echo").try_parse(io.StringIO("line\n"))

        assert outcome.status is ParseStatus.SUCCESS
        assert outcome.success is True
        assert len(outcome.issues) == 1
        assert outcome.error is None

    def test_parsing_error(self) -> None:
        error = ParsingError("broken input", parser_id="failing", line_number=3)
        outcome = FailingParser(error).try_parse(io.StringIO(""))

        assert outcome.status is ParseStatus.FAILED
        assert outcome.success is False
        assert outcome.error is error
        assert len(outcome.issues) == 0

    def test_canceled(self) -> None:
        error = ParsingCanceledError(parser_id="failing")
        outcome = FailingParser(error).try_parse(io.StringIO(""))

        assert outcome.status is ParseStatus.CANCELED
        assert outcome.error is error

    def test_other_exceptions_propagate(self) -> None:
        with pytest.raises(RuntimeError):
            FailingParser(RuntimeError("bug")).try_parse(io.StringIO(""))

    def test_canceled_error_helper(self) -> None:
        error = LineEchoParser("echo").canceled()
        assert isinstance(error, ParsingCanceledError)
        assert error.parser_id == "echo"
        assert "echo (LineEchoParser)" in error.message


class TestPickling:
    def test_round_trip_keeps_id_and_drops_transformer(self) -> None:
        parser = LineEchoParser("echo")
        parser.set_transformer(str.upper)

        restored = pickle.loads(pickle.dumps(parser))

        assert restored.id == "echo"
        assert restored.get_transformer() is identity
        restored.set_transformer(str.lower)
        assert restored.get_transformer()("ABC") == "abc"

    def test_pickling_leaves_source_parser_untouched(self) -> None:
        parser = LineEchoParser("echo", transformer=str.upper)
        pickle.dumps(parser)
        assert parser.get_transformer()("a") == "A"
