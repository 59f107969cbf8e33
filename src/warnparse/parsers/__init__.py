"""Warnings parsers for extracting structured issues from tool output."""

from __future__ import annotations

from typing import Any

from warnparse.exceptions import ParserNotFoundError
from warnparse.parsers.base import (
    LineTransformer,
    ParseOutcome,
    ParseStatus,
    WarningsParser,
    identity,
)
from warnparse.parsers.eslint import ESLintJSONParser
from warnparse.parsers.gcc import GccParser
from warnparse.parsers.javac import JavacParser
from warnparse.parsers.python import PythonWarningsParser
from warnparse.parsers.regexp import RegexpDocumentParser, RegexpLineParser
from warnparse.parsers.rust import RustCompilerParser

__all__ = [
    "ESLintJSONParser",
    "GccParser",
    "JavacParser",
    "LineTransformer",
    "ParseOutcome",
    "ParseStatus",
    "PythonWarningsParser",
    "RegexpDocumentParser",
    "RegexpLineParser",
    "RustCompilerParser",
    "WarningsParser",
    "available_parsers",
    "get_parser",
    "identity",
]

_PARSERS: dict[str, type[WarningsParser]] = {
    "eslint": ESLintJSONParser,
    "gcc": GccParser,
    "javac": JavacParser,
    "python": PythonWarningsParser,
    "rustc": RustCompilerParser,
}


def available_parsers() -> list[str]:
    """IDs of all registered parsers, sorted."""
    return sorted(_PARSERS)


def get_parser(parser_id: str, **kwargs: Any) -> WarningsParser:
    """Create a new parser instance for the given ID.

    Args:
        parser_id: ID of a registered parser (see available_parsers()).
        **kwargs: Passed to the parser constructor (e.g. transformer).

    Raises:
        ParserNotFoundError: If no parser is registered under parser_id.
    """
    parser_class = _PARSERS.get(parser_id)
    if parser_class is None:
        raise ParserNotFoundError(
            f"Unknown parser '{parser_id}'",
            parser_id=parser_id,
            available=available_parsers(),
        )
    return parser_class(parser_id, **kwargs)
