"""Reusable line transformers for WarningsParser.set_transformer()."""

from __future__ import annotations

import re

from warnparse.parsers.base import LineTransformer, identity

__all__ = ["compose", "strip_ansi", "strip_prefix"]

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")


def strip_ansi(line: str) -> str:
    """Remove ANSI color and cursor escape sequences."""
    return _ANSI_ESCAPE.sub("", line)


def strip_prefix(pattern: str | re.Pattern[str]) -> LineTransformer:
    """Create a transformer that removes a prefix matched at the line start.

    Useful for wrappers that decorate every line, e.g. timestamps added by CI
    runners or ``[javac]`` markers added by Ant.

    Example:
        >>> transform = strip_prefix(r"\\[\\w+\\]\\s*")
        >>> transform("[javac] Foo.java:3: warning: ...")
        'Foo.java:3: warning: ...'
    """
    compiled = re.compile(pattern) if isinstance(pattern, str) else pattern

    def transform(line: str) -> str:
        match = compiled.match(line)
        return line[match.end() :] if match else line

    return transform


def compose(*transformers: LineTransformer) -> LineTransformer:
    """Chain transformers, applied left to right."""
    if not transformers:
        return identity
    if len(transformers) == 1:
        return transformers[0]

    def transform(line: str) -> str:
        for transformer in transformers:
            line = transformer(line)
        return line

    return transform
