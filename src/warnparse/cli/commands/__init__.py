"""Commands of the warnparse CLI."""

from __future__ import annotations

from warnparse.cli.commands.parse import parse
from warnparse.cli.commands.parsers import parsers

__all__ = ["parse", "parsers"]
