"""warnparse exception hierarchy.

All exceptions can be imported from this package:
    from warnparse.exceptions import ParsingError, ParsingCanceledError
"""

from __future__ import annotations

# Base exception
from warnparse.exceptions.base import WarnparseError

# Configuration exceptions
from warnparse.exceptions.config import ConfigError

# Parsing exceptions
from warnparse.exceptions.parsing import (
    ParserNotFoundError,
    ParsingCanceledError,
    ParsingError,
)

__all__ = [
    # Base
    "WarnparseError",
    # Config
    "ConfigError",
    # Parsing
    "ParserNotFoundError",
    "ParsingCanceledError",
    "ParsingError",
]
