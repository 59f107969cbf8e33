"""CLI utilities for warnparse.

This module provides CLI-specific utilities including context management and
output formatting.
"""

from __future__ import annotations

from warnparse.cli.context import CLIContext, ExitCode
from warnparse.cli.output import OutputFormat

__all__ = [
    "CLIContext",
    "ExitCode",
    "OutputFormat",
]
