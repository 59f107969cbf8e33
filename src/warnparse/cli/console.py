"""Shared Rich Console instance for warnparse CLI output.

Rich detects whether the stream is a terminal: styled output in terminals,
plain text when piped.
"""

from __future__ import annotations

from rich.console import Console

__all__ = ["console"]

console = Console()
