"""CLI context and exit codes for warnparse."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from warnparse.config import WarnparseConfig

__all__ = ["ExitCode", "CLIContext"]


class ExitCode(IntEnum):
    """Standard exit codes for the warnparse CLI.

    - 0 for success
    - 1 for failure (parse error, unknown parser, bad config)
    - 130 for an operator abort (128 + SIGINT=2)
    """

    SUCCESS = 0
    FAILURE = 1
    INTERRUPTED = 130


@dataclass(frozen=True, slots=True)
class CLIContext:
    """Global CLI options and the loaded configuration.

    Attributes:
        config: Loaded warnparse configuration.
        quiet: Suppress non-essential output such as summary lines.
    """

    config: WarnparseConfig
    quiet: bool = False
