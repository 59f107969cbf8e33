"""warnparse constants.

Single source of truth for category labels, line-number limits and defaults
shared by the parsers, the configuration layer and the CLI.
"""

from __future__ import annotations

# =============================================================================
# Category Labels
# =============================================================================

#: Category assigned to messages about deprecated APIs
DEPRECATION: str = "Deprecation"

#: Category assigned to messages about non-standard or internal APIs
PROPRIETARY_API: str = "Proprietary API"

# =============================================================================
# Line Numbers
# =============================================================================

#: Line number meaning "no specific line / top of file"
NO_LINE: int = 0

#: Bounds of a line number (signed 32-bit range of the reporting tools)
MIN_LINE_NUMBER: int = -(2**31)
MAX_LINE_NUMBER: int = 2**31 - 1

# =============================================================================
# Defaults
# =============================================================================

#: Placeholder used when an issue has no file name or type
UNDEFINED: str = "-"

#: Default encoding when reading tool output from disk
DEFAULT_ENCODING: str = "utf-8"

#: Project configuration file name, looked up in the working directory
PROJECT_CONFIG_FILE: str = "warnparse.yaml"
