"""warnparse - parse compiler and linter output into structured issues."""

from __future__ import annotations

__version__ = "0.1.0"

from warnparse.categories import classify_if_empty, classify_warning  # noqa: E402
from warnparse.exceptions import (  # noqa: E402
    ParsingCanceledError,
    ParsingError,
    WarnparseError,
)
from warnparse.lines import convert_line_number  # noqa: E402
from warnparse.models import Issue, IssueBuilder, Issues, Severity  # noqa: E402
from warnparse.parsers import (  # noqa: E402
    ParseOutcome,
    ParseStatus,
    RegexpDocumentParser,
    RegexpLineParser,
    WarningsParser,
    available_parsers,
    get_parser,
)

__all__ = [
    "__version__",
    # Helpers
    "classify_if_empty",
    "classify_warning",
    "convert_line_number",
    # Errors
    "ParsingCanceledError",
    "ParsingError",
    "WarnparseError",
    # Models
    "Issue",
    "IssueBuilder",
    "Issues",
    "Severity",
    # Parsers
    "ParseOutcome",
    "ParseStatus",
    "RegexpDocumentParser",
    "RegexpLineParser",
    "WarningsParser",
    "available_parsers",
    "get_parser",
]
