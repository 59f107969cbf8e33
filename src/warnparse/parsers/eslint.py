"""ESLint JSON output parser."""

from __future__ import annotations

import json
import threading
from typing import Any, TextIO

from warnparse.exceptions import ParsingError
from warnparse.logging import get_logger
from warnparse.models import Issue, Issues, Severity
from warnparse.parsers.base import LineTransformer, WarningsParser

__all__ = ["ESLintJSONParser"]

logger = get_logger(__name__)


class ESLintJSONParser(WarningsParser):
    """Parse ESLint ``--format json`` output.

    The whole document is read at once; the line transformer is still applied
    to each line before decoding. Output that is not an ESLint result array
    raises ParsingError.
    """

    _transient_attributes = (*WarningsParser._transient_attributes, "_cancel_event")

    def __init__(
        self,
        parser_id: str = "eslint",
        *,
        transformer: LineTransformer | None = None,
        cancel_event: threading.Event | None = None,
    ) -> None:
        super().__init__(parser_id, transformer=transformer)
        self._cancel_event = cancel_event

    def parse(self, source: TextIO) -> Issues:
        transform = self.get_transformer()
        document = "\n".join(transform(line.rstrip("\r\n")) for line in source)
        issues = Issues()
        if not document.strip():
            return issues

        try:
            data = json.loads(document)
        except json.JSONDecodeError as e:
            raise ParsingError(
                f"Invalid ESLint JSON: {e.msg}", parser_id=self.id, line_number=e.lineno
            ) from e
        if not isinstance(data, list):
            raise ParsingError(
                f"Expected a list of ESLint file results, got {type(data).__name__}",
                parser_id=self.id,
            )

        for file_result in data:
            if self._cancel_event is not None and self._cancel_event.is_set():
                raise self.canceled()
            if not isinstance(file_result, dict) or "filePath" not in file_result:
                raise ParsingError(
                    "ESLint file result without 'filePath'", parser_id=self.id
                )
            file_path = file_result["filePath"]
            if not isinstance(file_path, str):
                raise ParsingError(
                    "ESLint 'filePath' must be a string, "
                    f"got {type(file_path).__name__}",
                    parser_id=self.id,
                )
            messages = file_result.get("messages", [])
            if not isinstance(messages, list):
                raise ParsingError(
                    f"ESLint 'messages' of {file_path} must be a list, "
                    f"got {type(messages).__name__}",
                    parser_id=self.id,
                )
            for msg in messages:
                issues.add(self._create_issue(file_path, msg))

        logger.debug("parse_finished", parser_id=self.id, issues=len(issues))
        return issues

    def _field(
        self, msg: dict[str, Any], key: str, expected: type, default: Any
    ) -> Any:
        """Return msg[key] checked against the expected JSON type.

        Missing keys and null values yield the default. Booleans are not
        accepted as integers.

        Raises:
            ParsingError: If the value has another type.
        """
        value = msg.get(key)
        if value is None:
            return default
        if not isinstance(value, expected) or isinstance(value, bool):
            raise ParsingError(
                f"ESLint field '{key}' must be {expected.__name__}, "
                f"got {type(value).__name__}",
                parser_id=self.id,
            )
        return value

    def _create_issue(self, file_path: str, msg: Any) -> Issue:
        if not isinstance(msg, dict):
            raise ParsingError(
                f"ESLint message must be an object, got {type(msg).__name__}",
                parser_id=self.id,
            )
        message = self._field(msg, "message", str, "Unknown error")
        line = self._field(msg, "line", int, 0)
        return (
            self.issue_builder()
            .set_file_name(file_path)
            .set_line_start(line)
            .set_line_end(self._field(msg, "endLine", int, line))
            .set_column_start(self._field(msg, "column", int, 0))
            .set_column_end(self._field(msg, "endColumn", int, 0))
            .set_severity(
                Severity.ERROR
                if self._field(msg, "severity", int, 2) == 2
                else Severity.WARNING_NORMAL
            )
            .set_category(
                self.classify_if_empty(self._field(msg, "ruleId", str, None), message)
            )
            .set_message(message)
            .build()
        )
