"""Line number normalization for tool output."""

from __future__ import annotations

import re

from warnparse.constants import MAX_LINE_NUMBER, MIN_LINE_NUMBER, NO_LINE

__all__ = ["convert_line_number"]

_INTEGER_PATTERN = re.compile(r"[+-]?\d+")


def convert_line_number(line_number: str | None) -> int:
    """Convert a textual line number to an integer.

    Blank input and anything that is not a plain base-10 integer in the
    signed 32-bit range yields 0, which marks an issue at the top of the
    file. Decimal digits of any script are accepted ("١٢" is 12). Never
    raises.

    Args:
        line_number: The line number as reported by the tool.

    Returns:
        The line number, or 0 if it cannot be interpreted.

    Example:
        >>> convert_line_number("42")
        42
        >>> convert_line_number("4x2")
        0
    """
    if line_number is None or not line_number.strip():
        return NO_LINE
    if _INTEGER_PATTERN.fullmatch(line_number) is None:
        return NO_LINE
    value = int(line_number)
    if not MIN_LINE_NUMBER <= value <= MAX_LINE_NUMBER:
        return NO_LINE
    return value
