"""Heuristic category classification of warning messages."""

from __future__ import annotations

from warnparse.constants import DEPRECATION, PROPRIETARY_API

__all__ = ["capitalize", "classify_if_empty", "classify_warning"]


def capitalize(value: str | None) -> str:
    """Title-case the first character and leave the rest untouched.

    Unlike ``str.capitalize`` the remaining characters keep their case, so
    ``"unusedImport"`` becomes ``"UnusedImport"``. The first character is
    mapped to its title case (``"ǆ"`` becomes ``"ǅ"``, not ``"Ǆ"``); a
    character whose title case is longer than one character, such as
    ``"ß"``, is kept as is.
    """
    if not value:
        return ""
    first = value[0].title()
    if len(first) != 1:
        first = value[0]
    return first + value[1:]


def classify_warning(message: str | None) -> str:
    """Guess a category from the warning message.

    Matching is a case-sensitive substring test; "proprietary" is checked
    before "deprecated".

    Args:
        message: The message to check.

    Returns:
        The category, or an empty string if unknown.
    """
    if not message:
        return ""
    if "proprietary" in message:
        return PROPRIETARY_API
    if "deprecated" in message:
        return DEPRECATION
    return ""


def classify_if_empty(group: str | None, message: str | None) -> str:
    """Return the tool-reported category, or a guessed one if there is none.

    Args:
        group: The category reported by the tool (might be empty).
        message: The warning message used as fallback.

    Returns:
        The capitalized group if it is not empty, otherwise the result of
        classify_warning(message).
    """
    category = capitalize(group)
    if not category:
        category = classify_warning(message)
    return category
