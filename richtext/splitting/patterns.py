"""Delimiter splitting of plain strings."""

from __future__ import annotations

import re


def split_text(text: str, pattern: re.Pattern[str]) -> list[str]:
    """Split a string around matches of a pattern, keeping empty parts.

    Unlike re.split(), trailing empty strings are always kept, consecutive
    delimiters produce empty strings, and capturing groups in the pattern do
    not end up in the result. A zero-width match at the very start of the
    string does not produce a leading empty part.

    Args:
        text: The string to split
        pattern: Compiled delimiter pattern

    Returns:
        At least one substring; ``[text]`` when the pattern does not match

    Example:
        >>> split_text("a,,b,", re.compile(","))
        ['a', '', 'b', '']
    """
    parts: list[str] = []
    start = 0
    for match in pattern.finditer(text):
        if match.end() == 0:
            continue
        parts.append(text[start : match.start()])
        start = match.end()
    parts.append(text[start:])
    return parts
