"""Text splitting and conversion helpers.

Example:
    >>> from fastscan.utils.text import split
    >>> split("a,,b;c", ",;")
    ['a', 'b', 'c']
"""

from __future__ import annotations

import unicodedata
from collections.abc import Iterable


def split(text: str, delimiters: str) -> list[str]:
    """Split on any of the delimiter characters, dropping empty pieces.

    Unlike ``str.split``, every character of ``delimiters`` is a separator on
    its own and runs of separators never produce empty strings.

    Args:
        text: Text to split
        delimiters: Set of single-character separators

    Returns:
        Non-empty pieces in order

    Examples:
        >>> split("  a b  ", " ")
        ['a', 'b']
        >>> split("", ",")
        []
    """
    if not delimiters:
        return [text] if text else []

    pieces: list[str] = []
    start = 0
    for i, char in enumerate(text):
        if char in delimiters:
            if i > start:
                pieces.append(text[start:i])
            start = i + 1
    if start < len(text):
        pieces.append(text[start:])
    return pieces


def field(text: str, delimiter: str, index: int) -> str:
    """Return the index-th field of ``text.split(delimiter)``.

    Raises:
        IndexError: If there are not enough fields
    """
    return text.split(delimiter)[index]


def code_point_length(text: str) -> int:
    """Length in code points after NFC normalization.

    Combining sequences that have a precomposed form count once, so
    ``"\\u304b\\u3099"`` and ``"\\u304c"`` both have length 1.
    """
    return len(unicodedata.normalize("NFC", text))


def to_ints(values: Iterable[str]) -> list[int]:
    """Convert each string with ``int()``."""
    return [int(value) for value in values]


def to_floats(values: Iterable[str]) -> list[float]:
    return [float(value) for value in values]


def column_ints(lines: Iterable[str], delimiter: str, index: int) -> list[int]:
    """Take one delimited column from each line as int."""
    return [int(field(line, delimiter, index)) for line in lines]


def column_floats(lines: Iterable[str], delimiter: str, index: int) -> list[float]:
    """Take one delimited column from each line as float."""
    return [float(field(line, delimiter, index)) for line in lines]
