"""Byte classes for O(1) token boundary checks.

Every value handed out by the window buffer is either a byte (``int`` in
0..255) or the ``END`` marker. ``END`` belongs to both delimiter classes so a
token always stops at end of stream.

All sets are frozensets for:
- O(1) membership testing
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Usage:
    from fastscan.charsets import is_whitespace

    if is_whitespace(value):
        ...
"""

from __future__ import annotations

from enum import Enum


class EndOfStream(Enum):
    """Marker for "the source has no more bytes".

    A single-member enum so it can never be mistaken for a byte value:
    ``END == -1`` and ``END == 0`` are both False.
    """

    END = "END"

    def __repr__(self) -> str:
        return "END"


END = EndOfStream.END

ByteOrEnd = int | EndOfStream

SPACE = 0x20
TAB = 0x09
LF = 0x0A
CR = 0x0D

LINE_BREAKS: frozenset[ByteOrEnd] = frozenset({CR, LF, END})

WHITESPACE: frozenset[ByteOrEnd] = LINE_BREAKS | frozenset({SPACE, TAB})


def is_whitespace(value: ByteOrEnd) -> bool:
    """Space, tab, CR, LF or end of stream."""
    return value in WHITESPACE


def is_line_break(value: ByteOrEnd) -> bool:
    """CR, LF or end of stream."""
    return value in LINE_BREAKS


__all__ = [
    "END",
    "LINE_BREAKS",
    "WHITESPACE",
    "ByteOrEnd",
    "EndOfStream",
    "is_line_break",
    "is_whitespace",
]
