"""Typed extractor mixin.

Each extractor reads one word and converts it. The raising forms are the
ones to use in tight loops; the ``try_`` forms hand back an Ok/Err so a
malformed token can be handled without an exception.

A malformed token is still consumed: the next call reads the token after
it.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from fastscan.convert import parse_float64, parse_int32, parse_int64
from fastscan.errors import TokenParseError
from fastscan.result import Err, Ok

T = TypeVar("T")

Converter = Callable[[str], Ok[T] | Err[TokenParseError]]


class NumberExtractorMixin:
    """Mixin providing numeric extraction on top of next_word()."""

    _token_count: int

    def next_word(self) -> str:
        """Return the next word. Implemented by WordReaderMixin."""
        raise NotImplementedError

    # =========================================================================
    # Single values
    # =========================================================================

    def next_int(self) -> int:
        """Read a signed 32-bit integer.

        Raises:
            EndOfStreamError: If no token is left
            TokenParseError: If the token is not an int32
        """
        return self._try_next(parse_int32).unwrap()

    def next_long(self) -> int:
        """Read a signed 64-bit integer."""
        return self._try_next(parse_int64).unwrap()

    def next_double(self) -> float:
        """Read a double-precision float."""
        return self._try_next(parse_float64).unwrap()

    def try_next_int(self) -> Ok[int] | Err[TokenParseError]:
        """Read a signed 32-bit integer as a result.

        End of stream still raises EndOfStreamError; only a malformed token
        becomes Err.
        """
        return self._try_next(parse_int32)

    def try_next_long(self) -> Ok[int] | Err[TokenParseError]:
        return self._try_next(parse_int64)

    def try_next_double(self) -> Ok[float] | Err[TokenParseError]:
        return self._try_next(parse_float64)

    # =========================================================================
    # Fixed-length sequences
    # =========================================================================

    def next_int_array(self, n: int) -> list[int]:
        """Read exactly n int32 values, in stream order."""
        return self._read_array(self.next_int, n)

    def next_long_array(self, n: int) -> list[int]:
        """Read exactly n int64 values, in stream order."""
        return self._read_array(self.next_long, n)

    def next_double_array(self, n: int) -> list[float]:
        """Read exactly n float64 values, in stream order."""
        return self._read_array(self.next_double, n)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _try_next(self, convert: Converter[T]) -> Ok[T] | Err[TokenParseError]:
        token = self.next_word()
        result = convert(token)
        if isinstance(result, Err):
            # _token_count already includes this token
            return Err(result.error.at(self._token_count - 1))
        return result

    @staticmethod
    def _read_array(read: Callable[[], T], n: int) -> list[T]:
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        return [read() for _ in range(n)]
