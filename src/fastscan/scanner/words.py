"""Word and line reader mixin."""

from __future__ import annotations

from fastscan.charsets import END, LINE_BREAKS, WHITESPACE, ByteOrEnd
from fastscan.errors import EndOfStreamError, TokenDecodeError
from fastscan.window import WindowBuffer


class WordReaderMixin:
    """Mixin providing delimiter-bounded token reads.

    Both reads skip leading delimiters, then accumulate bytes until the next
    delimiter. The delimiter that ends a token is consumed with it.

    """

    # These will be set by the Scanner class
    _window: WindowBuffer
    _encoding: str
    _token_count: int

    def next_word(self) -> str:
        """Return the next run of non-whitespace bytes.

        Raises:
            EndOfStreamError: If the source ends before a token starts
            TokenDecodeError: If the bytes are invalid in the configured encoding
        """
        return self._read_token(WHITESPACE)

    def next_line(self) -> str:
        """Return the next non-empty line, without its line break.

        Spaces and tabs inside the line are kept. Empty lines are skipped
        because consecutive line breaks count as one delimiter run.

        Raises:
            EndOfStreamError: If the source ends before a line starts
            TokenDecodeError: If the bytes are invalid in the configured encoding
        """
        return self._read_token(LINE_BREAKS)

    def next_word_array(self, n: int) -> list[str]:
        """Read exactly n words, in stream order."""
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        return [self.next_word() for _ in range(n)]

    def _read_token(self, delimiters: frozenset[ByteOrEnd]) -> str:
        next_byte = self._window.next_byte

        value = next_byte()
        while value in delimiters:
            if value is END:
                raise EndOfStreamError(token_index=self._token_count)
            value = next_byte()

        raw = bytearray()
        append = raw.append
        while value not in delimiters:
            append(value)  # type: ignore[arg-type]  # END is a delimiter
            value = next_byte()

        self._token_count += 1
        try:
            return raw.decode(self._encoding)
        except UnicodeDecodeError:
            raise TokenDecodeError(bytes(raw), self._encoding) from None
