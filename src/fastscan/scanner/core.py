"""Buffered byte-stream scanner.

Pulls whitespace- or line-delimited tokens out of a byte source one byte at
a time through a fixed-size window, so large inputs are never split or
copied as whole strings.

Thread Safety:
Scanner instances are single-consumer. Token boundaries depend on the
cursor position at call time, so calls must be made in strict sequence.

"""

from __future__ import annotations

from collections.abc import Iterator

from fastscan.config import get_scan_config
from fastscan.errors import EndOfStreamError
from fastscan.scanner.numbers import NumberExtractorMixin
from fastscan.scanner.words import WordReaderMixin
from fastscan.source import ByteSource, as_source, from_bytes, from_stdin
from fastscan.window import WindowBuffer


class Scanner(
    # Token reads (window navigation)
    WordReaderMixin,
    # Conversions on top of next_word()
    NumberExtractorMixin,
):
    """Pull-based tokenizer over a byte source.

    Usage:
            >>> scanner = Scanner.from_bytes(b"3\\n1 2 3\\n")
            >>> n = scanner.next_int()
            >>> scanner.next_int_array(n)
        [1, 2, 3]
            >>> scanner.next_word()
        Traceback (most recent call last):
        ...
        fastscan.errors.EndOfStreamError: end of stream (after 4 tokens)

    The source is borrowed: the scanner never closes it.

    """

    __slots__ = (
        "_source",
        "_window",
        "_encoding",
        "_token_count",
    )

    def __init__(
        self,
        source: ByteSource | bytes | bytearray | memoryview,
        *,
        buffer_size: int | None = None,
        encoding: str | None = None,
    ) -> None:
        """Initialize scanner over a source.

        Args:
            source: Byte source, or a bytes-like object to scan in memory
            buffer_size: Window capacity (defaults to the active ScanConfig)
            encoding: Token codec (defaults to the active ScanConfig)
        """
        config = get_scan_config()
        self._source = as_source(source)
        self._window = WindowBuffer(
            self._source,
            buffer_size if buffer_size is not None else config.buffer_size,
        )
        self._encoding = encoding if encoding is not None else config.encoding
        self._token_count = 0

    @classmethod
    def from_bytes(cls, data: bytes | bytearray | memoryview, **kwargs: object) -> Scanner:
        """Scan an in-memory byte sequence."""
        return cls(from_bytes(data), **kwargs)  # type: ignore[arg-type]

    @classmethod
    def from_stdin(cls, **kwargs: object) -> Scanner:
        """Scan standard input (binary layer)."""
        return cls(from_stdin(), **kwargs)  # type: ignore[arg-type]

    @property
    def window(self) -> WindowBuffer:
        """The underlying window, for inspection."""
        return self._window

    @property
    def exhausted(self) -> bool:
        """True once end of stream has been observed by the window.

        This does not look ahead: trailing whitespace can still separate the
        last token from the end, in which case the next read raises.
        """
        return self._window.exhausted

    @property
    def tokens_read(self) -> int:
        return self._token_count

    def __iter__(self) -> Iterator[str]:
        """Yield words until end of stream."""
        while True:
            try:
                yield self.next_word()
            except EndOfStreamError:
                return

    def __repr__(self) -> str:
        window = self._window
        state = "ended" if window.exhausted else f"{window.cursor}/{window.valid_len}"
        return f"Scanner(tokens={self._token_count}, window={state}, capacity={window.capacity})"
