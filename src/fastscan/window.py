"""Fixed-capacity window over a byte source.

The window holds one block of bytes and a read cursor. It refills from the
source only when the cursor reaches the end of the valid data, so a token
may straddle any number of refills without being split.

End of stream is sticky: once the source returns no bytes or raises
``OSError``, every later fetch answers ``END`` without calling the source
again.

Thread Safety:
Not thread-safe. A window is owned by exactly one Scanner.

"""

from __future__ import annotations

from fastscan.charsets import END, ByteOrEnd
from fastscan.source import ByteSource
from fastscan.utils.logger import get_logger

logger = get_logger(__name__)

# valid_len value once the source has ended
_ENDED = -1


class WindowBuffer:
    """Fixed-capacity byte window with a cursor.

    Usage:
            >>> import io
            >>> window = WindowBuffer(io.BytesIO(b"ab"), capacity=1)
            >>> window.next_byte(), window.next_byte(), window.next_byte()
        (97, 98, END)

    """

    __slots__ = (
        "_source",
        "_data",
        "_valid_len",
        "_cursor",
        "_refills",
        "_bytes_read",
        "_failure",
    )

    def __init__(self, source: ByteSource, capacity: int) -> None:
        """Initialize an empty window.

        Args:
            source: Byte source to pull blocks from (not owned)
            capacity: Block size in bytes

        Raises:
            ValueError: If capacity < 1
        """
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self._source = source
        self._data = bytearray(capacity)
        self._valid_len = 0
        self._cursor = 0
        self._refills = 0
        self._bytes_read = 0
        self._failure: OSError | None = None

    @property
    def capacity(self) -> int:
        return len(self._data)

    @property
    def valid_len(self) -> int:
        """Bytes of real data in the window (0 once the source has ended)."""
        return 0 if self._valid_len == _ENDED else self._valid_len

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def exhausted(self) -> bool:
        """True once the source has signalled end of stream or failed."""
        return self._valid_len == _ENDED

    @property
    def refills(self) -> int:
        """Number of successful reads from the source."""
        return self._refills

    @property
    def bytes_read(self) -> int:
        return self._bytes_read

    @property
    def failure(self) -> OSError | None:
        """The OSError that ended the stream, if it ended by failure."""
        return self._failure

    def next_byte(self) -> ByteOrEnd:
        """Return the next byte, refilling from the source when empty.

        Returns:
            Byte value in 0..255, or END once the source is exhausted.
        """
        cursor = self._cursor
        if cursor < self._valid_len:
            self._cursor = cursor + 1
            return self._data[cursor]
        if self._valid_len == _ENDED:
            return END
        if not self._refill():
            return END
        self._cursor = 1
        return self._data[0]

    def _refill(self) -> bool:
        """Read one block from offset 0. Returns False and pins END on failure."""
        try:
            count = self._source.readinto(self._data)
        except OSError as exc:
            logger.debug("Byte source failed, treating as end of stream: %s", exc)
            self._failure = exc
            self._pin_end()
            return False

        if count is None or count <= 0:
            logger.debug(
                "Byte source ended after %d bytes in %d blocks",
                self._bytes_read,
                self._refills,
            )
            self._pin_end()
            return False

        self._valid_len = count
        self._cursor = 0
        self._refills += 1
        self._bytes_read += count
        return True

    def _pin_end(self) -> None:
        self._valid_len = _ENDED
        self._cursor = 0
