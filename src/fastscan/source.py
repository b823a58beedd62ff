"""Byte sources consumed by the window buffer.

A byte source is anything with ``readinto(buffer) -> int | None``, the
contract shared by ``io.RawIOBase`` and ``io.BufferedIOBase``. Files opened
in binary mode, ``sys.stdin.buffer`` and ``io.BytesIO`` all qualify as-is.

The scanner never opens or closes a source; its lifetime belongs to the
caller.
"""

from __future__ import annotations

import io
import sys
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ByteSource(Protocol):
    """Protocol for blocking byte sources.

    ``readinto`` fills the buffer from offset 0 and returns the number of
    bytes written. Zero, a negative count or None all mean "no more bytes".
    An ``OSError`` means the source failed.
    """

    def readinto(self, buffer: bytearray, /) -> int | None: ...


def from_bytes(data: bytes | bytearray | memoryview) -> io.BytesIO:
    """Wrap an in-memory byte sequence as a source."""
    return io.BytesIO(bytes(data))


def from_stdin() -> ByteSource:
    """Return the binary layer of standard input.

    Raises:
        TypeError: If sys.stdin has been replaced by a stream without one
    """
    return _binary_layer(sys.stdin)


def _binary_layer(stream: Any) -> ByteSource:
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        raise TypeError("text stream has no binary buffer; pass bytes instead")
    if _has_decoded_ahead(stream, buffer):
        raise ValueError("text stream has already read ahead; pass its binary buffer before reading")
    return buffer


def _has_decoded_ahead(stream: Any, buffer: Any) -> bool:
    # A text wrapper reads its buffer in chunks, so after any read the binary
    # position runs past the text position. Only seekable streams can tell.
    try:
        if not stream.seekable():
            return False
        return stream.tell() != buffer.tell()
    except (AttributeError, OSError):
        return False


def as_source(obj: object) -> ByteSource:
    """Coerce obj into a byte source.

    Accepts an existing source or a bytes-like object. A text wrapper is
    unwrapped to its binary buffer, which is only safe before the wrapper
    has been read from: bytes it decoded ahead are not in the buffer any
    more. Seekable wrappers that have read ahead are rejected; for pipes
    such as standard input this cannot be detected.

    Raises:
        TypeError: If obj cannot supply bytes
        ValueError: If obj is a text wrapper that has already read ahead
    """
    if isinstance(obj, (bytes, bytearray, memoryview)):
        return from_bytes(obj)
    if isinstance(obj, io.TextIOBase):
        return _binary_layer(obj)
    if isinstance(obj, ByteSource):
        return obj
    raise TypeError(f"expected a byte source or bytes-like object, got {type(obj).__name__}")


__all__ = ["ByteSource", "as_source", "from_bytes", "from_stdin"]
