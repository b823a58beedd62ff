"""Line-oriented text file helpers with explicit results.

``LineReader`` and ``LineWriter`` own an open text stream and expose only
line operations. No method raises for an I/O or encoding failure: every
fallible call returns ``Ok`` or ``Err`` so the failure path is visible at
the call site. Iteration is the exception: ``for line in reader`` raises the
``FileAccessError`` instead.

Example:
    >>> result = LineReader.open("scores.txt")
    >>> if result.is_ok():
    ...     with result.value as reader:
    ...         header = reader.read_line().unwrap()
    ...         total = reader.read_int().unwrap_or(0)

Thread Safety:
Readers and writers are not thread-safe.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass
from types import TracebackType
from typing import TextIO, TypeVar

from fastscan.convert import parse_float64, parse_int32
from fastscan.errors import EndOfStreamError, FastscanError, FileAccessError, TokenParseError
from fastscan.result import Err, Ok
from fastscan.utils.logger import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

DEFAULT_ENCODING = "utf-8"


def _failure(path: str, action: str, exc: OSError | UnicodeError) -> Err[FileAccessError]:
    logger.debug("Cannot %s '%s': %s", action, path, exc)
    return Err(FileAccessError(path, action, exc))


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


class LineReader:
    """Read a text file line by line.

    Usage:
        >>> reader = LineReader.open("pairs.tsv").unwrap()
        >>> reader.read_mapping("\\t").unwrap()
        {'alpha': '1', 'beta': '2'}
        >>> reader.close()
        Ok(value=None)

    """

    __slots__ = ("_stream", "_path", "_line_count")

    def __init__(self, stream: TextIO, path: str = "<stream>") -> None:
        """Wrap an already open text stream. The reader takes ownership."""
        self._stream = stream
        self._path = path
        self._line_count = 0

    @classmethod
    def open(cls, path: str, encoding: str = DEFAULT_ENCODING) -> Ok[LineReader] | Err[FileAccessError]:
        """Open path for reading."""
        try:
            stream = open(path, encoding=encoding)  # noqa: SIM115
        except OSError as exc:
            return _failure(path, "open", exc)
        return Ok(cls(stream, path))

    @property
    def path(self) -> str:
        return self._path

    def read_line(self) -> Ok[str | None] | Err[FileAccessError]:
        """Read one line without its newline; Ok(None) at end of file."""
        try:
            line = self._stream.readline()
        except UnicodeDecodeError as exc:
            return _failure(self._path, "decode", exc)
        except OSError as exc:
            return _failure(self._path, "read", exc)
        if not line:
            return Ok(None)
        self._line_count += 1
        return Ok(_strip_newline(line))

    def read_int(self) -> Ok[int] | Err[FastscanError]:
        """Read one line as an int32.

        Err carries EndOfStreamError at end of file, TokenParseError for a
        malformed line, or FileAccessError.
        """
        return self._read_number(parse_int32)

    def read_float(self) -> Ok[float] | Err[FastscanError]:
        """Read one line as a float64."""
        return self._read_number(parse_float64)

    def read_split(self, delimiter: str) -> Ok[list[str]] | Err[FastscanError]:
        """Read one line and split it on delimiter."""
        result = self.read_line()
        if isinstance(result, Err):
            return result
        if result.value is None:
            return Err(EndOfStreamError(token_index=self._line_count))
        return Ok(result.value.split(delimiter))

    def read_all(self) -> Ok[list[str]] | Err[FileAccessError]:
        """Read every remaining line."""
        lines: list[str] = []
        while True:
            result = self.read_line()
            if isinstance(result, Err):
                return result
            if result.value is None:
                return Ok(lines)
            lines.append(result.value)

    def read_mapping(self, delimiter: str) -> Ok[dict[str, str]] | Err[FastscanError]:
        """Read remaining lines as ``key<delimiter>value`` pairs.

        Later duplicates overwrite earlier keys. Text after a second
        delimiter is ignored.
        """
        result = self.read_all()
        if isinstance(result, Err):
            return result

        mapping: dict[str, str] = {}
        first_line = self._line_count - len(result.value)
        for offset, line in enumerate(result.value):
            parts = line.split(delimiter)
            if len(parts) < 2:
                error = TokenParseError(line, "mapping entry", f"no {delimiter!r} delimiter")
                return Err(error.at(first_line + offset))
            mapping[parts[0]] = parts[1]
        return Ok(mapping)

    def close(self) -> Ok[None] | Err[FileAccessError]:
        try:
            self._stream.close()
        except OSError as exc:
            return _failure(self._path, "close", exc)
        return Ok(None)

    def __iter__(self) -> Iterator[str]:
        """Yield lines until end of file.

        Raises:
            FileAccessError: If a line cannot be read or decoded
        """
        while True:
            result = self.read_line()
            if isinstance(result, Err):
                raise result.error
            if result.value is None:
                return
            yield result.value

    def __enter__(self) -> LineReader:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _read_number(
        self, convert: Callable[[str], Ok[T] | Err[TokenParseError]]
    ) -> Ok[T] | Err[FastscanError]:
        result = self.read_line()
        if isinstance(result, Err):
            return result
        if result.value is None:
            return Err(EndOfStreamError(token_index=self._line_count))
        parsed = convert(result.value.strip())
        if isinstance(parsed, Err):
            return Err(parsed.error.at(self._line_count - 1))
        return parsed


class LineWriter:
    """Write text to a file, with optional flush after each call."""

    __slots__ = ("_stream", "_path")

    def __init__(self, stream: TextIO, path: str = "<stream>") -> None:
        """Wrap an already open text stream. The writer takes ownership."""
        self._stream = stream
        self._path = path

    @classmethod
    def open(
        cls,
        path: str,
        append: bool = False,
        encoding: str = DEFAULT_ENCODING,
    ) -> Ok[LineWriter] | Err[FileAccessError]:
        """Open path for writing, truncating unless append is True."""
        try:
            stream = open(path, "a" if append else "w", encoding=encoding)  # noqa: SIM115
        except OSError as exc:
            return _failure(path, "open", exc)
        return Ok(cls(stream, path))

    @property
    def path(self) -> str:
        return self._path

    def write(self, value: object, *, flush: bool = False) -> Ok[None] | Err[FileAccessError]:
        """Write str(value)."""
        try:
            self._stream.write(str(value))
            if flush:
                self._stream.flush()
        except UnicodeEncodeError as exc:
            return _failure(self._path, "encode", exc)
        except OSError as exc:
            return _failure(self._path, "write", exc)
        return Ok(None)

    def writeln(self, value: object = "", *, flush: bool = False) -> Ok[None] | Err[FileAccessError]:
        """Write str(value) followed by a newline."""
        return self.write(f"{value}\n", flush=flush)

    def new_line(self) -> Ok[None] | Err[FileAccessError]:
        return self.write("\n")

    def flush(self) -> Ok[None] | Err[FileAccessError]:
        try:
            self._stream.flush()
        except OSError as exc:
            return _failure(self._path, "flush", exc)
        return Ok(None)

    def close(self) -> Ok[None] | Err[FileAccessError]:
        try:
            self._stream.close()
        except OSError as exc:
            return _failure(self._path, "close", exc)
        return Ok(None)

    def __enter__(self) -> LineWriter:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


@dataclass(frozen=True, slots=True)
class LineDiff:
    """One differing line. A side is None past the end of that file."""

    index: int
    left: str | None
    right: str | None

    def __str__(self) -> str:
        return f"{self.index}\t : {self.left}<==>{self.right}"


def read_lines(path: str, encoding: str = DEFAULT_ENCODING) -> Ok[list[str]] | Err[FileAccessError]:
    """Read every line of path without newlines."""
    opened = LineReader.open(path, encoding)
    if isinstance(opened, Err):
        return opened
    with opened.value as reader:
        return reader.read_all()


def diff_lines(left_path: str, right_path: str) -> Ok[list[LineDiff]] | Err[FileAccessError]:
    """Line-by-line comparison by position (no alignment)."""
    left = read_lines(left_path)
    if isinstance(left, Err):
        return left
    right = read_lines(right_path)
    if isinstance(right, Err):
        return right

    a, b = left.value, right.value
    diffs: list[LineDiff] = []
    for index in range(max(len(a), len(b))):
        left_line = a[index] if index < len(a) else None
        right_line = b[index] if index < len(b) else None
        if left_line != right_line:
            diffs.append(LineDiff(index, left_line, right_line))
    return Ok(diffs)


def files_equal(left_path: str, right_path: str) -> Ok[bool] | Err[FileAccessError]:
    """True if both files have the same lines."""
    return diff_lines(left_path, right_path).map(lambda diffs: not diffs)


__all__ = [
    "LineDiff",
    "LineReader",
    "LineWriter",
    "diff_lines",
    "files_equal",
    "read_lines",
]
