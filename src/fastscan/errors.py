"""Exception classes for fastscan.

Provides standardized exceptions for error handling throughout fastscan.
Each class also derives from the closest builtin so callers can catch
``EOFError`` or ``ValueError`` without importing fastscan.
"""

from __future__ import annotations


class FastscanError(Exception):
    """Base exception for all fastscan errors.

    Subclass this for specific error categories.
    """

    pass


class EndOfStreamError(FastscanError, EOFError):
    """No token is available because the byte source is exhausted.

    Raised when a token is requested after the source reported end of
    stream (or failed). Permanent for the scanner that raised it.
    """

    def __init__(self, message: str = "end of stream", token_index: int | None = None) -> None:
        """Initialize end-of-stream error.

        Args:
            message: Error description
            token_index: Number of tokens successfully read before the end
        """
        self.token_index = token_index
        if token_index is not None:
            message = f"{message} (after {token_index} tokens)"
        super().__init__(message)


class TokenParseError(FastscanError, ValueError):
    """A token could not be converted to the requested numeric type.

    Carries the offending text so callers can report it without re-reading.
    """

    def __init__(
        self,
        token: str,
        kind: str,
        reason: str,
        token_index: int | None = None,
    ) -> None:
        """Initialize token parse error.

        Args:
            token: Raw token text that failed to parse
            kind: Target type name (e.g., "int32", "float64")
            reason: Short description of the failure
            token_index: 0-based index of the token in the stream (optional)
        """
        self.token = token
        self.kind = kind
        self.reason = reason
        self.token_index = token_index

        location = f"token {token_index}: " if token_index is not None else ""
        super().__init__(f"{location}cannot parse {token!r} as {kind}: {reason}")

    def at(self, token_index: int) -> TokenParseError:
        """Return a copy of this error tagged with a stream position."""
        return TokenParseError(self.token, self.kind, self.reason, token_index)


class TokenDecodeError(FastscanError, UnicodeError):
    """Token bytes are not valid in the configured encoding."""

    def __init__(self, raw: bytes, encoding: str) -> None:
        self.raw = raw
        self.encoding = encoding
        super().__init__(f"token {raw!r} is not valid {encoding}")


class FileAccessError(FastscanError, OSError):
    """A file helper could not open, read, write or close a file.

    Returned inside ``Err`` by the file helpers rather than raised.
    """

    def __init__(self, path: str, action: str, cause: BaseException | None = None) -> None:
        """Initialize file access error.

        Args:
            path: File path involved
            action: What was attempted (e.g., "open", "write")
            cause: Underlying exception, if any
        """
        self.path = path
        self.action = action
        self.cause = cause

        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Cannot {action} '{path}'{detail}")


class SortError(FastscanError, TypeError):
    """Mapping values cannot be ordered against each other."""

    pass
