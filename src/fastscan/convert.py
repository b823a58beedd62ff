"""Token-to-number conversion with explicit results.

The grammar is deliberately narrower than Python's ``int()``/``float()``:
no surrounding whitespace (a token never has any), no digit-group
underscores, and no non-ASCII digits. Integers are range-checked against
their fixed width.

Example:
    >>> parse_int32("-17")
    Ok(value=-17)
    >>> parse_int32("2147483648").error.reason
    'out of range for int32'
    >>> parse_float64("1e3")
    Ok(value=1000.0)

"""

from __future__ import annotations

from fastscan.errors import TokenParseError
from fastscan.result import Err, Ok

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

# Type suffixes allowed after a numeric body, as in "2.5d"
_FLOAT_SUFFIXES = frozenset("dDfF")


def _parse_integer(text: str, kind: str, low: int, high: int) -> Ok[int] | Err[TokenParseError]:
    digits = text[1:] if text[:1] in ("+", "-") else text
    if not digits:
        return Err(TokenParseError(text, kind, "no digits"))
    if not (digits.isascii() and digits.isdigit()):
        return Err(TokenParseError(text, kind, "not a decimal integer"))
    value = int(text)
    if value < low or value > high:
        return Err(TokenParseError(text, kind, f"out of range for {kind}"))
    return Ok(value)


def parse_int32(text: str) -> Ok[int] | Err[TokenParseError]:
    """Parse a signed 32-bit decimal integer."""
    return _parse_integer(text, "int32", INT32_MIN, INT32_MAX)


def parse_int64(text: str) -> Ok[int] | Err[TokenParseError]:
    """Parse a signed 64-bit decimal integer."""
    return _parse_integer(text, "int64", INT64_MIN, INT64_MAX)


def parse_float64(text: str) -> Ok[float] | Err[TokenParseError]:
    """Parse a double-precision float.

    Accepts decimal and exponent forms, ``inf``/``Infinity`` and ``nan``/``NaN``
    (optionally signed), and a single trailing ``d``/``D``/``f``/``F`` type
    suffix after a numeric body.

    Returns:
        Ok with the float, or Err carrying a TokenParseError
    """
    if not text:
        return Err(TokenParseError(text, "float64", "empty token"))
    if not text.isascii() or "_" in text:
        return Err(TokenParseError(text, "float64", "not a decimal number"))

    body = text
    if body[-1] in _FLOAT_SUFFIXES and len(body) > 1 and body[-2] in "0123456789.":
        body = body[:-1]

    try:
        value = float(body)
    except ValueError:
        return Err(TokenParseError(text, "float64", "not a decimal number"))
    return Ok(value)


__all__ = [
    "INT32_MAX",
    "INT32_MIN",
    "INT64_MAX",
    "INT64_MIN",
    "parse_float64",
    "parse_int32",
    "parse_int64",
]
