"""Tests for typed extractors."""

import math

import pytest

from fastscan import Scanner
from fastscan.errors import EndOfStreamError, TokenParseError
from fastscan.result import Err, Ok


class TestNextInt:
    def test_mixed_delimiters(self) -> None:
        scanner = Scanner.from_bytes(b"7  8\n9")
        assert [scanner.next_int() for _ in range(3)] == [7, 8, 9]

    def test_signs(self) -> None:
        scanner = Scanner.from_bytes(b"-5 +6 -0")
        assert scanner.next_int_array(3) == [-5, 6, 0]

    def test_malformed_token_raises(self) -> None:
        scanner = Scanner.from_bytes(b"12 abc")
        assert scanner.next_int() == 12
        with pytest.raises(TokenParseError) as excinfo:
            scanner.next_int()
        assert excinfo.value.token == "abc"
        assert excinfo.value.kind == "int32"
        assert excinfo.value.token_index == 1

    def test_malformed_token_is_value_error(self) -> None:
        scanner = Scanner.from_bytes(b"1.5")
        with pytest.raises(ValueError):
            scanner.next_int()

    def test_malformed_token_is_consumed(self) -> None:
        scanner = Scanner.from_bytes(b"x 3")
        with pytest.raises(TokenParseError):
            scanner.next_int()
        assert scanner.next_int() == 3

    def test_int32_overflow(self) -> None:
        scanner = Scanner.from_bytes(b"2147483647 2147483648")
        assert scanner.next_int() == 2**31 - 1
        with pytest.raises(TokenParseError, match="out of range"):
            scanner.next_int()

    def test_end_of_stream(self) -> None:
        scanner = Scanner.from_bytes(b"1")
        scanner.next_int()
        with pytest.raises(EndOfStreamError):
            scanner.next_int()


class TestNextLong:
    def test_beyond_int32(self) -> None:
        scanner = Scanner.from_bytes(b"9223372036854775807 -9223372036854775808")
        assert scanner.next_long() == 2**63 - 1
        assert scanner.next_long() == -(2**63)

    def test_int64_overflow(self) -> None:
        scanner = Scanner.from_bytes(b"9223372036854775808")
        with pytest.raises(TokenParseError):
            scanner.next_long()

    def test_long_array(self) -> None:
        scanner = Scanner.from_bytes(b"10000000000\n20000000000")
        assert scanner.next_long_array(2) == [10_000_000_000, 20_000_000_000]


class TestNextDouble:
    def test_forms(self) -> None:
        scanner = Scanner.from_bytes(b"1.5 -2 3e2 .25 1.0d")
        assert scanner.next_double_array(5) == [1.5, -2.0, 300.0, 0.25, 1.0]

    def test_special_values(self) -> None:
        scanner = Scanner.from_bytes(b"Infinity -Infinity NaN")
        assert scanner.next_double() == math.inf
        assert scanner.next_double() == -math.inf
        assert math.isnan(scanner.next_double())

    def test_malformed(self) -> None:
        scanner = Scanner.from_bytes(b"1,5")
        with pytest.raises(TokenParseError):
            scanner.next_double()


class TestTryNext:
    """Result-returning extractors."""

    def test_ok(self) -> None:
        scanner = Scanner.from_bytes(b"42 4.5 99")
        assert scanner.try_next_int() == Ok(42)
        assert scanner.try_next_double() == Ok(4.5)
        assert scanner.try_next_long() == Ok(99)

    def test_err_carries_position(self) -> None:
        scanner = Scanner.from_bytes(b"1 2 oops")
        scanner.next_int_array(2)
        result = scanner.try_next_int()
        assert isinstance(result, Err)
        assert result.error.token == "oops"
        assert result.error.token_index == 2

    def test_end_of_stream_still_raises(self) -> None:
        scanner = Scanner.from_bytes(b"")
        with pytest.raises(EndOfStreamError):
            scanner.try_next_int()


class TestArrays:
    def test_exact_count_then_exhaustion(self) -> None:
        values = [3, -1, 4, 1, -5, 9]
        scanner = Scanner.from_bytes(" ".join(map(str, values)).encode())
        assert scanner.next_int_array(len(values)) == values
        with pytest.raises(EndOfStreamError):
            scanner.next_int()

    def test_array_stops_at_first_bad_token(self) -> None:
        scanner = Scanner.from_bytes(b"1 2 x 4")
        with pytest.raises(TokenParseError):
            scanner.next_int_array(4)
        assert scanner.next_int() == 4

    def test_short_input_raises(self) -> None:
        scanner = Scanner.from_bytes(b"1 2")
        with pytest.raises(EndOfStreamError):
            scanner.next_int_array(3)

    def test_negative_count(self) -> None:
        scanner = Scanner.from_bytes(b"1")
        with pytest.raises(ValueError, match="n must be"):
            scanner.next_double_array(-2)
