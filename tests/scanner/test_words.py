"""Tests for next_word / next_line and end-of-stream behavior."""

import io

import pytest

from fastscan import Scanner
from fastscan.errors import EndOfStreamError, TokenDecodeError


class TestNextWord:
    """Whitespace-delimited reads."""

    def test_words_in_order(self) -> None:
        scanner = Scanner.from_bytes(b"alpha beta\tgamma\r\ndelta")
        assert [scanner.next_word() for _ in range(4)] == ["alpha", "beta", "gamma", "delta"]

    def test_leading_and_trailing_whitespace(self) -> None:
        scanner = Scanner.from_bytes(b"  \n\t x \n\n")
        assert scanner.next_word() == "x"
        with pytest.raises(EndOfStreamError):
            scanner.next_word()

    def test_end_of_stream_is_explicit(self) -> None:
        scanner = Scanner.from_bytes(b"")
        with pytest.raises(EndOfStreamError):
            scanner.next_word()

    def test_end_of_stream_is_permanent(self) -> None:
        scanner = Scanner.from_bytes(b"only")
        assert scanner.next_word() == "only"
        for _ in range(3):
            with pytest.raises(EndOfStreamError):
                scanner.next_word()

    def test_end_of_stream_is_eof_error(self) -> None:
        scanner = Scanner.from_bytes(b"")
        with pytest.raises(EOFError):
            scanner.next_word()

    def test_error_reports_tokens_read(self) -> None:
        scanner = Scanner.from_bytes(b"a b")
        scanner.next_word()
        scanner.next_word()
        with pytest.raises(EndOfStreamError) as excinfo:
            scanner.next_word()
        assert excinfo.value.token_index == 2

    def test_form_feed_is_part_of_token(self) -> None:
        scanner = Scanner.from_bytes(b"a\x0cb c")
        assert scanner.next_word() == "a\x0cb"

    def test_latin1_is_byte_for_byte(self) -> None:
        scanner = Scanner.from_bytes(b"caf\xe9 \xff")
        assert scanner.next_word().encode("latin-1") == b"caf\xe9"
        assert scanner.next_word() == "\xff"

    def test_utf8_encoding(self) -> None:
        scanner = Scanner.from_bytes("café 你好".encode(), encoding="utf-8")
        assert scanner.next_word() == "café"
        assert scanner.next_word() == "你好"

    def test_utf8_decode_error(self) -> None:
        scanner = Scanner.from_bytes(b"\xff\xfe ok", encoding="utf-8")
        with pytest.raises(TokenDecodeError):
            scanner.next_word()
        # The bad token is consumed
        assert scanner.next_word() == "ok"

    def test_word_array(self) -> None:
        scanner = Scanner.from_bytes(b"a b c d")
        assert scanner.next_word_array(3) == ["a", "b", "c"]
        assert scanner.next_word() == "d"

    def test_word_array_zero(self) -> None:
        scanner = Scanner.from_bytes(b"")
        assert scanner.next_word_array(0) == []

    def test_word_array_negative(self) -> None:
        scanner = Scanner.from_bytes(b"a")
        with pytest.raises(ValueError):
            scanner.next_word_array(-1)


class TestNextLine:
    """Line-delimited reads keep internal spaces."""

    def test_lines_keep_spaces(self) -> None:
        scanner = Scanner.from_bytes(b"alpha beta\ngamma\n")
        assert scanner.next_line() == "alpha beta"
        assert scanner.next_line() == "gamma"
        with pytest.raises(EndOfStreamError):
            scanner.next_line()

    def test_crlf(self) -> None:
        scanner = Scanner.from_bytes(b"one two\r\nthree\r\n")
        assert scanner.next_line() == "one two"
        assert scanner.next_line() == "three"

    def test_blank_lines_are_skipped(self) -> None:
        scanner = Scanner.from_bytes(b"a\n\n\nb")
        assert scanner.next_line() == "a"
        assert scanner.next_line() == "b"

    def test_leading_spaces_are_kept(self) -> None:
        scanner = Scanner.from_bytes(b"  indented\t\n")
        assert scanner.next_line() == "  indented\t"

    def test_mixing_word_and_line(self) -> None:
        scanner = Scanner.from_bytes(b"2\nhello world\n")
        assert scanner.next_word() == "2"
        assert scanner.next_line() == "hello world"


class TestIteration:
    def test_iter_yields_all_words(self) -> None:
        scanner = Scanner.from_bytes(b"x y\nz\n")
        assert list(scanner) == ["x", "y", "z"]

    def test_iter_after_partial_read(self) -> None:
        scanner = Scanner.from_bytes(b"x y z")
        scanner.next_word()
        assert list(scanner) == ["y", "z"]


class TestSourceOwnership:
    def test_source_not_closed(self) -> None:
        stream = io.BytesIO(b"a b")
        scanner = Scanner(stream)
        list(scanner)
        assert not stream.closed

    def test_failing_source_is_end_of_stream(self) -> None:
        class Broken:
            def readinto(self, buffer: bytearray) -> int:
                raise OSError("boom")

        scanner = Scanner(Broken())
        with pytest.raises(EndOfStreamError):
            scanner.next_word()
        assert scanner.exhausted
        assert isinstance(scanner.window.failure, OSError)


class TestScannerState:
    def test_tokens_read(self) -> None:
        scanner = Scanner.from_bytes(b"a b c")
        scanner.next_word_array(2)
        assert scanner.tokens_read == 2

    def test_exhausted_does_not_look_ahead(self) -> None:
        scanner = Scanner.from_bytes(b"a ", buffer_size=64)
        scanner.next_word()
        # The whole input is already in the window but the source has not
        # yet reported end of stream.
        assert not scanner.exhausted

    def test_repr(self) -> None:
        scanner = Scanner.from_bytes(b"a", buffer_size=4)
        assert "capacity=4" in repr(scanner)
