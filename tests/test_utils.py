"""Tests for fastscan utility modules."""

import pytest


class TestSplit:
    """Tests for split function."""

    def test_any_delimiter_character(self) -> None:
        from fastscan.utils.text import split

        assert split("a,b;c", ",;") == ["a", "b", "c"]

    def test_runs_produce_no_empty_pieces(self) -> None:
        from fastscan.utils.text import split

        assert split(",,a,,b,,", ",") == ["a", "b"]

    def test_empty_string(self) -> None:
        from fastscan.utils.text import split

        assert split("", ",") == []

    def test_no_delimiters(self) -> None:
        from fastscan.utils.text import split

        assert split("abc", "") == ["abc"]


class TestFieldConversions:
    def test_field(self) -> None:
        from fastscan.utils.text import field

        assert field("a\tb\tc", "\t", 1) == "b"
        with pytest.raises(IndexError):
            field("a", "\t", 3)

    def test_to_ints_and_floats(self) -> None:
        from fastscan.utils.text import to_floats, to_ints

        assert to_ints(["1", "-2"]) == [1, -2]
        assert to_floats(["1", "2.5"]) == [1.0, 2.5]

    def test_columns(self) -> None:
        from fastscan.utils.text import column_floats, column_ints

        lines = ["a,1,0.5", "b,2,1.5"]
        assert column_ints(lines, ",", 1) == [1, 2]
        assert column_floats(lines, ",", 2) == [0.5, 1.5]


class TestCodePointLength:
    def test_combining_mark_counts_once(self) -> None:
        from fastscan.utils.text import code_point_length

        assert code_point_length("が") == 1
        assert code_point_length("が") == 1

    def test_astral_characters(self) -> None:
        from fastscan.utils.text import code_point_length

        assert code_point_length("😀x") == 2


class TestFormatGrid:
    def test_layout(self) -> None:
        from fastscan.utils.debug import format_grid

        lines = format_grid([[1, 2], [30, 4]]).splitlines()
        assert lines[0] == "-------- map display ---------"
        assert lines[1] == "  1   2 "
        assert lines[2] == " 30   4 "
        assert lines[3] == "-" * 30


class TestGetLogger:
    def test_prefix_added(self) -> None:
        from fastscan.utils.logger import get_logger

        assert get_logger("window").name == "fastscan.window"

    def test_prefix_not_doubled(self) -> None:
        from fastscan.utils.logger import get_logger

        assert get_logger("fastscan.window").name == "fastscan.window"
        assert get_logger("fastscan").name == "fastscan"

    def test_window_end_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        import io

        from fastscan.window import WindowBuffer

        with caplog.at_level("DEBUG", logger="fastscan"):
            window = WindowBuffer(io.BytesIO(b"ab"), capacity=4)
            while not window.exhausted:
                window.next_byte()
        assert any("ended after 2 bytes" in record.getMessage() for record in caplog.records)
