"""
fastscan — buffered byte-stream tokenizer and small helpers.

Pulls whitespace- or line-delimited tokens out of a raw byte stream through
a fixed-size window, without splitting whole lines into lists of strings.
Zero runtime dependencies.

Quick Start:
    >>> from fastscan import Scanner
    >>> scanner = Scanner.from_bytes(b"3\\n10 20 30\\nalpha beta\\n")
    >>> n = scanner.next_int()
    >>> scanner.next_int_array(n)
    [10, 20, 30]
    >>> scanner.next_line()
    'alpha beta'

    >>> # Standard input, as in a contest solution
    >>> scanner = Scanner.from_stdin()

End of stream and malformed numbers are explicit:
    >>> scanner = Scanner.from_bytes(b"12 abc")
    >>> scanner.next_int()
    12
    >>> scanner.try_next_int().is_err()
    True
    >>> scanner.next_word()
    Traceback (most recent call last):
    ...
    fastscan.errors.EndOfStreamError: end of stream (after 2 tokens)
"""

from fastscan.charsets import END, LINE_BREAKS, WHITESPACE, ByteOrEnd, EndOfStream, is_line_break, is_whitespace
from fastscan.config import (
    ScanConfig,
    get_scan_config,
    reset_scan_config,
    scan_config_context,
    set_scan_config,
)
from fastscan.convert import parse_float64, parse_int32, parse_int64
from fastscan.errors import (
    EndOfStreamError,
    FastscanError,
    FileAccessError,
    SortError,
    TokenDecodeError,
    TokenParseError,
)
from fastscan.files import LineDiff, LineReader, LineWriter, diff_lines, files_equal, read_lines
from fastscan.result import Err, Ok, Result
from fastscan.scanner import Scanner
from fastscan.sorting import sort_by_value
from fastscan.source import ByteSource, as_source, from_bytes, from_stdin
from fastscan.stats import (
    BoxPlot,
    Summary,
    box_plot,
    count_elements,
    count_values,
    f_measure,
    multiply_accumulate,
    partition_starts,
    rate_table,
    summarize,
    summarize_counts,
    value_sum,
)
from fastscan.timing import StopWatch, format_duration
from fastscan.window import WindowBuffer

__version__ = "1.1.0"

__all__ = [  # noqa: RUF022 — grouped by category for maintainability
    # Version
    "__version__",
    # Scanner
    "Scanner",
    "WindowBuffer",
    # Byte sources
    "ByteSource",
    "as_source",
    "from_bytes",
    "from_stdin",
    # Byte classes
    "END",
    "EndOfStream",
    "ByteOrEnd",
    "LINE_BREAKS",
    "WHITESPACE",
    "is_line_break",
    "is_whitespace",
    # Conversion
    "parse_int32",
    "parse_int64",
    "parse_float64",
    # Results and errors
    "Ok",
    "Err",
    "Result",
    "FastscanError",
    "EndOfStreamError",
    "TokenParseError",
    "TokenDecodeError",
    "FileAccessError",
    "SortError",
    # Configuration (ContextVar-based)
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
    # File helpers
    "LineReader",
    "LineWriter",
    "LineDiff",
    "read_lines",
    "diff_lines",
    "files_equal",
    # Statistics
    "BoxPlot",
    "Summary",
    "box_plot",
    "count_elements",
    "count_values",
    "f_measure",
    "multiply_accumulate",
    "partition_starts",
    "rate_table",
    "summarize",
    "summarize_counts",
    "value_sum",
    # Sorting
    "sort_by_value",
    # Timing
    "StopWatch",
    "format_duration",
]
