"""Buffered token scanner for fastscan.

Architecture:
scanner/
├── __init__.py          # Re-exports Scanner and the mixins
├── core.py              # Scanner class (mixin composition + window ownership)
├── words.py             # next_word / next_line / next_word_array
└── numbers.py           # next_int / next_long / next_double and arrays

Usage:
    >>> from fastscan.scanner import Scanner
    >>> scanner = Scanner.from_bytes(b"7  8\\n9")
    >>> [scanner.next_int() for _ in range(3)]
    [7, 8, 9]

"""

from fastscan.scanner.core import Scanner
from fastscan.scanner.numbers import NumberExtractorMixin
from fastscan.scanner.words import WordReaderMixin

__all__ = ["NumberExtractorMixin", "Scanner", "WordReaderMixin"]
