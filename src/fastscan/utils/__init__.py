"""Utility modules for fastscan.

Provides:
- text: split, field, code_point_length and list conversions
- debug: format_grid for eyeballing 2-D data
- logger: get_logger for logging
"""

from fastscan.utils.debug import format_grid
from fastscan.utils.logger import get_logger
from fastscan.utils.text import (
    code_point_length,
    column_floats,
    column_ints,
    field,
    split,
    to_floats,
    to_ints,
)

__all__ = [
    "code_point_length",
    "column_floats",
    "column_ints",
    "field",
    "format_grid",
    "get_logger",
    "split",
    "to_floats",
    "to_ints",
]
