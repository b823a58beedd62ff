"""Sort a mapping by its values.

Numeric values rank highest first, string values alphabetically; pass
``reverse=True`` to flip either order. Ties keep their insertion order.

Example:
    >>> sort_by_value({"a": 1, "b": 3, "c": 2})
    {'b': 3, 'c': 2, 'a': 1}
    >>> sort_by_value({"x": "pear", "y": "apple"})
    {'y': 'apple', 'x': 'pear'}

"""

from __future__ import annotations

from collections.abc import Mapping
from numbers import Real
from typing import TypeVar

from fastscan.errors import SortError

K = TypeVar("K")
V = TypeVar("V")


def _value_kind(value: object) -> str | None:
    # bool is an int subclass but ranking flags is almost always a mistake
    if isinstance(value, bool):
        return None
    if isinstance(value, Real):
        return "number"
    if isinstance(value, str):
        return "string"
    return None


def sort_by_value(mapping: Mapping[K, V], reverse: bool = False) -> dict[K, V]:
    """Return a new dict ordered by value.

    Args:
        mapping: Mapping whose values are all numbers or all strings
        reverse: Ascending numbers / descending strings instead

    Returns:
        New dict in sorted order (an empty mapping gives an empty dict)

    Raises:
        SortError: If values mix kinds or are neither numbers nor strings
    """
    if not mapping:
        return {}

    kinds = {_value_kind(value) for value in mapping.values()}
    if None in kinds:
        bad = next(v for v in mapping.values() if _value_kind(v) is None)
        raise SortError(f"cannot sort by values of type {type(bad).__name__}")
    if len(kinds) > 1:
        raise SortError("cannot sort a mapping whose values mix numbers and strings")

    descending = kinds == {"number"}
    if reverse:
        descending = not descending

    entries = sorted(mapping.items(), key=lambda item: item[1], reverse=descending)
    return dict(entries)


__all__ = ["sort_by_value"]
