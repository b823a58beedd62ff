"""Small descriptive statistics helpers.

Everything here is pure: inputs are never mutated and results are fresh
containers. Frequency tables are returned ordered by key.

Example:
    >>> from fastscan.stats import box_plot, count_elements
    >>> box_plot([4, 1, 3, 2])
    BoxPlot(minimum=1, first_quartile=1.5, median=2.5, third_quartile=3.5, maximum=4)
    >>> count_elements([3, 1, 1])
    {1: 2, 3: 1}

"""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class BoxPlot:
    """Five-number summary.

    Quartiles are the median of each half, where the halves share the middle
    element when the count is odd.
    """

    minimum: float
    first_quartile: float
    median: float
    third_quartile: float
    maximum: float

    def as_list(self) -> list[float]:
        return [self.minimum, self.first_quartile, self.median, self.third_quartile, self.maximum]


@dataclass(frozen=True, slots=True)
class Summary:
    average: float
    maximum: float
    minimum: float

    def format(self) -> str:
        return f"Average\t : {self.average}\nMax\t : {self.maximum}\nMin\t : {self.minimum}"


def _midpoint(ordered: Sequence[float], start: int, end: int) -> float:
    centre = (start + end) / 2
    return (ordered[math.floor(centre)] + ordered[math.ceil(centre)]) / 2


def box_plot(values: Iterable[float]) -> BoxPlot:
    """Compute min, quartiles, median and max.

    Raises:
        ValueError: If values is empty
    """
    ordered = sorted(values)
    if not ordered:
        raise ValueError("box_plot() requires at least one value")

    last = len(ordered) - 1
    lower_mid = last // 2
    upper_mid = (last + 1) // 2
    return BoxPlot(
        minimum=ordered[0],
        first_quartile=_midpoint(ordered, 0, lower_mid),
        median=_midpoint(ordered, 0, last),
        third_quartile=_midpoint(ordered, upper_mid, last),
        maximum=ordered[-1],
    )


def f_measure(precision: float, recall: float) -> float:
    """Harmonic mean of precision and recall (0.0 when both are 0)."""
    total = precision + recall
    if total == 0:
        return 0.0
    return 2.0 * precision * recall / total


def summarize(values: Sequence[float]) -> Summary:
    """Average, max and min of a sequence.

    Raises:
        ValueError: If values is empty
    """
    if not values:
        raise ValueError("summarize() requires at least one value")
    return Summary(sum(values) / len(values), max(values), min(values))


def summarize_counts(counts: Mapping[int, int]) -> Summary:
    """Summary of a frequency table mapping value -> occurrences.

    Raises:
        ValueError: If the table is empty or has no occurrences
    """
    occurrences = sum(counts.values())
    if not counts or occurrences == 0:
        raise ValueError("summarize_counts() requires at least one occurrence")
    return Summary(multiply_accumulate(counts) / occurrences, max(counts), min(counts))


def count_elements(values: Iterable[int]) -> dict[int, int]:
    """Frequency of each value, ordered by value."""
    return dict(sorted(Counter(values).items()))


def count_values(counts: Mapping[int, int]) -> dict[int, int]:
    """How many keys share each count, ordered by count.

    ``count_values(count_elements([1, 1, 2, 3]))`` is ``{1: 2, 2: 1}``: two
    values occur once and one value occurs twice.
    """
    return count_elements(counts.values())


def value_sum(counts: Mapping[object, int]) -> int:
    return sum(counts.values())


def multiply_accumulate(counts: Mapping[int, int]) -> int:
    """Sum of key * value over the mapping."""
    return sum(key * value for key, value in counts.items())


def rate_table(values: Sequence[int]) -> list[tuple[int, int, float]]:
    """Rows of (value, occurrences, percent of total), ordered by value."""
    total = len(values)
    if total == 0:
        return []
    return [(key, count, count * 100 / total) for key, count in count_elements(values).items()]


def partition_starts(parts: int, size: int) -> dict[int, int]:
    """Start index of each of ``parts`` equal slices of ``size`` items.

    The last slice absorbs the remainder.

    Raises:
        ValueError: If parts < 1
    """
    if parts < 1:
        raise ValueError(f"parts must be >= 1, got {parts}")
    step = size // parts
    return {i: i * step for i in range(parts)}


__all__ = [
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
]
