"""Wall-clock stopwatch with split and lap times.

Example:
    from fastscan.timing import StopWatch

    watch = StopWatch()
    load()
    print("load", watch.lap_string())
    solve()
    print("solve", watch.lap_string(), "total", watch.split_string())

"""

from __future__ import annotations

from time import perf_counter


def format_duration(ms: int) -> str:
    """Format milliseconds as days/hours/minutes/seconds/ms.

    Only the units that are reached are shown.

    Examples:
        >>> format_duration(999)
        '999ms'
        >>> format_duration(61_005)
        '1m 1s 5ms'
        >>> format_duration(90_061_001)
        '1d 1h 1m 1s 1ms'
    """
    if ms < 0:
        raise ValueError(f"duration must be >= 0, got {ms}")

    text = f"{ms % 1000}ms"
    remaining = ms // 1000
    if ms < 1000:
        return text
    text = f"{remaining % 60}s {text}"
    if remaining < 60:
        return text
    remaining //= 60
    text = f"{remaining % 60}m {text}"
    if remaining < 60:
        return text
    remaining //= 60
    text = f"{remaining % 24}h {text}"
    if remaining < 24:
        return text
    return f"{remaining // 24}d {text}"


class StopWatch:
    """Measure elapsed time since start (split) and since the last lap.

    Starts on construction; ``restart()`` resets both clocks.
    """

    __slots__ = ("_start", "_lap_start")

    def __init__(self) -> None:
        self._start = perf_counter()
        self._lap_start = self._start

    def restart(self) -> None:
        self._start = perf_counter()
        self._lap_start = self._start

    def split_ms(self) -> int:
        """Milliseconds since start."""
        return int((perf_counter() - self._start) * 1000)

    def lap_ms(self) -> int:
        """Milliseconds since the previous lap, then start a new lap."""
        now = perf_counter()
        elapsed = int((now - self._lap_start) * 1000)
        self._lap_start = now
        return elapsed

    def split_string(self) -> str:
        return format_duration(self.split_ms())

    def lap_string(self) -> str:
        return format_duration(self.lap_ms())


__all__ = ["StopWatch", "format_duration"]
