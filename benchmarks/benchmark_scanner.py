"""Benchmark Scanner against split-based reading.

Run with:
    pytest benchmarks/benchmark_scanner.py -v --benchmark-only

Or for quick comparison:
    python benchmarks/benchmark_scanner.py
"""

import random
import time


def make_payload(count: int = 200_000) -> bytes:
    rng = random.Random(20141118)
    return " ".join(str(rng.randint(-(2**31), 2**31 - 1)) for _ in range(count)).encode()


def benchmark_scanner(data: bytes, count: int, buffer_size: int = 1 << 16) -> float:
    from fastscan import Scanner

    start = time.perf_counter()
    Scanner.from_bytes(data, buffer_size=buffer_size).next_int_array(count)
    return time.perf_counter() - start


def benchmark_split(data: bytes) -> float:
    start = time.perf_counter()
    [int(token) for token in data.split()]
    return time.perf_counter() - start


def main() -> None:
    count = 200_000
    data = make_payload(count)
    print(f"{len(data) / 1e6:.1f} MB, {count} ints")
    for size in (1024, 1 << 16):
        print(f"{'Scanner (buf=' + str(size) + ')':24} {benchmark_scanner(data, count, size) * 1000:8.1f}ms")
    print(f"{'bytes.split + int':24} {benchmark_split(data) * 1000:8.1f}ms")
    print("\nNote: split needs the whole input in memory; Scanner holds one window.")


# pytest-benchmark integration
try:
    import pytest

    @pytest.mark.benchmark(group="scan-ints")
    def test_benchmark_scanner_ints(benchmark, int_payload):
        """Read every int through the window."""
        from fastscan import Scanner

        count = int_payload.count(b" ") + 1

        def scan_all():
            Scanner.from_bytes(int_payload, buffer_size=1 << 16).next_int_array(count)

        benchmark(scan_all)

    @pytest.mark.benchmark(group="scan-ints")
    def test_benchmark_split_ints(benchmark, int_payload):
        """Baseline: split the whole payload at once."""
        benchmark(lambda: [int(token) for token in int_payload.split()])

    @pytest.mark.benchmark(group="scan-lines")
    def test_benchmark_scanner_lines(benchmark, line_payload):
        """Read every line through the window."""
        from fastscan import Scanner

        def scan_lines():
            scanner = Scanner.from_bytes(line_payload)
            for _ in range(20_000):
                scanner.next_line()

        benchmark(scan_lines)

except ImportError:
    pass


if __name__ == "__main__":
    main()
