"""Benchmark fixtures and configuration."""

from __future__ import annotations

import random

import pytest


@pytest.fixture
def int_payload() -> bytes:
    """200k space-separated int32 values (~2 MB)."""
    rng = random.Random(20141118)
    values = (rng.randint(-(2**31), 2**31 - 1) for _ in range(200_000))
    return " ".join(map(str, values)).encode()


@pytest.fixture
def line_payload() -> bytes:
    """20k short text lines."""
    return b"".join(b"row %d with some words\n" % i for i in range(20_000))
