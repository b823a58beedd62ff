"""ContextVar-based scan configuration for fastscan.

Provides thread-local configuration using Python's ContextVars (PEP 567).
A Scanner snapshots the active config once, at construction.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed.

Usage:
    # Defaults (1 KiB window, latin-1 tokens)
    scanner = Scanner(sys.stdin.buffer)

    # Scoped override
    with scan_config_context(ScanConfig(buffer_size=1 << 16)):
        scanner = Scanner(stream)

    # Explicit override always wins
    scanner = Scanner(stream, buffer_size=8)

"""

from __future__ import annotations

import codecs
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

DEFAULT_BUFFER_SIZE = 1024
DEFAULT_ENCODING = "latin-1"


@dataclass(frozen=True, slots=True)
class ScanConfig:
    """Immutable scan configuration.

    Attributes:
        buffer_size: Capacity of the window buffer in bytes (>= 1)
        encoding: Codec used to turn token bytes into text. The default,
            latin-1, maps every byte to one character.

    """

    buffer_size: int = DEFAULT_BUFFER_SIZE
    encoding: str = DEFAULT_ENCODING

    def __post_init__(self) -> None:
        if self.buffer_size < 1:
            raise ValueError(f"buffer_size must be >= 1, got {self.buffer_size}")
        # Fail on construction rather than on the first token
        codecs.lookup(self.encoding)

    @classmethod
    def from_dict(cls, config_dict: dict) -> ScanConfig:
        """Create ScanConfig from dictionary.

        Only includes keys that are valid ScanConfig fields; unknown keys
        are silently ignored.

        Example:
            >>> ScanConfig.from_dict({"buffer_size": 4096, "other": 1}).buffer_size
            4096

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: ScanConfig = ScanConfig()

_scan_config: ContextVar[ScanConfig] = ContextVar(
    "scan_config",
    default=_DEFAULT_CONFIG,
)


def get_scan_config() -> ScanConfig:
    """Get current scan configuration (thread-local)."""
    return _scan_config.get()


def set_scan_config(config: ScanConfig) -> None:
    """Set scan configuration for current context.

    Args:
        config: ScanConfig instance to use for this context.

    """
    _scan_config.set(config)


def reset_scan_config() -> None:
    """Reset to default configuration."""
    _scan_config.set(_DEFAULT_CONFIG)


@contextmanager
def scan_config_context(config: ScanConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Properly restores previous config even if an exception is raised.

    Example:
        >>> with scan_config_context(ScanConfig(buffer_size=16)):
        ...     get_scan_config().buffer_size
        16

    """
    previous = _scan_config.get()
    _scan_config.set(config)
    try:
        yield
    finally:
        _scan_config.set(previous)


__all__ = [
    "DEFAULT_BUFFER_SIZE",
    "DEFAULT_ENCODING",
    "ScanConfig",
    "get_scan_config",
    "set_scan_config",
    "reset_scan_config",
    "scan_config_context",
]
