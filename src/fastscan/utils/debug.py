"""Debug formatting for nested sequences."""

from __future__ import annotations

from collections.abc import Sequence


def format_grid(grid: Sequence[Sequence[int]], width: int = 3) -> str:
    """Render a 2-D integer grid, rows top to bottom.

    Each cell is right-aligned to ``width`` and followed by a space.

    Example:
        >>> print(format_grid([[1, 2], [30, 4]]))
        -------- map display ---------
          1   2 
         30   4 
        ------------------------------
    """
    lines = ["-------- map display ---------"]
    for row in grid:
        lines.append("".join(f"{cell:{width}d} " for cell in row))
    lines.append("-" * 30)
    return "\n".join(lines)
