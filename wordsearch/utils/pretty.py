"""Pretty-print helpers for solved word search grids."""

from __future__ import annotations

import sys
from collections import Counter
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..core.models import Grid, OccupancyMask
    from ..engine.solver import SolveResult


UNMARKED_SYMBOL = "."


def format_mask(grid: Grid, mask: OccupancyMask) -> str:
    width = grid.width
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(header_cells)]
    lines.append("    " + "-" * (3 * width - 1))
    for r in range(grid.height):
        row_cells = [
            grid.char(r, c) if mask.is_marked(r, c) else UNMARKED_SYMBOL
            for c in range(width)
        ]
        row_render = " ".join(f"{symbol:>2}" for symbol in row_cells)
        lines.append(f"{r:>2} | {row_render}")
    return "\n".join(lines)


def print_search_stats(result: SolveResult, *, stream=None) -> None:
    """Print the masked grid followed by match statistics."""

    stream = stream or sys.stdout
    print(format_mask(result.grid, result.mask), file=stream)

    grid = result.grid
    total_cells = grid.height * grid.width
    marked = result.mask.marked_count()

    print(file=stream)
    print("--- Grid ---", file=stream)
    print(f"  Size:          {grid.height} x {grid.width} ({total_cells} cells)", file=stream)
    print(f"  Marked:        {marked} ({marked / total_cells * 100:.0f}%)", file=stream)

    unique_words = len(set(result.wordbank))
    axes = Counter(match.axis.value for match in result.matches)
    reversed_count = sum(1 for match in result.matches if match.reversed)

    print(file=stream)
    print("--- Words ---", file=stream)
    print(f"  Bank size:     {len(result.wordbank)} ({unique_words} distinct)", file=stream)
    print(f"  Found:         {unique_words - len(result.missing_words)}", file=stream)
    print(f"  Matches:       {len(result.matches)} ({reversed_count} reversed)", file=stream)
    if axes:
        dist_parts = [f"{axis}:{count}" for axis, count in sorted(axes.items())]
        print(f"  By axis:       {' '.join(dist_parts)}", file=stream)
    if result.missing_words:
        print(f"  Missing:       {', '.join(result.missing_words)}", file=stream)
