"""Serialize solved puzzles back to text."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Dict

from ..core.constants import BLANK_PLACEHOLDER, OUTPUT_SEPARATOR
from ..core.models import Grid, OccupancyMask

if TYPE_CHECKING:
    from ..engine.solver import SolveResult


class MaskRenderer:
    """Render a grid showing only the letters covered by the mask."""

    def __init__(
        self,
        separator: str = OUTPUT_SEPARATOR,
        placeholder: str = BLANK_PLACEHOLDER,
    ) -> None:
        self.separator = separator
        self.placeholder = placeholder

    def render(self, grid: Grid, mask: OccupancyMask) -> str:
        """Return rows joined by newlines, with no trailing line break."""
        if (mask.height, mask.width) != (grid.height, grid.width):
            raise ValueError(
                f"Mask is {mask.height}x{mask.width} but grid is {grid.height}x{grid.width}"
            )
        lines = []
        for r, row in enumerate(grid.rows):
            cells = [
                letter if mask.is_marked(r, c) else self.placeholder
                for c, letter in enumerate(row)
            ]
            lines.append(self.separator.join(cells))
        return "\n".join(lines)

    def to_payload(self, result: SolveResult) -> Dict[str, Any]:
        return {
            "grid": list(result.grid.rows),
            "mask": result.mask.to_rows(),
            "solution": self.render(result.grid, result.mask),
            "matches": [
                {
                    "word": match.word,
                    "start": list(match.start),
                    "axis": match.axis.value,
                    "reversed": match.reversed,
                    "cells": [list(cell) for cell in match.cells],
                }
                for match in result.matches
            ],
            "missing_words": list(result.missing_words),
        }

    def render_json(self, result: SolveResult) -> str:
        return json.dumps(self.to_payload(result), ensure_ascii=False, indent=2)


__all__ = ["MaskRenderer"]
