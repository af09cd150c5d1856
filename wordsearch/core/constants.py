"""Shared constants and enumerations for the word search solver."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Tuple


class Axis(str, Enum):
    """The four undirected scan axes."""

    HORIZONTAL = "HORIZONTAL"
    VERTICAL = "VERTICAL"
    DIAGONAL_DOWN = "DIAGONAL_DOWN"
    DIAGONAL_UP = "DIAGONAL_UP"

    @property
    def step(self) -> Tuple[int, int]:
        """Forward ``(dx, dy)`` vector; the opposite orientation is the reversed word."""
        return AXIS_STEPS[self]


AXIS_STEPS: Dict[Axis, Tuple[int, int]] = {
    Axis.HORIZONTAL: (1, 0),
    Axis.VERTICAL: (0, 1),
    Axis.DIAGONAL_DOWN: (1, 1),
    Axis.DIAGONAL_UP: (1, -1),
}

SCAN_ORDER: Tuple[Axis, ...] = (
    Axis.HORIZONTAL,
    Axis.VERTICAL,
    Axis.DIAGONAL_DOWN,
    Axis.DIAGONAL_UP,
)

CELL_SEPARATORS = frozenset(" \t")
OUTPUT_SEPARATOR = " "
BLANK_PLACEHOLDER = " "

DEFAULT_SOLUTION_FILE = "solution.txt"
HTTP_TIMEOUT_ENV = "WORDSEARCH_HTTP_TIMEOUT"
DEFAULT_HTTP_TIMEOUT = 10.0


@dataclass(frozen=True)
class Bounds:
    """Toroidal rectangle helper."""

    rows: int
    cols: int

    def wrap(self, row: int, col: int) -> Tuple[int, int]:
        return row % self.rows, col % self.cols
