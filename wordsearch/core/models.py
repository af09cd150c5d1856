"""Data models supporting the word search solver."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Sequence, Tuple

from .constants import Axis, Bounds


@dataclass(frozen=True)
class Grid:
    """Rectangular, read-only character matrix indexed ``[row][col]``."""

    rows: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.rows or not self.rows[0]:
            raise ValueError("Grid needs at least one row and one column")
        width = len(self.rows[0])
        for index, row in enumerate(self.rows):
            if len(row) != width:
                raise ValueError(f"Row {index} has width {len(row)}, expected {width}")

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> "Grid":
        return cls(rows=tuple("".join(row) for row in rows))

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    @property
    def bounds(self) -> Bounds:
        return Bounds(rows=self.height, cols=self.width)

    def char(self, row: int, col: int) -> str:
        return self.rows[row][col]


@dataclass(frozen=True)
class WordBank:
    """Ordered target words. Duplicates are kept and searched independently."""

    words: Tuple[str, ...]

    def __post_init__(self) -> None:
        for index, word in enumerate(self.words):
            if not word:
                raise ValueError(f"Word bank entry {index} is empty")

    @classmethod
    def of(cls, words: Iterable[str]) -> "WordBank":
        return cls(words=tuple(words))

    def __iter__(self) -> Iterator[str]:
        return iter(self.words)

    def __len__(self) -> int:
        return len(self.words)


@dataclass
class OccupancyMask:
    """Boolean matrix of cells belonging to at least one found word.

    Cells are only ever set, never cleared, so masks from independent scans
    can be combined with :meth:`merge` in any order.
    """

    cells: List[List[bool]]

    @classmethod
    def empty(cls, height: int, width: int) -> "OccupancyMask":
        return cls(cells=[[False] * width for _ in range(height)])

    @property
    def height(self) -> int:
        return len(self.cells)

    @property
    def width(self) -> int:
        return len(self.cells[0]) if self.cells else 0

    def mark(self, row: int, col: int) -> None:
        self.cells[row][col] = True

    def is_marked(self, row: int, col: int) -> bool:
        return self.cells[row][col]

    def marked_count(self) -> int:
        return sum(sum(1 for flag in row if flag) for row in self.cells)

    def merge(self, other: "OccupancyMask") -> None:
        if (other.height, other.width) != (self.height, self.width):
            raise ValueError(
                f"Cannot merge {other.height}x{other.width} mask into "
                f"{self.height}x{self.width} mask"
            )
        for row, other_row in zip(self.cells, other.cells):
            for col, flag in enumerate(other_row):
                if flag:
                    row[col] = True

    def to_rows(self) -> List[List[bool]]:
        return [list(row) for row in self.cells]


@dataclass(frozen=True)
class WordMatch:
    """A single occurrence of a bank word along one axis."""

    word: str
    row: int
    col: int
    axis: Axis
    reversed: bool = False
    cells: Tuple[Tuple[int, int], ...] = field(default=(), repr=False)

    @property
    def start(self) -> Tuple[int, int]:
        return self.row, self.col
