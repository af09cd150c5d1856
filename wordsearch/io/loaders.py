"""Parse puzzle grids and word banks from text sources."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List

from ..core.constants import CELL_SEPARATORS, DEFAULT_HTTP_TIMEOUT
from ..core.exceptions import InputFormatError
from ..core.models import Grid, WordBank
from ..utils.logger import get_logger
from .sources import read_source

LOGGER = get_logger(__name__)


@dataclass
class GridLoader:
    """Builds a :class:`Grid` from lines of separator-delimited characters.

    Each line holds one cell per even offset with exactly one space or tab
    between consecutive cells; a trailing separator is allowed. Blank lines
    are ignored.
    """

    timeout_seconds: float = DEFAULT_HTTP_TIMEOUT
    label: str = "puzzle"

    def load(self, identifier: str | Path) -> Grid:
        text = read_source(identifier, label=self.label, timeout_seconds=self.timeout_seconds)
        try:
            grid = self.parse(text)
        except InputFormatError as exc:
            raise InputFormatError(f"Invalid {self.label} source '{identifier}': {exc}") from exc
        LOGGER.info("Loaded %sx%s %s from %s", grid.height, grid.width, self.label, identifier)
        return grid

    def parse(self, text: str) -> Grid:
        rows: List[str] = []
        width = None
        for line_no, raw in enumerate(text.splitlines(), start=1):
            if not raw.strip():
                continue
            cells = self._split_cells(raw, line_no)
            if width is None:
                width = len(cells)
            elif len(cells) != width:
                raise InputFormatError(
                    f"Ragged grid: line {line_no} has {len(cells)} cells, expected {width}"
                )
            rows.append(cells)

        if not rows:
            raise InputFormatError("Grid source is empty")
        return Grid(rows=tuple(rows))

    @staticmethod
    def _split_cells(raw: str, line_no: int) -> str:
        body = raw.rstrip("".join(CELL_SEPARATORS))
        cells = body[0::2]
        separators = body[1::2]
        for offset, char in enumerate(cells):
            if char in CELL_SEPARATORS:
                raise InputFormatError(
                    f"Line {line_no}: unexpected separator at column {offset * 2 + 1}"
                )
        for offset, char in enumerate(separators):
            if char not in CELL_SEPARATORS:
                raise InputFormatError(
                    f"Line {line_no}: expected a separator at column {offset * 2 + 2}, "
                    f"found '{char}'"
                )
        return cells


@dataclass
class WordBankLoader:
    """Builds a :class:`WordBank` from one word per line."""

    timeout_seconds: float = DEFAULT_HTTP_TIMEOUT
    label: str = "word bank"

    def load(self, identifier: str | Path) -> WordBank:
        text = read_source(identifier, label=self.label, timeout_seconds=self.timeout_seconds)
        try:
            wordbank = self.parse(text)
        except InputFormatError as exc:
            raise InputFormatError(f"Invalid {self.label} source '{identifier}': {exc}") from exc
        LOGGER.info("Loaded %s words from %s", len(wordbank), identifier)
        return wordbank

    def parse(self, text: str) -> WordBank:
        words: List[str] = []
        for line_no, raw in enumerate(text.splitlines(), start=1):
            word = raw.strip()
            if not word:
                continue
            if any(char.isspace() for char in word):
                raise InputFormatError(f"Line {line_no}: word '{word}' contains whitespace")
            words.append(word)

        if not words:
            raise InputFormatError("Word bank source is empty")
        return WordBank(words=tuple(words))


__all__ = ["GridLoader", "WordBankLoader"]
