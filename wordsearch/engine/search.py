"""Exhaustive directional word scan over a toroidal grid.

Every cell is tried as a starting point along each of the four undirected
axes. Only the forward vector of an axis is walked; the opposite orientation
is covered by comparing against the reversed word on the same walk, so no
axis is counted twice.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from ..core.constants import SCAN_ORDER, Axis
from ..core.models import Grid, OccupancyMask, WordBank, WordMatch
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

_Target = Tuple[str, str]


@dataclass
class SearchConfig:
    """Tuning knobs for :class:`GridSearchEngine`."""

    workers: int = 1

    def __post_init__(self) -> None:
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")


class GridSearchEngine:
    """Finds every occurrence of the bank words and builds an occupancy mask."""

    def __init__(self, config: Optional[SearchConfig] = None) -> None:
        self.config = config or SearchConfig()

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def search(self, grid: Grid, wordbank: WordBank) -> OccupancyMask:
        mask, matches = self._run(grid, wordbank)
        LOGGER.info(
            "Search over %sx%s grid with %s words: %s matches, %s cells marked",
            grid.height,
            grid.width,
            len(wordbank),
            len(matches),
            mask.marked_count(),
        )
        return mask

    def find_matches(self, grid: Grid, wordbank: WordBank) -> List[WordMatch]:
        _, matches = self._run(grid, wordbank)
        return matches

    def search_with_matches(
        self, grid: Grid, wordbank: WordBank
    ) -> Tuple[OccupancyMask, List[WordMatch]]:
        """Return the mask together with the matches that produced it."""
        return self._run(grid, wordbank)

    def iter_matches(self, grid: Grid, wordbank: WordBank) -> Iterator[WordMatch]:
        """Yield matches in row-major start order, then axis order, then bank order."""
        targets = _targets(wordbank)
        return self._scan_rows(grid, targets, range(grid.height))

    # ------------------------------------------------------------------
    # Scanning
    # ------------------------------------------------------------------
    def _run(self, grid: Grid, wordbank: WordBank) -> Tuple[OccupancyMask, List[WordMatch]]:
        targets = _targets(wordbank)
        bands = _row_bands(grid.height, self.config.workers)
        if len(bands) == 1:
            return _collect(grid, self._scan_rows(grid, targets, bands[0]))

        LOGGER.debug("Scanning %s row bands on %s workers", len(bands), self.config.workers)
        mask = OccupancyMask.empty(grid.height, grid.width)
        matches: List[WordMatch] = []
        with ThreadPoolExecutor(max_workers=self.config.workers) as executor:
            futures = [
                executor.submit(_collect, grid, self._scan_rows(grid, targets, band))
                for band in bands
            ]
            # Merge in band order so the match list equals the serial scan.
            for future in futures:
                band_mask, band_matches = future.result()
                mask.merge(band_mask)
                matches.extend(band_matches)
        return mask, matches

    def _scan_rows(
        self, grid: Grid, targets: Sequence[_Target], rows: Sequence[int]
    ) -> Iterator[WordMatch]:
        for row in rows:
            for col in range(grid.width):
                for axis in SCAN_ORDER:
                    yield from self._scan_axis(grid, targets, row, col, axis)

    @staticmethod
    def _scan_axis(
        grid: Grid, targets: Sequence[_Target], start_row: int, start_col: int, axis: Axis
    ) -> Iterator[WordMatch]:
        height, width = grid.height, grid.width
        bounds = grid.bounds
        dx, dy = axis.step
        # Keep index arithmetic non-negative.
        dx %= width
        dy %= height

        for word, reversed_word in targets:
            matches_forward = True
            matches_reversed = True
            for char_index in range(len(word)):
                row = (start_row + char_index * dy) % height
                col = (start_col + char_index * dx) % width
                letter = grid.rows[row][col]
                if letter != word[char_index]:
                    matches_forward = False
                if letter != reversed_word[char_index]:
                    matches_reversed = False
                if not (matches_forward or matches_reversed):
                    break

            if matches_forward or matches_reversed:
                cells = tuple(
                    bounds.wrap(start_row + i * dy, start_col + i * dx)
                    for i in range(len(word))
                )
                match = WordMatch(
                    word=word,
                    row=start_row,
                    col=start_col,
                    axis=axis,
                    reversed=not matches_forward,
                    cells=cells,
                )
                LOGGER.debug(
                    "Found %s at (%s,%s) along %s%s",
                    word,
                    start_row,
                    start_col,
                    axis.value,
                    " (reversed)" if match.reversed else "",
                )
                yield match


def search(grid: Grid, wordbank: WordBank) -> OccupancyMask:
    """Search ``grid`` for ``wordbank`` with a default serial engine."""

    return GridSearchEngine().search(grid, wordbank)


def _targets(wordbank: WordBank) -> List[_Target]:
    return [(word, word[::-1]) for word in wordbank]


def _collect(grid: Grid, matches: Iterator[WordMatch]) -> Tuple[OccupancyMask, List[WordMatch]]:
    mask = OccupancyMask.empty(grid.height, grid.width)
    found: List[WordMatch] = []
    for match in matches:
        for row, col in match.cells:
            mask.mark(row, col)
        found.append(match)
    return mask, found


def _row_bands(height: int, workers: int) -> List[range]:
    count = max(1, min(workers, height))
    size, extra = divmod(height, count)
    bands: List[range] = []
    start = 0
    for index in range(count):
        stop = start + size + (1 if index < extra else 0)
        bands.append(range(start, stop))
        start = stop
    return bands


__all__ = ["GridSearchEngine", "SearchConfig", "search"]
