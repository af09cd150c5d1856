"""Word search orchestration: load inputs, scan, render, write."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from ..core.constants import DEFAULT_HTTP_TIMEOUT, DEFAULT_SOLUTION_FILE
from ..core.models import Grid, OccupancyMask, WordBank, WordMatch
from ..io.loaders import GridLoader, WordBankLoader
from ..io.renderer import MaskRenderer
from ..utils.logger import get_logger
from .search import GridSearchEngine, SearchConfig


LOGGER = get_logger(__name__)

OUTPUT_FORMATS = ("text", "json")


@dataclass
class SolverConfig:
    puzzle_source: Path | str
    wordbank_source: Path | str
    output_path: Path | str = DEFAULT_SOLUTION_FILE
    workers: int = 1
    timeout_seconds: float = DEFAULT_HTTP_TIMEOUT
    output_format: str = "text"

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"output_format must be one of {OUTPUT_FORMATS}, got {self.output_format!r}"
            )
        if self.timeout_seconds <= 0:
            raise ValueError(f"timeout_seconds must be > 0, got {self.timeout_seconds}")

    def to_search_config(self) -> SearchConfig:
        return SearchConfig(workers=self.workers)


@dataclass
class SolveResult:
    grid: Grid
    wordbank: WordBank
    mask: OccupancyMask
    matches: List[WordMatch] = field(default_factory=list)
    missing_words: List[str] = field(default_factory=list)


class WordSearchSolver:
    """Runs the loaders, the search engine and the renderer in sequence."""

    def __init__(
        self,
        config: SolverConfig,
        engine: Optional[GridSearchEngine] = None,
        renderer: Optional[MaskRenderer] = None,
    ) -> None:
        self.config = config
        self.engine = engine or GridSearchEngine(config.to_search_config())
        self.renderer = renderer or MaskRenderer()
        self.grid_loader = GridLoader(timeout_seconds=config.timeout_seconds)
        self.wordbank_loader = WordBankLoader(timeout_seconds=config.timeout_seconds)

    # ------------------------------------------------------------------
    # Public entrypoints
    # ------------------------------------------------------------------
    def solve(self) -> SolveResult:
        grid = self.grid_loader.load(self.config.puzzle_source)
        wordbank = self.wordbank_loader.load(self.config.wordbank_source)
        mask, matches = self.engine.search_with_matches(grid, wordbank)

        found = {match.word for match in matches}
        missing: List[str] = []
        for word in wordbank:
            if word not in found and word not in missing:
                missing.append(word)
        for word in missing:
            LOGGER.info("Word not found: %s", word)

        return SolveResult(
            grid=grid,
            wordbank=wordbank,
            mask=mask,
            matches=matches,
            missing_words=missing,
        )

    def render(self, result: SolveResult) -> str:
        if self.config.output_format == "json":
            return self.renderer.render_json(result)
        return self.renderer.render(result.grid, result.mask)

    def run(self) -> SolveResult:
        """Solve and write the rendered output; nothing is written on failure."""
        result = self.solve()
        output_text = self.render(result)
        output_path = Path(self.config.output_path)
        output_path.write_text(output_text, encoding="utf-8")
        LOGGER.info(
            "Wrote solution to %s (%s/%s words found)",
            output_path,
            len(set(result.wordbank)) - len(result.missing_words),
            len(set(result.wordbank)),
        )
        return result


__all__ = ["SolveResult", "SolverConfig", "WordSearchSolver"]
