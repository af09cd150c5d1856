"""Word search solver with toroidal, eight-direction scanning.

This package exposes the public API surface via:

- ``wordsearch.engine.search.GridSearchEngine``: the exhaustive grid scan.
- ``wordsearch.engine.solver.WordSearchSolver``: load, search, render, write.
- ``wordsearch.io.loaders`` helpers: puzzle and word bank parsing.
"""

from .core.models import Grid, OccupancyMask, WordBank, WordMatch
from .engine.search import GridSearchEngine, SearchConfig, search
from .engine.solver import SolveResult, SolverConfig, WordSearchSolver

__all__ = [
    "Grid",
    "GridSearchEngine",
    "OccupancyMask",
    "SearchConfig",
    "SolveResult",
    "SolverConfig",
    "WordBank",
    "WordMatch",
    "WordSearchSolver",
    "search",
]

__version__ = "0.1.0"
