"""Logging setup shared by the CLI and the solver modules."""

from __future__ import annotations

import logging
from typing import Optional


def configure_logging(level: int = logging.INFO) -> None:
    """Send log records to stderr, replacing any earlier handlers.

    ``main.py`` writes the ``--show`` grid view to stdout, so diagnostics such
    as loaded grid sizes, missing words and engine summaries stay on stderr
    and never mix into that view.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Logger under the ``wordsearch`` namespace; installs the stderr handler on first use."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "wordsearch")
