"""Read puzzle and word bank sources from disk or over HTTP."""

from __future__ import annotations

from pathlib import Path

import requests

from ..core.constants import DEFAULT_HTTP_TIMEOUT
from ..core.exceptions import SourceReadError
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

URL_PREFIXES = ("http://", "https://")


def is_url(identifier: str) -> bool:
    return identifier.lower().startswith(URL_PREFIXES)


def read_source(
    identifier: str | Path,
    *,
    label: str = "input",
    timeout_seconds: float = DEFAULT_HTTP_TIMEOUT,
) -> str:
    """Return the text behind ``identifier``.

    ``http://`` and ``https://`` identifiers are fetched; anything else is a
    UTF-8 file path. Every failure is reported as :class:`SourceReadError`
    naming ``label`` so the user knows which input was at fault.
    """

    text_id = str(identifier)
    if is_url(text_id):
        return _fetch(text_id, label, timeout_seconds)

    path = Path(text_id)
    LOGGER.debug("Reading %s source from %s", label, path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceReadError(f"Cannot read {label} source '{text_id}': {exc}") from exc


def _fetch(url: str, label: str, timeout_seconds: float) -> str:
    LOGGER.debug("Fetching %s source from %s", label, url)
    try:
        response = requests.get(url, timeout=timeout_seconds)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise SourceReadError(f"Cannot fetch {label} source '{url}': {exc}") from exc
    return response.text


__all__ = ["is_url", "read_source"]
