"""Custom exception hierarchy for the word search solver."""


class WordSearchError(Exception):
    """Base exception for solver failures."""


class InputFormatError(WordSearchError):
    """Raised when a puzzle or word bank source is malformed or empty."""


class SourceReadError(InputFormatError):
    """Raised when a source does not exist or cannot be read."""
