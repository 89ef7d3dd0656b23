"""Exceptions raised by the search engine."""

from __future__ import annotations

from pathlib import Path


class LittleSearchError(Exception):
    """Base class for search engine errors."""


class SourceNotFoundError(LittleSearchError, FileNotFoundError):
    """Raised when a docs list, noise-word list or document cannot be opened."""

    def __init__(self, kind: str, path: Path | str) -> None:
        self.kind = kind
        self.path = Path(path)
        super().__init__(f"{kind} not found: {self.path}")


class IndexNotBuiltError(LittleSearchError, RuntimeError):
    """Raised when the index is queried before a build has completed."""
