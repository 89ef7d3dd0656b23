"""Per-document keyword loading."""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable, Iterable
import logging
from pathlib import Path

from little_search.search.models import Occurrence
from little_search.search.sources import iter_words


logger = logging.getLogger(__name__)

Normalizer = Callable[[str], str | None]


def load_document(document_id: str, words: Iterable[str], normalizer: Normalizer) -> dict[str, Occurrence]:
    """Count keyword occurrences in a single document.

    Args:
        document_id: Identifier recorded on every Occurrence
        words: Raw word tokens of the document, consumed once
        normalizer: Maps a raw token to its keyword or None

    Returns:
        Mapping of keyword to its Occurrence in this document
    """
    counts: Counter[str] = Counter()
    for word in words:
        keyword = normalizer(word)
        if keyword is not None:
            counts[keyword] += 1

    logger.debug("Loaded %d keywords from %s", len(counts), document_id)
    return {keyword: Occurrence(document_id, frequency) for keyword, frequency in counts.items()}


def load_document_file(document_id: str, path: Path, normalizer: Normalizer) -> dict[str, Occurrence]:
    """Load keywords from a document on disk. Raises SourceNotFoundError if missing."""
    return load_document(document_id, iter_words(path), normalizer)
