"""File-backed input sources for index construction.

Every source is lazy: the file is opened when iteration starts and read line by
line, splitting on whitespace. A missing file raises ``SourceNotFoundError`` on
the first ``next()``.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from pathlib import Path

from little_search.errors import SourceNotFoundError


WordSource = Callable[[str], Iterable[str]]

_ENCODING = "utf-8"


def iter_words(path: Path, *, kind: str = "Document") -> Iterator[str]:
    """Yield whitespace-delimited tokens from ``path``."""
    try:
        handle = Path(path).open(encoding=_ENCODING, errors="replace")
    except OSError as exc:
        raise SourceNotFoundError(kind, path) from exc

    with handle:
        for line in handle:
            yield from line.split()


def iter_document_names(docs_file: Path) -> Iterator[str]:
    """Yield document identifiers listed in ``docs_file``, one per token."""
    return iter_words(docs_file, kind="Docs file")


def iter_noise_words(noise_words_file: Path) -> Iterator[str]:
    """Yield the noise words listed in ``noise_words_file``."""
    return iter_words(noise_words_file, kind="Noise words file")


def directory_word_source(docs_root: Path) -> WordSource:
    """Build a word source that resolves document identifiers under ``docs_root``."""
    root = Path(docs_root)

    def open_words(document_id: str) -> Iterator[str]:
        return iter_words(root / document_id)

    return open_words
