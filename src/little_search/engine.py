"""Keyword index construction and top-5 querying.

The engine has two phases. ``build_index`` loads the noise words, then loads
and merges every document in order into a private mutable index. When the last
document is merged the index is frozen into a read-only mapping of tuples and
``search`` becomes available. A failed build leaves the engine unbuilt.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
import logging
from pathlib import Path
from types import MappingProxyType

from little_search.errors import IndexNotBuiltError, SourceNotFoundError
from little_search.observability.context import bound_context
from little_search.observability.metrics import (
    BUILD_FAILURES,
    BUILD_LATENCY,
    DOCUMENTS_INDEXED,
    INDEX_KEYWORD_COUNT,
    SEARCH_COUNT,
    SEARCH_LATENCY,
    track_latency,
)
from little_search.observability.tracing import create_span
from little_search.search.analyzers import KeywordNormalizer
from little_search.search.loader import load_document
from little_search.search.merger import merge_keywords
from little_search.search.models import Occurrence
from little_search.search.sources import WordSource, directory_word_source, iter_document_names, iter_noise_words
from little_search.search.top_k import TOP_K, top5_search


logger = logging.getLogger(__name__)


class LittleSearchEngine:
    """In-memory keyword index answering two-keyword OR queries."""

    def __init__(self, docs_root: Path | None = None) -> None:
        self.docs_root = Path(docs_root) if docs_root is not None else Path.cwd()
        self._normalizer = KeywordNormalizer()
        self._index: Mapping[str, tuple[Occurrence, ...]] | None = None

    @property
    def is_built(self) -> bool:
        return self._index is not None

    @property
    def noise_words(self) -> frozenset[str]:
        return self._normalizer.noise_words

    @property
    def index(self) -> Mapping[str, tuple[Occurrence, ...]]:
        """Read-only keyword index. Raises IndexNotBuiltError before a build completes."""
        if self._index is None:
            raise IndexNotBuiltError("Index has not been built; call build_index() first")
        return self._index

    def get_keyword(self, word: str | None) -> str | None:
        """Normalize ``word`` against the loaded noise words."""
        return self._normalizer(word)

    def build_index(
        self,
        document_names: Iterable[str],
        noise_words: Iterable[str],
        open_words: WordSource | None = None,
    ) -> Mapping[str, tuple[Occurrence, ...]]:
        """Index every document yielded by ``document_names``.

        Args:
            document_names: Document identifiers, merged in the order given
            noise_words: Words excluded from the index
            open_words: Returns the raw word stream of a document; defaults to
                reading ``docs_root / document_id``

        Returns:
            The frozen keyword index

        Raises:
            SourceNotFoundError: If any source cannot be opened. The engine is
                left unbuilt.

        A document identifier listed more than once is indexed only the first
        time, so no posting list holds two Occurrences of one document.
        """
        words_for = open_words or directory_word_source(self.docs_root)
        self._index = None
        building: dict[str, list[Occurrence]] = {}
        indexed: set[str] = set()

        with bound_context(corpus=str(self.docs_root)):
            with create_span("index.build", attributes={"index.docs_root": str(self.docs_root)}) as span:
                try:
                    with track_latency(BUILD_LATENCY):
                        self._normalizer = KeywordNormalizer(noise_words)
                        logger.info("Building index with %d noise words", len(self._normalizer.noise_words))

                        for document_id in document_names:
                            if document_id in indexed:
                                logger.warning("Skipping %s: already indexed", document_id)
                                continue
                            with create_span("index.load_document", attributes={"document.id": document_id}):
                                keywords = load_document(document_id, words_for(document_id), self._normalizer)
                            merge_keywords(building, keywords)
                            indexed.add(document_id)
                            DOCUMENTS_INDEXED.inc()
                            logger.debug("Merged %s (%d keywords)", document_id, len(keywords))
                except SourceNotFoundError as exc:
                    BUILD_FAILURES.labels(source=exc.kind).inc()
                    logger.error("Index build aborted after %d documents: %s", len(indexed), exc)
                    raise

                span.set_attribute("index.documents", len(indexed))
                span.set_attribute("index.keywords", len(building))

            self._index = MappingProxyType({keyword: tuple(postings) for keyword, postings in building.items()})
            INDEX_KEYWORD_COUNT.set(len(self._index))
            logger.info("Indexed %d documents, %d keywords", len(indexed), len(self._index))
        return self._index

    def make_index(
        self,
        docs_file: Path | str,
        noise_words_file: Path | str,
    ) -> Mapping[str, tuple[Occurrence, ...]]:
        """Build the index from a docs list file and a noise-word file.

        Document names in ``docs_file`` are resolved against ``docs_root``.
        """
        return self.build_index(iter_document_names(Path(docs_file)), iter_noise_words(Path(noise_words_file)))

    def search(self, keyword1: str, keyword2: str) -> list[str]:
        """Top-5 documents containing ``keyword1`` or ``keyword2``.

        Keywords are matched exactly against the lower-case index keys.
        """
        index = self.index
        with create_span("index.search", attributes={"search.keyword1": keyword1, "search.keyword2": keyword2}):
            with track_latency(SEARCH_LATENCY):
                results = top5_search(index, keyword1, keyword2, TOP_K)

        SEARCH_COUNT.labels(outcome="hit" if results else "miss").inc()
        logger.debug("search(%r, %r) -> %s", keyword1, keyword2, results)
        return results
