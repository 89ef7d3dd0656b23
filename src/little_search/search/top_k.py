"""Two-keyword OR query over frequency-ordered posting lists.

Both posting lists are already sorted by descending frequency, so the top
``limit`` entries of each are enough to produce the combined top ``limit``.
The lists are merged with two pointers:

- the higher frequency head is taken first;
- equal frequencies favour the first keyword;
- a document heading both lists advances both pointers;
- a document already in the result is skipped, wherever it was added.
"""

from __future__ import annotations

from collections.abc import Sequence

from little_search.search.models import KeywordIndex, Occurrence


TOP_K = 5


def _head(postings: Sequence[Occurrence], limit: int) -> Sequence[Occurrence]:
    return postings[:limit]


def top5_search(index: KeywordIndex, keyword1: str, keyword2: str, limit: int = TOP_K) -> list[str]:
    """Return up to ``limit`` documents containing ``keyword1`` or ``keyword2``.

    Args:
        index: Keyword to posting list mapping, sorted by descending frequency
        keyword1: First keyword; wins frequency ties
        keyword2: Second keyword

    Returns:
        Document identifiers ranked by frequency, each at most once. Empty when
        neither keyword is indexed.
    """
    first = _head(index.get(keyword1, ()), limit)
    second = _head(index.get(keyword2, ()), limit)

    results: list[str] = []
    seen: set[str] = set()

    def add(document: str) -> None:
        if document not in seen:
            seen.add(document)
            results.append(document)

    i = j = 0
    while i < len(first) and j < len(second) and len(results) < limit:
        left, right = first[i], second[j]
        if left.document == right.document:
            add(left.document)
            i += 1
            j += 1
        elif left.frequency >= right.frequency:
            add(left.document)
            i += 1
        else:
            add(right.document)
            j += 1

    for remaining in (first[i:], second[j:]):
        for occurrence in remaining:
            if len(results) >= limit:
                break
            add(occurrence.document)

    return results
