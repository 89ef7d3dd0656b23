"""Posting list maintenance for the global keyword index.

Each keyword maps to a list of Occurrences kept in descending frequency order.
Documents are folded in one at a time; an incoming Occurrence is appended and
then moved to its sorted position with a binary search, so documents with equal
frequency stay in the order they were merged.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
import logging

from little_search.search.models import Occurrence


logger = logging.getLogger(__name__)


def insert_last_occurrence(occurrences: list[Occurrence]) -> list[int] | None:
    """Move the last Occurrence of ``occurrences`` to its sorted position.

    Elements ``0..n-2`` must already be in descending frequency order. The
    insertion point is found by binary search; equal frequencies keep searching
    to the right so the new entry lands after every equal entry.

    Args:
        occurrences: Posting list whose last element is the new entry

    Returns:
        Midpoint indexes checked by the binary search, or None when the list
        holds a single element.
    """
    if len(occurrences) == 1:
        return None

    item = occurrences.pop()
    checked: list[int] = []
    lo = 0
    hi = len(occurrences) - 1
    mid = 0

    while lo <= hi:
        mid = (lo + hi) // 2
        checked.append(mid)
        if item.frequency > occurrences[mid].frequency:
            hi = mid - 1
        else:
            lo = mid + 1

    if item.frequency > occurrences[mid].frequency:
        occurrences.insert(mid, item)
    else:
        occurrences.insert(mid + 1, item)

    return checked


def merge_keywords(
    index: MutableMapping[str, list[Occurrence]],
    document_keywords: Mapping[str, Occurrence],
) -> None:
    """Fold one document's keyword Occurrences into ``index``."""
    for keyword, occurrence in document_keywords.items():
        postings = index.get(keyword)
        if postings is None:
            index[keyword] = [occurrence]
            continue

        postings.append(occurrence)
        checked = insert_last_occurrence(postings)
        logger.debug("Inserted %s into %r after checking %s", occurrence, keyword, checked)
