"""Unit tests for the two-keyword top-5 merge."""

import random

import pytest

from little_search.search.models import Occurrence
from little_search.search.top_k import TOP_K, top5_search


def _postings(*pairs):
    return [Occurrence(document, frequency) for document, frequency in pairs]


def _reference_merge(first, second, limit=TOP_K):
    """Stable frequency sort of both heads, keyword 1 first, deduplicated by first appearance."""
    tagged = sorted([*first[:limit], *second[:limit]], key=lambda o: -o.frequency)
    ordered = list(dict.fromkeys(o.document for o in tagged))
    return ordered[:limit]


@pytest.mark.unit
class TestTop5Search:
    """Merged results follow frequency order with keyword-1 tie-breaks."""

    def test_tie_favours_first_keyword_and_dedupes(self):
        index = {
            "cat": _postings(("d1", 5), ("d2", 3)),
            "dog": _postings(("d3", 5), ("d1", 3)),
        }

        assert top5_search(index, "cat", "dog") == ["d1", "d3", "d2"]

    def test_swapping_keywords_changes_tie_break(self):
        index = {
            "cat": _postings(("d1", 5), ("d2", 3)),
            "dog": _postings(("d3", 5), ("d1", 3)),
        }

        assert top5_search(index, "dog", "cat") == ["d3", "d1", "d2"]

    def test_both_missing_returns_empty_list(self):
        assert top5_search({"cat": _postings(("d1", 1))}, "emu", "yak") == []

    def test_one_keyword_missing(self):
        index = {"cat": _postings(("d1", 9), ("d2", 4), ("d3", 1))}

        assert top5_search(index, "emu", "cat") == ["d1", "d2", "d3"]
        assert top5_search(index, "cat", "emu") == ["d1", "d2", "d3"]

    def test_same_keyword_twice(self):
        index = {"cat": _postings(*[(f"d{i}", 10 - i) for i in range(7)])}

        assert top5_search(index, "cat", "cat") == ["d0", "d1", "d2", "d3", "d4"]

    def test_disjoint_lists_fill_five(self):
        index = {
            "cat": _postings(("c1", 9), ("c2", 7), ("c3", 5), ("c4", 3), ("c5", 1), ("c6", 1)),
            "dog": _postings(("g1", 8), ("g2", 6), ("g3", 4), ("g4", 2), ("g5", 1)),
        }

        assert top5_search(index, "cat", "dog") == ["c1", "g1", "c2", "g2", "c3"]

    def test_only_top_five_of_each_list_considered(self):
        index = {
            "cat": _postings(*[(f"c{i}", 10) for i in range(7)]),
            "dog": _postings(("g1", 1)),
        }

        assert top5_search(index, "dog", "cat") == ["c0", "c1", "c2", "c3", "c4"]

    def test_duplicate_beyond_first_result_is_skipped(self):
        # d2 is already the second result when it surfaces again in "dog".
        index = {
            "cat": _postings(("d1", 9), ("d2", 8), ("d4", 1)),
            "dog": _postings(("d3", 7), ("d2", 6), ("d5", 5)),
        }

        assert top5_search(index, "cat", "dog") == ["d1", "d2", "d3", "d5", "d4"]

    def test_duplicate_while_draining_is_skipped(self):
        index = {
            "cat": _postings(("d1", 9)),
            "dog": _postings(("d2", 9), ("d3", 8), ("d1", 2), ("d4", 1)),
        }

        assert top5_search(index, "cat", "dog") == ["d1", "d2", "d3", "d4"]

    def test_shared_head_advances_both_lists(self):
        index = {
            "cat": _postings(("d1", 2), ("d2", 1)),
            "dog": _postings(("d1", 6), ("d3", 1)),
        }

        assert top5_search(index, "cat", "dog") == ["d1", "d2", "d3"]

    def test_accepts_frozen_tuples(self):
        index = {"cat": tuple(_postings(("d1", 2))), "dog": tuple(_postings(("d2", 3)))}

        assert top5_search(index, "cat", "dog") == ["d2", "d1"]

    @pytest.mark.parametrize(
        ("first", "second"),
        [
            (_postings(("d1", 5), ("d2", 3)), _postings(("d3", 5), ("d1", 3))),
            (_postings(("d1", 2), ("d2", 1)), _postings(("d1", 6), ("d3", 1))),
            (_postings(("d1", 9), ("d2", 8), ("d4", 1)), _postings(("d3", 7), ("d2", 6), ("d5", 5))),
        ],
    )
    def test_matches_reference_merge(self, first, second):
        assert top5_search({"cat": first, "dog": second}, "cat", "dog") == _reference_merge(first, second)

    def test_does_not_mutate_index(self):
        index = {
            "cat": _postings(("d1", 5), ("d2", 3)),
            "dog": _postings(("d3", 5), ("d1", 3)),
        }
        snapshot = {keyword: list(postings) for keyword, postings in index.items()}

        top5_search(index, "cat", "dog")

        assert index == snapshot

    def test_random_merges_match_stable_frequency_order(self):
        rng = random.Random(42)
        documents = [f"d{i}" for i in range(12)]
        for _ in range(300):
            index = {}
            for keyword in ("cat", "dog"):
                chosen = rng.sample(documents, rng.randint(0, 8))
                index[keyword] = sorted(
                    (Occurrence(document, rng.randint(1, 5)) for document in chosen),
                    key=lambda o: -o.frequency,
                )

            results = top5_search(index, "cat", "dog")

            assert len(results) <= TOP_K
            assert len(set(results)) == len(results)
            candidates = {o.document for o in index["cat"][:TOP_K]} | {o.document for o in index["dog"][:TOP_K]}
            assert set(results) <= candidates
            assert len(results) == min(TOP_K, len(candidates))
            assert results == _reference_merge(index["cat"], index["dog"])
