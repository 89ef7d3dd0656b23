"""Keyword normalization for the indexer.

A keyword is a token that, once trailing punctuation is stripped, consists only of
letters and is not a noise word. All comparisons are case-insensitive: keywords
are emitted lower-cased.
"""

from __future__ import annotations

from collections.abc import Iterable


PUNCTUATION = frozenset(".,?:;!")


def strip_trailing_punctuation(word: str) -> str:
    """Remove trailing punctuation characters, stopping at the first other character."""
    end = len(word)
    while end and word[end - 1] in PUNCTUATION:
        end -= 1
    return word[:end]


def normalize_keyword(token: str | None, noise_words: frozenset[str] | set[str]) -> str | None:
    """Return the canonical keyword for ``token`` or ``None`` when it is not one.

    Args:
        token: Raw whitespace-delimited word from a document
        noise_words: Lower-case words excluded from the index

    Returns:
        Lower-cased, punctuation-stripped keyword, or None for empty,
        non-alphabetic and noise words
    """
    if token is None:
        return None

    word = strip_trailing_punctuation(token.strip().lower())
    if not word or not word.isalpha():
        return None
    if word in noise_words:
        return None
    return word


class KeywordNormalizer:
    """Callable normalizer bound to a fixed noise-word set."""

    def __init__(self, noise_words: Iterable[str] = ()) -> None:
        self.noise_words = frozenset(word.strip().lower() for word in noise_words if word.strip())

    def __call__(self, token: str | None) -> str | None:
        return normalize_keyword(token, self.noise_words)

    def __contains__(self, word: object) -> bool:
        return word in self.noise_words
