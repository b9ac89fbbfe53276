"""Title matching used to pair preprints with their published versions."""
from __future__ import annotations

import re
from typing import List, Sequence

_NON_LETTERS = re.compile(r"[^a-z ]")


def tokenize_title(title: str, min_length: int = 4) -> List[str]:
    """Return the significant lowercase words of a title.

    Everything outside ``a-z`` and space is dropped before splitting, so
    ``"Circuit-level"`` becomes ``"circuitlevel"``. Words shorter than
    ``min_length`` are discarded as noise.
    """
    cleaned = _NON_LETTERS.sub("", title.lower())
    return [word for word in cleaned.split() if len(word) >= min_length]


def titles_similar(words_a: Sequence[str], words_b: Sequence[str], threshold: float = 0.5) -> bool:
    """Return True when the word overlap exceeds ``threshold`` of the shorter title."""
    if not words_a or not words_b:
        return False
    vocabulary_b = set(words_b)
    overlap = sum(1 for word in words_a if word in vocabulary_b)
    return overlap / min(len(words_a), len(words_b)) > threshold


class TitleMatcher:
    """Base interface deciding whether two titles describe the same work."""

    name: str = "base"

    def is_same_work(self, title_a: str, title_b: str) -> bool:  # pragma: no cover - interface
        raise NotImplementedError


class TokenOverlapMatcher(TitleMatcher):
    """Bag-of-words overlap heuristic.

    This is approximate on purpose: titles that were reworded between preprint
    and journal versions can slip through, and unrelated papers sharing most of
    their long words can be paired. Swap in a stricter matcher if that matters.
    """

    name = "token_overlap"

    def __init__(self, threshold: float = 0.5, min_length: int = 4):
        self.threshold = threshold
        self.min_length = min_length

    def tokens(self, title: str) -> List[str]:
        return tokenize_title(title, self.min_length)

    def is_same_work(self, title_a: str, title_b: str) -> bool:
        return titles_similar(self.tokens(title_a), self.tokens(title_b), self.threshold)


class ExactTitleMatcher(TitleMatcher):
    """Strict matcher comparing whitespace- and case-normalized titles."""

    name = "exact"

    def is_same_work(self, title_a: str, title_b: str) -> bool:
        return " ".join(title_a.lower().split()) == " ".join(title_b.lower().split())
