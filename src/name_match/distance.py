"""Generic string similarity used alongside the name-aware heuristics."""

from __future__ import annotations

import re
from collections import Counter

from rapidfuzz.distance import JaroWinkler, Levenshtein


_WHITESPACE_PATTERN = re.compile(r"\s+")


def jaro_winkler_similarity(first: str, second: str) -> float:
    return JaroWinkler.similarity(first, second)


def levenshtein_similarity(first: str, second: str) -> float:
    """Return ``1 - distance / max_length``; two empty strings are identical."""

    return Levenshtein.normalized_similarity(first, second)


def _letter_pairs(text: str) -> Counter[str]:
    return Counter(text[index : index + 2] for index in range(len(text) - 1))


def dice_coefficient(first: str, second: str) -> float:
    """Return the Sorensen-Dice coefficient over the character bigrams of both strings.

    Case and whitespace are ignored. Bigrams are counted as a multiset, so a
    repeated pair only matches as many times as it occurs on both sides.
    """

    left = _WHITESPACE_PATTERN.sub("", first.lower())
    right = _WHITESPACE_PATTERN.sub("", second.lower())
    left_pairs = _letter_pairs(left)
    right_pairs = _letter_pairs(right)

    total = sum(left_pairs.values()) + sum(right_pairs.values())
    if total == 0:
        return 1.0 if left == right else 0.0
    shared = sum((left_pairs & right_pairs).values())
    return 2.0 * shared / total


def generic_score(first: str, second: str) -> float:
    """Return the best of Jaro-Winkler, Dice and Levenshtein similarity for two raw strings."""

    if not first or not second:
        return 0.0
    return max(
        jaro_winkler_similarity(first, second),
        dice_coefficient(first, second),
        levenshtein_similarity(first, second),
    )
