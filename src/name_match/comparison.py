"""Name comparison heuristics."""

from __future__ import annotations

import itertools
from typing import Callable, Sequence, Tuple

from rapidfuzz.distance import Levenshtein

from .normalization import PREFIXES, STOPWORDS, SUFFIXES, get_name_variations, parse_name
from .structures import NameStructure, PairMatch, StructuralGroupResult


EXACT_MATCH = 1.0
FIRST_LAST_MATCH = 0.9
FULL_INITIALS_MATCH = 0.7
FIRST_INITIAL_MATCH = 0.4

_IGNORED_TOKENS = STOPWORDS | PREFIXES | SUFFIXES


def build_structure(name: str) -> NameStructure:
    """Return the comparison-ready structure for `name`."""

    parsed = parse_name(name)
    tokens = tuple(
        token for token in parsed.normalized.split(" ") if token and token not in _IGNORED_TOKENS
    )
    return NameStructure(
        original=name,
        normalized=parsed.normalized,
        tokens=tokens,
        first_name=parsed.first_name,
        middle_names=parsed.middle_names,
        last_name=parsed.last_name,
        initials=parsed.initials,
        first_name_variations=tuple(get_name_variations(parsed.first_name)),
    )


def exact_match_score(left: NameStructure, right: NameStructure) -> float:
    if left.normalized == right.normalized:
        return EXACT_MATCH
    if left.first_name and right.first_name and left.last_name and right.last_name:
        if left.first_name == right.first_name and left.last_name == right.last_name:
            return FIRST_LAST_MATCH
    return 0.0


def token_set_score(left: NameStructure, right: NameStructure) -> float:
    """Return the Jaccard similarity of the two token sets."""

    left_tokens = set(left.tokens)
    right_tokens = set(right.tokens)
    union = left_tokens | right_tokens
    if not union:
        return 0.0
    return len(left_tokens & right_tokens) / len(union)


def initials_match_score(left: NameStructure, right: NameStructure) -> float:
    """Give partial credit when first (and last) initials agree."""

    if not left.tokens or not right.tokens:
        return 0.0
    if left.first_name[:1] != right.first_name[:1]:
        return 0.0
    if left.last_name[:1] == right.last_name[:1]:
        return FULL_INITIALS_MATCH
    return FIRST_INITIAL_MATCH


def edit_distance_score(left: NameStructure, right: NameStructure) -> float:
    if not left.normalized or not right.normalized:
        return 0.0
    return Levenshtein.normalized_similarity(left.normalized, right.normalized)


STRATEGIES: Tuple[Callable[[NameStructure, NameStructure], float], ...] = (
    exact_match_score,
    token_set_score,
    initials_match_score,
    edit_distance_score,
)


class StructuralMatcher:
    """Score names by their parsed structure, keeping the best heuristic."""

    def get_similarity(self, name1: str, name2: str) -> float:
        left = build_structure(name1)
        right = build_structure(name2)
        return max(strategy(left, right) for strategy in STRATEGIES)

    def match_name_group(self, names: Sequence[str]) -> StructuralGroupResult:
        """Return the mean pairwise similarity of `names` with per-pair details."""

        if len(names) <= 1:
            return StructuralGroupResult(score=1.0)

        matches = tuple(
            PairMatch(name1=first, name2=second, similarity=self.get_similarity(first, second))
            for first, second in itertools.combinations(names, 2)
        )
        score = sum(match.similarity for match in matches) / len(matches)
        return StructuralGroupResult(score=score, matches=matches)


__all__ = [
    "StructuralMatcher",
    "build_structure",
    "exact_match_score",
    "token_set_score",
    "initials_match_score",
    "edit_distance_score",
]
