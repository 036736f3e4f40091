"""Combined scorer for the Name Match library."""

from __future__ import annotations

import itertools
import time
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, List, Sequence, Tuple

from tqdm import tqdm

from .comparison import StructuralMatcher
from .distance import generic_score
from .structures import GroupMatchResult, PairMatch


DEFAULT_THRESHOLD = 0.75

_CENT = Decimal("0.01")


def round_score(score: float) -> float:
    """Round `score` to two decimals, halves away from zero."""

    return float(Decimal(score).quantize(_CENT, rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class NameMatcherConfig:
    """Configuration parameters for :class:`NameMatcher`."""

    threshold: float = DEFAULT_THRESHOLD
    verbose: bool = False
    use_tqdm: bool = False

    def __post_init__(self) -> None:
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(f"threshold must be between 0 and 1, got {self.threshold}")


class NameMatcher:
    """Decide whether personal names refer to the same individual."""

    def __init__(
        self,
        config: NameMatcherConfig | None = None,
        structural_matcher: StructuralMatcher | None = None,
    ) -> None:
        self.config = config or NameMatcherConfig()
        self.structural_matcher = structural_matcher or StructuralMatcher()

    @property
    def threshold(self) -> float:
        return self.config.threshold

    def get_similarity(self, name1: str, name2: str) -> float:
        """Return the averaged generic and structural similarity of two names."""

        if not isinstance(name1, str) or not isinstance(name2, str):
            return 0.0
        if not name1 or not name2:
            return 0.0
        if name1 == name2:
            return 1.0

        generic = generic_score(name1, name2)
        structural = self.structural_matcher.get_similarity(name1, name2)
        return round_score((generic + structural) / 2)

    def is_match(self, name1: str, name2: str) -> bool:
        return self.get_similarity(name1, name2) >= self.threshold

    def match_name_group(self, names: Sequence[str]) -> GroupMatchResult:
        """Score every pair in `names` and decide whether the group is one person."""

        names = list(names)
        if len(names) <= 1:
            return GroupMatchResult(score=1.0, matches=(), is_match=True)

        verbose = self.config.verbose
        t0 = time.time()
        pairs: List[Tuple[str, str]] = list(itertools.combinations(names, 2))
        if verbose:
            print(f"--- Matching group of {len(names)} names ({len(pairs)} pairs) ---")

        iterator: Iterable[Tuple[str, str]] = pairs
        if self.config.use_tqdm:
            iterator = tqdm(pairs, desc="   Scoring Pairs", unit="pair")

        matches: List[PairMatch] = []
        for first, second in iterator:
            similarity = self.get_similarity(first, second)
            matches.append(PairMatch(name1=first, name2=second, similarity=similarity))
            if verbose:
                print(f"   '{first}' vs '{second}': {similarity:.2f}")

        score = round_score(sum(match.similarity for match in matches) / len(matches))
        is_match = score >= self.threshold

        if verbose:
            decision = "MATCH" if is_match else "NO MATCH"
            print(f"   Group score: {score:.2f} ({decision}, threshold {self.threshold:.2f})")
            print(f"   Done in {time.time() - t0:.2f}s")

        return GroupMatchResult(score=score, matches=tuple(matches), is_match=is_match)


__all__ = [
    "DEFAULT_THRESHOLD",
    "NameMatcher",
    "NameMatcherConfig",
    "round_score",
]
