"""Convenience helpers that build a fresh matcher per call."""

from __future__ import annotations

from typing import Optional, Sequence

from .pipeline import NameMatcher, NameMatcherConfig
from .structures import GroupMatchResult


def match(name1: str, name2: str, config: Optional[NameMatcherConfig] = None) -> float:
    """Return the combined similarity of `name1` and `name2`."""

    return NameMatcher(config).get_similarity(name1, name2)


def is_match(name1: str, name2: str, config: Optional[NameMatcherConfig] = None) -> bool:
    """Return True when `name1` and `name2` score at or above the threshold."""

    return NameMatcher(config).is_match(name1, name2)


def match_group(names: Sequence[str], config: Optional[NameMatcherConfig] = None) -> GroupMatchResult:
    """Return the group consistency result for `names`."""

    return NameMatcher(config).match_name_group(names)
