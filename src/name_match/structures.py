"""Basic data structures."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Initials:
    """First characters of each name component."""

    first: str = ""
    middle: str = ""
    last: str = ""


@dataclass(frozen=True)
class ParsedName:
    """Structured components of a free-text personal name."""

    original: str = ""
    cleaned: str = ""
    normalized: str = ""
    prefixes: Tuple[str, ...] = ()
    first_name: str = ""
    middle_names: Tuple[str, ...] = ()
    last_name: str = ""
    suffixes: Tuple[str, ...] = ()
    initials: Initials = field(default_factory=Initials)

    @property
    def main_parts(self) -> Tuple[str, ...]:
        parts = (self.first_name, *self.middle_names, self.last_name)
        return tuple(part for part in parts if part)


@dataclass(frozen=True)
class NameStructure:
    """Comparison-ready view of a :class:`ParsedName`."""

    original: str
    normalized: str
    tokens: Tuple[str, ...]
    first_name: str
    middle_names: Tuple[str, ...]
    last_name: str
    initials: Initials
    first_name_variations: Tuple[str, ...]


@dataclass(frozen=True)
class PairMatch:
    """Similarity of one unordered pair inside a group."""

    name1: str
    name2: str
    similarity: float


@dataclass(frozen=True)
class StructuralGroupResult:
    """Unrounded group aggregate from the structural matcher."""

    score: float
    matches: Tuple[PairMatch, ...] = ()


@dataclass(frozen=True)
class GroupMatchResult:
    """Group aggregate with the threshold decision attached."""

    score: float
    matches: Tuple[PairMatch, ...] = ()
    is_match: bool = True
