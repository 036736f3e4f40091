"""Name Match library initialization."""

from .canonical import generate_clean_canonical
from .comparison import StructuralMatcher
from .distance import generic_score
from .normalization import (
    clean_name,
    get_name_variations,
    normalize_name_order,
    parse_name,
    standardize_name,
)
from .pipeline import NameMatcher, NameMatcherConfig
from .runner import is_match, match, match_group
from .structures import GroupMatchResult, Initials, NameStructure, PairMatch, ParsedName

__all__ = [
    "NameMatcher",
    "NameMatcherConfig",
    "StructuralMatcher",
    "GroupMatchResult",
    "PairMatch",
    "ParsedName",
    "NameStructure",
    "Initials",
    "generic_score",
    "generate_clean_canonical",
    "clean_name",
    "parse_name",
    "standardize_name",
    "get_name_variations",
    "normalize_name_order",
    "match",
    "is_match",
    "match_group",
]
