"""Name normalization helpers."""

from __future__ import annotations

import re
from typing import List, Tuple

import ftfy
from unidecode import unidecode

from .nicknames import nickname_variants
from .structures import Initials, ParsedName


PREFIXES = frozenset({"mr", "mrs", "ms", "miss", "dr", "prof", "rev", "hon"})
SUFFIXES = frozenset({"jr", "sr", "ii", "iii", "iv", "v", "md", "phd", "esq"})
STOPWORDS = frozenset({"and", "or", "the", "de", "la", "del", "van", "von", "der"})

_SPECIAL_CHAR_PATTERN = re.compile(r"[^\w\s'-]")
_MULTI_SPACE_PATTERN = re.compile(r"\s+")


def _strip_period(token: str) -> str:
    return token[:-1] if token.endswith(".") else token


def clean_name(name: str) -> str:
    """Return `name` lowercased, ASCII-folded and stripped of special characters."""

    if not isinstance(name, str) or not name:
        return ""

    ascii_friendly = unidecode(ftfy.fix_text(name)).lower()
    ascii_friendly = _SPECIAL_CHAR_PATTERN.sub(" ", ascii_friendly)
    collapsed = _MULTI_SPACE_PATTERN.sub(" ", ascii_friendly)
    return collapsed.strip()


def _reorder_commas(name: str) -> str:
    """Rewrite "Last, First[, Rest]" as "First Last [Rest]"."""

    if "," not in name:
        return name

    head, tail, *rest = [segment.strip() for segment in name.split(",")]
    return " ".join(segment for segment in (tail, head, *rest) if segment)


def _classify(tokens: List[str]) -> Tuple[List[str], List[str], List[str]]:
    prefixes: List[str] = []
    suffixes: List[str] = []
    main_parts: List[str] = []
    for token in tokens:
        bare = _strip_period(token)
        if bare in PREFIXES:
            prefixes.append(bare)
        elif bare in SUFFIXES:
            suffixes.append(bare)
        else:
            main_parts.append(token)
    return prefixes, suffixes, main_parts


def parse_name(name: str) -> ParsedName:
    """Split `name` into prefixes, first/middle/last names, suffixes and initials."""

    if not isinstance(name, str) or not name:
        return ParsedName()

    normalized = clean_name(_reorder_commas(name))
    tokens = [token for token in normalized.split(" ") if token]
    prefixes, suffixes, main_parts = _classify(tokens)

    first_name = main_parts[0] if main_parts else ""
    last_name = main_parts[-1] if len(main_parts) > 1 else ""
    middle_names = tuple(main_parts[1:-1]) if len(main_parts) > 2 else ()

    return ParsedName(
        original=name,
        cleaned=normalized,
        normalized=normalized,
        prefixes=tuple(prefixes),
        first_name=first_name,
        middle_names=middle_names,
        last_name=last_name,
        suffixes=tuple(suffixes),
        initials=Initials(
            first=first_name[:1],
            middle="".join(middle[0] for middle in middle_names),
            last=last_name[:1],
        ),
    )


def standardize_name(name: str) -> str:
    """Return `name` as "first [middle...] last" without titles or suffixes."""

    return " ".join(parse_name(name).main_parts)


def get_name_variations(name: str) -> List[str]:
    """Return nickname-expanded spellings of `name`, most faithful first.

    Every first-name candidate (the name itself, its nicknames, and the formal
    names it abbreviates) is combined with the full middle names, with the
    middle initials only, and with no middle names at all.
    """

    parsed = parse_name(name)
    if not parsed.first_name:
        return []

    candidates = nickname_variants(parsed.first_name)
    middle_initials = (parsed.initials.middle,) if parsed.middle_names else ()

    def join(*parts: str) -> str:
        return " ".join(part for part in parts if part)

    variations = [standardize_name(name)]
    variations.extend(join(first, *parsed.middle_names, parsed.last_name) for first in candidates)
    if parsed.middle_names:
        variations.extend(join(first, *middle_initials, parsed.last_name) for first in candidates)
    variations.extend(join(first, parsed.last_name) for first in candidates)

    return [variation for variation in dict.fromkeys(variations) if variation]


def normalize_name_order(name: str) -> str:
    """Return the cleaned name with "Last, First" input rewritten to "first last"."""

    return parse_name(name).normalized
