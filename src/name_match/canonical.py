"""Canonical name selection utilities."""

from __future__ import annotations

from typing import Iterable

from .normalization import parse_name


def generate_clean_canonical(original_names: Iterable[str]) -> str:
    """Return the most complete spelling among `original_names` in title case."""

    parsed = [parse_name(name) for name in original_names]
    parsed = [name for name in parsed if name.first_name]
    if not parsed:
        return ""

    def score(index: int) -> tuple[int, int, int, int, int]:
        name = parsed[index]
        middles = name.middle_names
        return (
            int(len(name.first_name) > 1),
            int(len(name.last_name) > 1),
            int(bool(middles) and all(len(middle) > 1 for middle in middles)),
            len(name.main_parts),
            len(" ".join(name.main_parts)),
        )

    best = parsed[max(range(len(parsed)), key=score)]
    return " ".join(piece.capitalize() for piece in best.main_parts)
