"""Command line entry point for the Name Match library."""

from __future__ import annotations

import argparse
import os
import sys

from .canonical import generate_clean_canonical
from .normalization import get_name_variations, parse_name
from .pipeline import DEFAULT_THRESHOLD, NameMatcher, NameMatcherConfig


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Score whether personal names refer to the same person.")
    parser.add_argument("names", nargs="+", help="Names to compare (exactly two unless --group or --parse)")
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--group",
        action="store_true",
        help="Check that all names refer to one person",
    )
    mode.add_argument(
        "--parse",
        action="store_true",
        help="Print the parsed components of each name instead of scoring",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=os.getenv("NAME_MATCH_THRESHOLD", str(DEFAULT_THRESHOLD)),
        help="Minimum similarity for a match (default: NAME_MATCH_THRESHOLD or 0.75)",
    )
    parser.add_argument("--verbose", action="store_true", help="Print per-pair progress in group mode")
    parser.add_argument("--progress", action="store_true", help="Show a progress bar in group mode")
    args = parser.parse_args(argv)
    if not args.group and not args.parse and len(args.names) != 2:
        parser.error("exactly two names are required unless --group or --parse is given")
    return args


def _print_parsed(name: str) -> None:
    parsed = parse_name(name)
    initials = parsed.initials
    print(f"Original: \"{name}\"")
    print(f"  Normalized: \"{parsed.normalized}\"")
    print(
        f"  First: \"{parsed.first_name}\", Middle: \"{' '.join(parsed.middle_names)}\", "
        f"Last: \"{parsed.last_name}\""
    )
    if parsed.prefixes:
        print(f"  Prefixes: {', '.join(parsed.prefixes)}")
    if parsed.suffixes:
        print(f"  Suffixes: {', '.join(parsed.suffixes)}")
    print(f"  Initials: {initials.first}{initials.middle}{initials.last}")
    variations = get_name_variations(parsed.first_name)
    if len(variations) > 1:
        print(f"  First name variations: {', '.join(variations)}")


def main(argv: list[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)

    if args.parse:
        for name in args.names:
            _print_parsed(name)
        return 0

    try:
        config = NameMatcherConfig(
            threshold=args.threshold,
            verbose=args.verbose,
            use_tqdm=args.progress,
        )
    except ValueError as exc:
        print(f"ERROR: {exc}")
        return 2

    matcher = NameMatcher(config)
    if args.group:
        result = matcher.match_name_group(args.names)
        for pair in result.matches:
            print(f"\"{pair.name1}\" vs \"{pair.name2}\": Score = {pair.similarity:.2f}")
        decision = "MATCH" if result.is_match else "NO MATCH"
        print(f"Group: {decision} (Score: {result.score:.2f})")
        print(f"Canonical name: {generate_clean_canonical(args.names)}")
        return 0

    first, second = args.names
    score = matcher.get_similarity(first, second)
    decision = "MATCH" if score >= matcher.threshold else "NO MATCH"
    print(f"\"{first}\" vs \"{second}\": Score = {score:.2f}, {decision}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
