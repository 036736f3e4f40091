import pytest

from name_match.normalization import (
    clean_name,
    get_name_variations,
    normalize_name_order,
    parse_name,
    standardize_name,
)
from name_match.structures import ParsedName


def test_parse_name_separates_titles_and_suffixes():
    parsed = parse_name("Dr. John William Smith Jr.")
    assert parsed.prefixes == ("dr",)
    assert parsed.first_name == "john"
    assert parsed.middle_names == ("william",)
    assert parsed.last_name == "smith"
    assert parsed.suffixes == ("jr",)
    assert parsed.original == "Dr. John William Smith Jr."


def test_parse_name_handles_last_name_first():
    assert parse_name("Smith, John").normalized == "john smith"
    assert parse_name("John Smith").normalized == "john smith"


def test_parse_name_keeps_trailing_comma_segments():
    parsed = parse_name("Smith, John, Jr.")
    assert parsed.normalized == "john smith jr"
    assert parsed.first_name == "john"
    assert parsed.last_name == "smith"
    assert parsed.suffixes == ("jr",)


def test_parse_name_always_swaps_first_two_comma_segments():
    parsed = parse_name("John Smith, Jr.")
    assert parsed.normalized == "jr john smith"
    assert parsed.first_name == "john"
    assert parsed.suffixes == ("jr",)


def test_parse_name_partitions_main_parts():
    parsed = parse_name("Mr. Juan Carlos de la Cruz III")
    assert parsed.prefixes == ("mr",)
    assert parsed.suffixes == ("iii",)
    assert parsed.first_name == "juan"
    assert parsed.middle_names == ("carlos", "de", "la")
    assert parsed.last_name == "cruz"
    assert parsed.initials.first == "j"
    assert parsed.initials.middle == "cdl"
    assert parsed.initials.last == "c"


def test_parse_name_single_token():
    parsed = parse_name("Madonna")
    assert parsed.first_name == "madonna"
    assert parsed.last_name == ""
    assert parsed.middle_names == ()
    assert parsed.initials.last == ""


@pytest.mark.parametrize("value", ["", None, 42])
def test_parse_name_invalid_input_is_empty(value):
    assert parse_name(value) == ParsedName()


def test_parse_name_only_special_characters():
    parsed = parse_name("!!!")
    assert parsed.original == "!!!"
    assert parsed.normalized == ""
    assert parsed.first_name == ""


def test_clean_name_strips_special_characters():
    assert clean_name("  Mary-Elizabeth  O'Connor (Parker)! ") == "mary-elizabeth o'connor parker"


def test_clean_name_handles_unicode():
    assert clean_name("José Álvarez") == "jose alvarez"


@pytest.mark.parametrize("value", ["", None])
def test_clean_name_empty_string(value):
    assert clean_name(value) == ""


def test_standardize_name_drops_titles_and_restores_order():
    assert standardize_name("Dr. Smith, John William") == "john william smith"
    assert standardize_name("Michael Jackson Jr") == "michael jackson"


def test_get_name_variations_expands_nicknames():
    assert get_name_variations("William Smith") == [
        "william smith",
        "will smith",
        "bill smith",
        "billy smith",
        "willy smith",
    ]


def test_get_name_variations_reverse_lookup_with_middle_names():
    assert get_name_variations("Bob Lee Jones") == [
        "bob lee jones",
        "robert lee jones",
        "bob l jones",
        "robert l jones",
        "bob jones",
        "robert jones",
    ]


def test_get_name_variations_first_name_only():
    assert get_name_variations("Al") == ["al", "alexander"]


def test_get_name_variations_empty():
    assert get_name_variations("") == []


def test_normalize_name_order():
    assert normalize_name_order("Smith, John") == "john smith"
    assert normalize_name_order("") == ""
