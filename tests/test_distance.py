import pytest

from name_match.distance import (
    dice_coefficient,
    generic_score,
    jaro_winkler_similarity,
    levenshtein_similarity,
)


def test_dice_coefficient_counts_shared_bigrams():
    assert dice_coefficient("night", "nacht") == pytest.approx(0.25)


def test_dice_coefficient_ignores_case_and_whitespace():
    assert dice_coefficient("John Smith", "johnsmith") == 1.0


def test_dice_coefficient_treats_bigrams_as_multiset():
    assert dice_coefficient("aaaa", "aa") == pytest.approx(0.5)


@pytest.mark.parametrize("first, second, expected", [("a", "a", 1.0), ("a", "b", 0.0), ("", "", 1.0)])
def test_dice_coefficient_without_bigrams(first, second, expected):
    assert dice_coefficient(first, second) == expected


def test_levenshtein_similarity():
    assert levenshtein_similarity("kitten", "sitting") == pytest.approx(1 - 3 / 7)
    assert levenshtein_similarity("", "") == 1.0


def test_jaro_winkler_similarity_known_value():
    assert jaro_winkler_similarity("MARTHA", "MARHTA") == pytest.approx(0.961, abs=1e-3)


def test_generic_score_takes_the_best_algorithm():
    first, second = "Robert Johnson", "Bob Johnson"
    expected = max(
        jaro_winkler_similarity(first, second),
        dice_coefficient(first, second),
        levenshtein_similarity(first, second),
    )
    assert generic_score(first, second) == expected


def test_generic_score_empty_input():
    assert generic_score("", "John") == 0.0
    assert generic_score("John", "") == 0.0
