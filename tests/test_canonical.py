from name_match.canonical import generate_clean_canonical


def test_generate_clean_canonical_prefers_full_name():
    names = [
        "J. B. Smith",
        "John Barrett Smith",
        "John Smith",
    ]
    assert generate_clean_canonical(names) == "John Barrett Smith"


def test_generate_clean_canonical_drops_titles_and_reorders():
    assert generate_clean_canonical(["Dr. Smith, John Jr."]) == "John Smith"


def test_generate_clean_canonical_keeps_first_of_equals():
    names = ["Aaron Charles Donovan", "Aaron Donovan", "Donovan Aaron Charles"]
    assert generate_clean_canonical(names) == "Aaron Charles Donovan"


def test_generate_clean_canonical_handles_empty_cluster():
    assert generate_clean_canonical([]) == ""
    assert generate_clean_canonical(["", "!!!"]) == ""
