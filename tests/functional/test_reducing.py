import pytest
from higherorder.functional.reducing import (
    concat_words,
    honoree_roll,
    total,
    total_with_steps,
)


@pytest.fixture
def fibonacci():
    return [1, 1, 2, 3, 5, 8, 13, 21]


def test_total(fibonacci):
    assert total(fibonacci) == 54
    assert total([]) == 0


def test_total_with_steps(fibonacci):
    result, steps = total_with_steps(fibonacci)
    assert result == total(fibonacci)
    assert len(steps) == len(fibonacci)
    assert steps[0] == "0 + 1 = 1"
    assert steps[-1] == "33 + 21 = 54"


def test_total_with_steps_empty():
    assert total_with_steps([]) == (0, [])


def test_concat_words():
    words = ["This", "might", "sound", "crazy"]
    assert concat_words(words) == "This might sound crazy"
    assert concat_words(words, separator="-") == "This-might-sound-crazy"


def test_concat_words_edge_cases():
    assert concat_words([]) == ""
    assert concat_words(["solo"]) == "solo"
    assert concat_words(["", "a"]) == " a"


def test_honoree_roll():
    names = {"Alan": "Turing", "Ada": "Lovelace", "Grace": "Hopper"}
    assert honoree_roll(names) == (
        "Honoree: A. Turing.\n" "Honoree: A. Lovelace.\n" "Honoree: G. Hopper.\n"
    )
    assert honoree_roll({}) == ""


def test_concat_words_has_no_leading_separator():
    assert not concat_words(["map", "me", "maybe"]).startswith(" ")
    assert concat_words(["map", "me", "maybe"]) == "map me maybe"
