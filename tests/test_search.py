import pytest

from fuzzypick.consts import SCORE_MAX, SCORE_MIN
from fuzzypick.search import has_match, rank_choices


@pytest.mark.parametrize(
    ("needle", "haystack", "expected"),
    [
        ("", "", True),
        ("", "abc", True),
        ("amor", "app/models/order", True),
        ("AMOR", "app/models/order", True),
        ("amor", "app/models/zrder", True),
        ("amor", "app/zebra", False),
        ("ab", "ba", False),
        ("abc", "", False),
        ("aa", "a", False),
        ("aa", "a/a", True),
    ],
)
def test_has_match(needle: str, haystack: str, expected: bool) -> None:
    assert has_match(needle, haystack) is expected


def test_rank_choices_orders_best_first_and_drops_non_matches() -> None:
    choices = rank_choices(
        "amor", ["app/models/zrder", "README.md", "app/models/order", "amor/x"]
    )

    assert [choice.text for choice in choices] == [
        "amor/x",
        "app/models/order",
        "app/models/zrder",
    ]
    assert choices[0].value > choices[1].value > choices[2].value
    assert choices[1].positions == [0, 4, 11, 12]


def test_rank_choices_exact_match_first() -> None:
    choices = rank_choices("test", ["testing", "tests", "TEST"])

    assert [choice.text for choice in choices] == ["TEST", "tests", "testing"]
    assert choices[0].value == SCORE_MAX
    assert choices[0].positions == [0, 1, 2, 3]


def test_rank_choices_breaks_ties_by_text() -> None:
    choices = rank_choices("a", ["c/a", "b/a"])

    assert choices[0].value == choices[1].value
    assert [choice.text for choice in choices] == ["b/a", "c/a"]


def test_rank_choices_with_empty_query_keeps_order() -> None:
    choices = rank_choices("", ["zeta", "alpha"])

    assert [choice.text for choice in choices] == ["zeta", "alpha"]
    assert all(choice.value == SCORE_MIN for choice in choices)
    assert all(choice.positions is None for choice in choices)


def test_rank_choices_limit() -> None:
    candidates = ["a1", "a2", "a3", "b"]

    assert [c.text for c in rank_choices("a", candidates, limit=2)] == ["a1", "a2"]
    assert rank_choices("a", candidates, limit=0) == []
    assert len(rank_choices("", candidates, limit=3)) == 3


def test_rank_choices_rejects_negative_limit() -> None:
    with pytest.raises(ValueError):
        rank_choices("a", ["a"], limit=-1)
