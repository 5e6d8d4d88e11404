from __future__ import annotations

import string

from fuzzypick.consts import (
    SCORE_MATCH_CAPITAL,
    SCORE_MATCH_DOT,
    SCORE_MATCH_SLASH,
    SCORE_MATCH_WORD,
)

SEPARATOR_BONUSES = {
    "/": SCORE_MATCH_SLASH,
    "-": SCORE_MATCH_WORD,
    "_": SCORE_MATCH_WORD,
    " ": SCORE_MATCH_WORD,
    ".": SCORE_MATCH_DOT,
}

_LOWER = frozenset(string.ascii_lowercase)
_UPPER = frozenset(string.ascii_uppercase)
_DIGITS = frozenset(string.digits)


def bonus_for_char(previous: str, current: str) -> float:
    if current in _LOWER or current in _DIGITS:
        return SEPARATOR_BONUSES.get(previous, 0.0)
    if current in _UPPER:
        if previous in _LOWER:
            return SCORE_MATCH_CAPITAL
        return SEPARATOR_BONUSES.get(previous, 0.0)
    return 0.0


def compute_bonus(haystack: str) -> list[float]:
    """Return the boundary bonus for a match at each haystack position.

    The start of the haystack counts as following a ``/``, so position 0 always
    gets the slash bonus when it holds a letter or digit.
    """
    bonuses: list[float] = []
    previous = "/"
    for current in haystack:
        bonuses.append(bonus_for_char(previous, current))
        previous = current
    return bonuses
