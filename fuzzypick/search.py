from __future__ import annotations

import logging
from collections.abc import Iterable

from fuzzypick.chars import chars_equal
from fuzzypick.consts import SCORE_MIN
from fuzzypick.models import Choice
from fuzzypick.score import Score, score_with_positions

logger = logging.getLogger(__name__)


def has_match(needle: str, haystack: str) -> bool:
    """Check that every needle character occurs in the haystack, in order."""
    cursor = 0
    for needle_char in needle:
        while cursor < len(haystack) and not chars_equal(
            needle_char, haystack[cursor]
        ):
            cursor += 1
        if cursor == len(haystack):
            return False
        cursor += 1
    return True


def rank_choices(
    query: str, candidates: Iterable[str], *, limit: int | None = None
) -> list[Choice]:
    """Score candidates against ``query``, best first.

    Candidates that don't contain the query as a subsequence are dropped. An
    empty query keeps every candidate in its original order.
    """
    if limit is not None and limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")

    if not query:
        choices = [
            Choice(text=candidate, score=Score(SCORE_MIN)) for candidate in candidates
        ]
    else:
        choices = [
            Choice(text=candidate, score=score_with_positions(query, candidate))
            for candidate in candidates
            if has_match(query, candidate)
        ]
        choices.sort(key=Choice.rank_key)

    logger.debug("Ranked %d matches for query %r", len(choices), query)
    if limit is not None:
        return choices[:limit]
    return choices
