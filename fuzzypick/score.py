from __future__ import annotations

from dataclasses import dataclass, field

from fuzzypick.bonus import compute_bonus
from fuzzypick.chars import chars_equal
from fuzzypick.consts import (
    SCORE_GAP_INNER,
    SCORE_GAP_LEADING,
    SCORE_GAP_TRAILING,
    SCORE_MATCH_CONSECUTIVE,
    SCORE_MAX,
    SCORE_MIN,
)
from fuzzypick.matrix import Matrix

__all__ = [
    "Score",
    "derive_match_positions",
    "generate_score_matrices",
    "score",
    "score_with_positions",
]


@dataclass(frozen=True, order=True)
class Score:
    """A match score; comparisons only look at ``value``."""

    value: float
    positions: list[int] | None = field(default=None, compare=False)


def generate_score_matrices(needle: str, haystack: str) -> tuple[Matrix, Matrix]:
    """Fill the best-score matrix ``M`` and the exact-match matrix ``D``.

    ``M[i][j]`` is the best score for ``needle[: i + 1]`` against
    ``haystack[: j + 1]``; ``D[i][j]`` is the best score when ``needle[i]`` is
    matched exactly at ``haystack[j]``, or ``SCORE_MIN`` when it can't be.
    """
    len_n = len(needle)
    len_h = len(haystack)
    bonus = compute_bonus(haystack)

    best = Matrix(len_n, len_h)
    matched = Matrix(len_n, len_h)

    for i, needle_char in enumerate(needle):
        prev_score = SCORE_MIN
        gap_score = SCORE_GAP_TRAILING if i == len_n - 1 else SCORE_GAP_INNER

        for j, haystack_char in enumerate(haystack):
            if not chars_equal(needle_char, haystack_char):
                prev_score += gap_score
                matched.set(i, j, SCORE_MIN)
                best.set(i, j, prev_score)
                continue

            match_score = SCORE_MIN
            if i == 0:
                match_score = j * SCORE_GAP_LEADING + bonus[j]
            elif j > 0:
                diagonal_best = best.get(i - 1, j - 1)
                diagonal_match = matched.get(i - 1, j - 1)
                assert diagonal_best is not None and diagonal_match is not None
                match_score = max(
                    diagonal_best + bonus[j],
                    diagonal_match + SCORE_MATCH_CONSECUTIVE,
                )

            prev_score = max(match_score, prev_score + gap_score)
            matched.set(i, j, match_score)
            best.set(i, j, prev_score)

    return best, matched


def derive_match_positions(best: Matrix, matched: Matrix) -> list[int]:
    """Walk the matrices backwards to find one haystack index per needle char.

    Once a needle character is placed through a consecutive-match extension, the
    previous needle character must sit on the diagonal, so runs are never split.
    """
    len_n, len_h = best.rows, best.cols
    if len_n == 0 or len_h == 0:
        raise ValueError(f"cannot derive positions from a {len_n}x{len_h} matrix")
    if (matched.rows, matched.cols) != (len_n, len_h):
        raise ValueError("score matrices differ in shape")

    positions = [0] * len_n
    match_required = False
    j = len_h - 1

    for i in reversed(range(len_n)):
        while j > 0:
            match_score = matched.get(i, j)
            best_score = best.get(i, j)
            if match_score != SCORE_MIN and (
                match_required or match_score == best_score
            ):
                # None on the first needle row.
                last = matched.get(i - 1, j - 1)
                match_required = (
                    last is not None and best_score == last + SCORE_MATCH_CONSECUTIVE
                )
                positions[i] = j
                j -= 1
                break
            j -= 1

    return positions


def _final_score(best: Matrix) -> float:
    value = best.get(best.rows - 1, best.cols - 1)
    return SCORE_MIN if value is None else value


def score(needle: str, haystack: str) -> float:
    """Score ``haystack`` for the query ``needle``; higher is better."""
    if not needle:
        return SCORE_MIN
    if len(needle) == len(haystack):
        return SCORE_MAX

    best, _ = generate_score_matrices(needle, haystack)
    return _final_score(best)


def score_with_positions(needle: str, haystack: str) -> Score:
    """Like :func:`score`, also returning the matched haystack indices.

    Positions are ``None`` when no match can be placed: an empty needle, or a
    haystack that cannot hold the needle at all.
    """
    len_n = len(needle)
    if len_n == 0:
        return Score(SCORE_MIN)
    if len_n == len(haystack):
        return Score(SCORE_MAX, list(range(len_n)))

    best, matched = generate_score_matrices(needle, haystack)
    value = _final_score(best)
    if value == SCORE_MIN:
        return Score(value)
    return Score(value, derive_match_positions(best, matched))
