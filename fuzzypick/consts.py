from __future__ import annotations

SCORE_MIN = float("-inf")
SCORE_MAX = float("inf")

# Gap penalties, per skipped haystack character.
SCORE_GAP_LEADING = -0.005
SCORE_GAP_TRAILING = -0.005
SCORE_GAP_INNER = -0.01

SCORE_MATCH_CONSECUTIVE = 1.0

# Boundary bonuses, keyed on the character preceding a match.
SCORE_MATCH_SLASH = 0.9
SCORE_MATCH_WORD = 0.8
SCORE_MATCH_CAPITAL = 0.7
SCORE_MATCH_DOT = 0.6
