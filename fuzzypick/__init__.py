from __future__ import annotations

import importlib.metadata

from fuzzypick.models import Choice
from fuzzypick.score import Score, score, score_with_positions
from fuzzypick.search import has_match, rank_choices

try:
    __version__ = importlib.metadata.version(__name__)
except importlib.metadata.PackageNotFoundError:
    __version__ = "unknown"

__all__ = [
    "Choice",
    "Score",
    "__version__",
    "has_match",
    "rank_choices",
    "score",
    "score_with_positions",
]
