from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from fuzzypick.search import has_match
from fuzzypick.score import score

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkResult:
    query: str
    iterations: int
    candidate_count: int
    match_count: int
    total_seconds: float

    @property
    def seconds_per_iteration(self) -> float:
        return self.total_seconds / self.iterations

    @property
    def seconds_per_match(self) -> float:
        if not self.match_count:
            return 0.0
        return self.seconds_per_iteration / self.match_count


def run_benchmark(
    query: str,
    candidates: Sequence[str],
    *,
    iterations: int,
    clock: Callable[[], float] = time.perf_counter,
) -> BenchmarkResult:
    """Time scoring ``query`` against every matching candidate.

    Candidates failing :func:`has_match` are counted but never scored.
    """
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")

    matching = [candidate for candidate in candidates if has_match(query, candidate)]
    logger.debug(
        "Benchmarking %r over %d of %d candidates, %d iterations",
        query,
        len(matching),
        len(candidates),
        iterations,
    )

    started = clock()
    for _ in range(iterations):
        for candidate in matching:
            score(query, candidate)
    elapsed = clock() - started

    return BenchmarkResult(
        query=query,
        iterations=iterations,
        candidate_count=len(candidates),
        match_count=len(matching),
        total_seconds=elapsed,
    )
