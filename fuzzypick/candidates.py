from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path


def read_candidates(lines: Iterable[str]) -> list[str]:
    candidates: list[str] = []
    for line in lines:
        candidate = line.rstrip("\r\n")
        if candidate.strip():
            candidates.append(candidate)
    return candidates


def read_candidates_from_path(path: Path) -> list[str]:
    with path.open(encoding="utf-8", errors="replace") as handle:
        return read_candidates(handle)
