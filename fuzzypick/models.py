from __future__ import annotations

from dataclasses import dataclass

from fuzzypick.score import Score

RankKey = tuple[float, str]


@dataclass(frozen=True)
class Choice:
    text: str
    score: Score

    @property
    def value(self) -> float:
        return self.score.value

    @property
    def positions(self) -> list[int] | None:
        return self.score.positions

    def rank_key(self) -> RankKey:
        return (-self.score.value, self.text)
