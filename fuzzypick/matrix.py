from __future__ import annotations

from fuzzypick.consts import SCORE_MIN


class Matrix:
    """Fixed-size grid of floats indexed by (needle position, haystack position)."""

    __slots__ = ("cols", "rows", "_cells")

    def __init__(self, rows: int, cols: int, *, fill: float = SCORE_MIN) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"matrix dimensions must be non-negative: {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self._cells = [fill] * (rows * cols)

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols})"

    def _contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def get(self, row: int, col: int) -> float | None:
        if not self._contains(row, col):
            return None
        return self._cells[row * self.cols + col]

    def set(self, row: int, col: int, value: float) -> None:
        if not self._contains(row, col):
            raise IndexError(
                f"cell ({row}, {col}) outside {self.rows}x{self.cols} matrix"
            )
        self._cells[row * self.cols + col] = value

    def row(self, row: int) -> list[float]:
        if not 0 <= row < self.rows:
            raise IndexError(f"row {row} outside {self.rows}x{self.cols} matrix")
        start = row * self.cols
        return self._cells[start : start + self.cols]
