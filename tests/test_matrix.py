import pytest

from fuzzypick.consts import SCORE_MIN
from fuzzypick.matrix import Matrix


def test_matrix_starts_filled_with_minimum() -> None:
    matrix = Matrix(2, 3)

    assert matrix.get(1, 2) == SCORE_MIN
    assert matrix.row(0) == [SCORE_MIN] * 3


def test_matrix_set_and_get() -> None:
    matrix = Matrix(2, 3, fill=0.0)
    matrix.set(1, 2, 4.5)

    assert matrix.get(1, 2) == 4.5
    assert matrix.get(0, 2) == 0.0
    assert matrix.row(1) == [0.0, 0.0, 4.5]


@pytest.mark.parametrize(("row", "col"), [(-1, 0), (0, -1), (2, 0), (0, 3)])
def test_matrix_get_out_of_range_is_absent(row: int, col: int) -> None:
    assert Matrix(2, 3).get(row, col) is None


@pytest.mark.parametrize(("row", "col"), [(-1, 0), (0, -1), (2, 0), (0, 3)])
def test_matrix_set_out_of_range_raises(row: int, col: int) -> None:
    with pytest.raises(IndexError):
        Matrix(2, 3).set(row, col, 1.0)


def test_empty_matrix_has_no_cells() -> None:
    matrix = Matrix(3, 0)

    assert matrix.get(0, 0) is None
    assert matrix.get(2, -1) is None


def test_matrix_rejects_negative_dimensions() -> None:
    with pytest.raises(ValueError):
        Matrix(-1, 2)
