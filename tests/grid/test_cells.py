"""Tests for cell access and sign classification."""

import numpy as np
import pytest

from signgrid.grid.cells import ABSENT, Sign, cell_at, is_numeric, iter_rows, row_at, sign_of

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("value, expected", [
    (5, Sign.POSITIVE),
    (0.25, Sign.POSITIVE),
    (-3, Sign.NEGATIVE),
    (np.int64(-7), Sign.NEGATIVE),
    (0, Sign.NEUTRAL),
    (-0.0, Sign.NEUTRAL),
    (float("nan"), Sign.NEUTRAL),
    (None, Sign.NEUTRAL),
    ("5", Sign.NEUTRAL),
    (True, Sign.NEUTRAL),
    (ABSENT, Sign.NEUTRAL),
])
def test_sign_of(value, expected):
    assert sign_of(value) is expected


def test_is_numeric_excludes_bool_and_nan():
    assert is_numeric(3)
    assert is_numeric(np.float32(1.5))
    assert not is_numeric(False)
    assert not is_numeric(float("nan"))
    assert not is_numeric("3")


def test_cell_at_past_end_is_absent():
    row = [1, 2]
    assert cell_at(row, 1) == 2
    assert cell_at(row, 2) is ABSENT
    assert cell_at(row, -1) is ABSENT


def test_none_cell_is_absent():
    assert cell_at([None], 0) is ABSENT


def test_absent_is_distinct_from_zero():
    assert ABSENT != 0
    assert not ABSENT
    assert repr(ABSENT) == "ABSENT"


def test_non_sequence_rows_read_as_empty():
    grid = [[1], 42, "abc", None]
    assert [row for _, row in iter_rows(grid)] == [[1], (), (), ()]
    assert row_at(grid, 10) == ()


def test_iter_rows_on_non_grid():
    assert list(iter_rows(None)) == []
    assert list(iter_rows("text")) == []
