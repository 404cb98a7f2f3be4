"""Tests for the sign-run replacement count."""

import numpy as np
import pytest

from signgrid.grid.cells import Sign
from signgrid.grid.sign_runs import min_replacements, sign_runs

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("row, expected", [
    ([1, 2, 3], 1),
    ([1, -1, 1, -1], 0),
    ([1, 2, 3, 4, 5, 6], 2),
    ([1, 0, 2, 0, 3], 0),
    ([], 0),
    ([-1, -2], 0),
    ([1, 1, 1, 1], 1),
    ([1, 1, 1, 1, 1], 1),
    ([-1] * 9, 3),
    ([3, 3, 3, -1], 1),
    ([5, -5, 5], 0),
])
def test_min_replacements(row, expected):
    assert min_replacements(row) == expected


def test_independent_runs_are_summed():
    row = [1, 2, 3, -1, -2, -3, -4, 0, 5, 6, 7, 8, 9, 10]
    assert min_replacements(row) == 1 + 1 + 2


def test_neutral_cells_break_runs():
    assert min_replacements([1, 2, None, 3, 4]) == 0
    assert min_replacements([1, 2, float("nan"), 3, 4]) == 0
    assert min_replacements([-1, -2, "x", -3]) == 0


def test_bools_are_neutral():
    assert min_replacements([True, True, True]) == 0


@pytest.mark.parametrize("row", [None, 42, "123", 3.5])
def test_non_sequence_input_yields_zero(row):
    assert min_replacements(row) == 0


def test_tuple_rows_are_accepted():
    assert min_replacements((4, 5, 6)) == 1


def test_sign_runs_reports_maximal_runs():
    runs = list(sign_runs([1, 2, 0, -1, -4, -2, 7]))
    assert runs == [(Sign.POSITIVE, 2), (Sign.NEGATIVE, 3), (Sign.POSITIVE, 1)]


def test_repeated_calls_are_identical():
    row = [1, 2, 3, -4, -5, -6, -7]
    assert min_replacements(row) == min_replacements(row) == 2
    assert row == [1, 2, 3, -4, -5, -6, -7]


def test_numpy_row():
    assert min_replacements(np.array([-1, -2, -3, 4])) == 1
