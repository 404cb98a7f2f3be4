"""Cell access and classification shared by the analysis modules.

Grids are plain nested sequences and may be ragged or hold arbitrary
objects. These helpers give every consumer the same view of them:

- ``row_at`` / ``cell_at`` return ``ABSENT`` instead of raising for
  positions outside a ragged row, and for ``None`` cells.
- ``is_numeric`` decides candidacy for the minimum scan.
- ``sign_of`` folds zero, NaN, non-numeric and absent cells into
  ``Sign.NEUTRAL``.
"""

import math
import numbers
from collections.abc import Sequence
from enum import Enum

import numpy as np

__all__ = ['ABSENT', 'Sign', 'is_row', 'row_at', 'cell_at', 'iter_rows', 'is_numeric', 'sign_of']


class _Absent:
    """Marker for a cell that does not exist in the grid."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "ABSENT"

    def __bool__(self):
        return False


ABSENT = _Absent()


class Sign(int, Enum):
    """Sign class of a cell."""
    NEGATIVE = -1
    NEUTRAL = 0
    POSITIVE = 1


def is_row(obj) -> bool:
    """True for sequences other than str and bytes, and non-scalar arrays."""
    if isinstance(obj, np.ndarray):
        return obj.ndim > 0
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes))


def row_at(grid, row_index: int):
    """Return row ``row_index`` of ``grid``, or an empty tuple.

    Rows that are not sequences (or are strings) read as empty.
    """
    if not is_row(grid) or not 0 <= row_index < len(grid):
        return ()
    row = grid[row_index]
    return row if is_row(row) else ()


def iter_rows(grid):
    """Yield ``(row_index, row)`` for every row of ``grid``."""
    if not is_row(grid):
        return
    for row_index in range(len(grid)):
        yield row_index, row_at(grid, row_index)


def cell_at(row, col_index: int):
    """Return the cell at ``col_index`` in ``row``, or ``ABSENT``."""
    if not 0 <= col_index < len(row):
        return ABSENT
    value = row[col_index]
    return ABSENT if value is None else value


def is_numeric(value) -> bool:
    """True for real numbers that can take part in comparisons.

    ``bool`` and NaN are excluded.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return not math.isnan(value)


def sign_of(value) -> Sign:
    """Classify ``value`` as positive, negative or neutral."""
    if not is_numeric(value):
        return Sign.NEUTRAL
    if value > 0:
        return Sign.POSITIVE
    if value < 0:
        return Sign.NEGATIVE
    return Sign.NEUTRAL
