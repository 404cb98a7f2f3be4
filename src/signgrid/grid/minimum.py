"""Global minimum location.

Scans a grid once in row-major order. Ties keep every occurrence in
discovery order, which is the order the report prints them in.
"""

import logging
from typing import Optional, Union

import numpy as np
from pydantic import BaseModel, ConfigDict

from signgrid.grid.cells import cell_at, is_numeric, is_row, iter_rows

__all__ = ['Position', 'GlobalMinResult', 'find_global_min', 'min_positive']

logger = logging.getLogger(__name__)


class Position(BaseModel):
    """0-based (row, col) coordinate of one cell."""
    model_config = ConfigDict(frozen=True)

    row: int
    col: int

    def __str__(self):
        return f"(r{self.row},c{self.col})"


class GlobalMinResult(BaseModel):
    """Minimum value of a grid and everywhere it occurs.

    Attributes
    ----------
    value : int, float or None
        Smallest numeric cell, None when the grid has no numeric cell.
    positions : tuple of Position
        Every position holding ``value``, in row-major order.
    rows_with_min : frozenset of int
        Row indices that appear in ``positions``.
    """
    model_config = ConfigDict(frozen=True)

    value: Optional[Union[int, float]] = None
    positions: tuple[Position, ...] = ()
    rows_with_min: frozenset[int] = frozenset()

    @property
    def found(self) -> bool:
        return self.value is not None


def _plain(value):
    # numpy scalars -> builtin int/float
    return value.item() if isinstance(value, np.generic) else value


def find_global_min(grid) -> GlobalMinResult:
    """Find the minimum numeric value of ``grid`` and all its positions.

    Parameters
    ----------
    grid : sequence of rows
        Possibly ragged; non-numeric, NaN and missing cells are skipped.

    Returns
    -------
    GlobalMinResult

    Examples
    --------
    >>> result = find_global_min([[5, 1], [1, 3]])
    >>> result.value, [str(p) for p in result.positions]
    (1, ['(r0,c1)', '(r1,c0)'])
    """
    min_value = None
    positions = []

    for row_index, row in iter_rows(grid):
        for col_index in range(len(row)):
            value = cell_at(row, col_index)
            if not is_numeric(value):
                continue
            if min_value is None or value < min_value:
                min_value = value
                positions = [Position(row=row_index, col=col_index)]
            elif value == min_value:
                positions.append(Position(row=row_index, col=col_index))

    if min_value is None:
        logger.debug("No numeric cells found")
        return GlobalMinResult()

    logger.debug("Global minimum %s at %d position(s)", min_value, len(positions))
    return GlobalMinResult(
        value=_plain(min_value),
        positions=tuple(positions),
        rows_with_min=frozenset(pos.row for pos in positions),
    )


def min_positive(row):
    """Smallest strictly positive numeric cell of ``row``, or None."""
    if not is_row(row):
        return None
    values = (cell_at(row, i) for i in range(len(row)))
    positives = [v for v in values if is_numeric(v) and v > 0]
    return _plain(min(positives)) if positives else None
