"""Sign-run analysis of a single row.

A run is a maximal stretch of consecutive cells with the same
non-neutral sign. Neutral cells (zero, NaN, missing, non-numeric) end
the current run and never start one. Every full group of three cells in
a run needs one replacement to break it, so a run of length L costs
``L // 3`` and the row total is the sum over its runs.
"""

import logging
from itertools import groupby

from signgrid.grid.cells import Sign, cell_at, is_row, sign_of

__all__ = ['sign_runs', 'min_replacements']

logger = logging.getLogger(__name__)

RUN_BREAK_LENGTH = 3


def sign_runs(row):
    """Yield ``(sign, length)`` for each maximal run in ``row``.

    Non-sequence input yields nothing.

    Examples
    --------
    >>> list(sign_runs([1, 2, 0, -1, -4, -2]))
    [(<Sign.POSITIVE: 1>, 2), (<Sign.NEGATIVE: -1>, 3)]
    """
    if not is_row(row):
        return
    signs = (sign_of(cell_at(row, i)) for i in range(len(row)))
    for sign, group in groupby(signs):
        if sign is Sign.NEUTRAL:
            continue
        yield sign, sum(1 for _ in group)


def min_replacements(row) -> int:
    """Minimum number of replacements so no run of 3+ same-signed cells remains.

    Parameters
    ----------
    row : sequence
        Cells of one grid row. Anything else counts as an empty row.

    Returns
    -------
    int
        Sum of ``L // 3`` over all maximal runs of length ``L >= 3``.

    Examples
    --------
    >>> min_replacements([1, 2, 3])
    1
    >>> min_replacements([1, 2, 3, 4, 5, 6])
    2
    >>> min_replacements([1, 0, 2, 0, 3])
    0
    """
    total = 0
    for _, length in sign_runs(row):
        if length >= RUN_BREAK_LENGTH:
            total += length // RUN_BREAK_LENGTH
    return total
