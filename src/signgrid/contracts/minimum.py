"""Minimum locator contract.

Every reported position must hold exactly the reported minimum, and the
row set must be derived from those positions.
"""

from signgrid.contracts.base import require
from signgrid.grid.cells import cell_at, row_at


def assert_global_min(grid, result) -> None:
    """Enforce the minimum locator contract.

    Parameters
    ----------
    grid : sequence of rows
        Grid the result was computed from.
    result : GlobalMinResult
        Output of find_global_min().

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    if result.value is None:
        require(
            not result.positions and not result.rows_with_min,
            "Minimum contract violated: positions reported without a minimum value"
        )
        return

    require(
        len(result.positions) > 0,
        "Minimum contract violated: minimum value without any position"
    )
    for pos in result.positions:
        require(
            cell_at(row_at(grid, pos.row), pos.col) == result.value,
            f"Minimum contract violated: ({pos.row},{pos.col}) does not hold {result.value}"
        )
    require(
        result.rows_with_min == frozenset(pos.row for pos in result.positions),
        "Minimum contract violated: row set does not match positions"
    )
