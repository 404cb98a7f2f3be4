"""Generator stage contract.

After generation the grid must have the configured shape and every cell
must lie inside the normalized bounds.
"""

from signgrid.contracts.base import require


def assert_generated(grid, rows: int, cols: int, min_value: int, max_value: int) -> None:
    """Enforce the generated-grid contract.

    Parameters
    ----------
    grid : list of list of int
        Output of the grid generator.
    rows, cols : int
        Requested dimensions.
    min_value, max_value : int
        Requested bounds, in either order.

    Raises
    ------
    ContractViolation
        If any invariant is violated
    """
    low, high = min(min_value, max_value), max(min_value, max_value)

    require(
        len(grid) == rows,
        f"Grid contract violated: {len(grid)} rows, expected {rows}"
    )
    for row_index, row in enumerate(grid):
        require(
            len(row) == cols,
            f"Grid contract violated: row {row_index} has {len(row)} cells, expected {cols}"
        )
        for col_index, value in enumerate(row):
            require(
                isinstance(value, int) and low <= value <= high,
                f"Grid contract violated: cell ({row_index},{col_index})={value!r} "
                f"outside [{low}, {high}]"
            )
