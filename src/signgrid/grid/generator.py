"""Random integer grid generation.

Cells are drawn independently and uniformly from an inclusive integer
range with a numpy ``Generator``. Bounds outside int64 are drawn with a
``random.Random`` seeded from that generator, so any integer range works
and seeding stays reproducible. Results are plain Python lists of ``int``
so downstream code never has to care about numpy scalar types.
"""

import logging
import numbers
import random
from typing import TYPE_CHECKING, Optional

import numpy as np

from signgrid.contracts.grid import assert_generated
from signgrid.schemas.param import (
    DEFAULT_COLS,
    DEFAULT_MAX_VALUE,
    DEFAULT_MIN_VALUE,
    DEFAULT_ROWS,
)

if TYPE_CHECKING:
    from signgrid.schemas import InternalConfig

__all__ = ['InvalidDimension', 'generate', 'GridGenerator']

logger = logging.getLogger(__name__)

INT64 = np.iinfo(np.int64)


class InvalidDimension(ValueError):
    """Raised when a grid dimension is not a positive integer."""
    pass


def _check_dimension(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise InvalidDimension(f"{name} must be a positive integer, got {value!r}")


def generate(
    rows: int = DEFAULT_ROWS,
    cols: int = DEFAULT_COLS,
    min_value: int = DEFAULT_MIN_VALUE,
    max_value: int = DEFAULT_MAX_VALUE,
    rng: Optional[np.random.Generator] = None,
) -> list:
    """Generate a ``rows`` x ``cols`` grid of random integers.

    Parameters
    ----------
    rows, cols : int
        Grid dimensions. Must be positive integers.
    min_value, max_value : int
        Inclusive bounds of any size. Swapped silently if given in reverse order.
    rng : numpy.random.Generator, optional
        Random source. A fresh ``default_rng()`` when omitted, so
        successive calls are not reproducible.

    Returns
    -------
    list of list of int
        Exactly ``rows`` rows of exactly ``cols`` cells.

    Raises
    ------
    InvalidDimension
        If ``rows`` or ``cols`` is not a positive integer.

    Examples
    --------
    >>> grid = generate(2, 3, 5, -5, rng=np.random.default_rng(0))
    >>> len(grid), len(grid[0])
    (2, 3)
    """
    _check_dimension("rows", rows)
    _check_dimension("cols", cols)

    if min_value > max_value:
        min_value, max_value = max_value, min_value

    if rng is None:
        rng = np.random.default_rng()

    rows, cols = int(rows), int(cols)
    min_value, max_value = int(min_value), int(max_value)

    if INT64.min <= min_value and max_value <= INT64.max:
        values = rng.integers(min_value, max_value, size=(rows, cols), endpoint=True)
        return values.tolist()

    logger.debug("Bounds [%d, %d] exceed int64, drawing with random.Random", min_value, max_value)
    wide = random.Random(int(rng.integers(INT64.max)))
    return [[wide.randint(min_value, max_value) for _ in range(cols)] for _ in range(rows)]


class GridGenerator:
    """Config-driven grid generator.

    Reads ``InternalConfig.generator`` and checks the generated-grid
    contract on every call.
    """

    def __init__(self, config: "InternalConfig"):
        """Store generator settings.

        Parameters
        ----------
        config : InternalConfig
            Fully validated runtime configuration.
        """
        gen_cfg = config.generator
        self.rows = gen_cfg.rows
        self.cols = gen_cfg.cols
        self.min_value = gen_cfg.min_value
        self.max_value = gen_cfg.max_value
        self.seed = gen_cfg.seed
        self.rng = np.random.default_rng(self.seed)

        logger.info("GridGenerator initialized: shape=%dx%d, range=[%d, %d], seed=%s",
                    self.rows, self.cols, self.min_value, self.max_value, self.seed)

    def generate(self) -> list:
        """Generate one grid with the configured settings."""
        grid = generate(self.rows, self.cols, self.min_value, self.max_value, rng=self.rng)
        assert_generated(grid, self.rows, self.cols, self.min_value, self.max_value)
        logger.debug("Generated grid: %d rows x %d cols", len(grid), self.cols)
        return grid
