"""Grid generation and analysis.

- cells: Cell access, absent marker, sign classification
- generator: Random grid generation
- sign_runs: Per-row sign-run replacement count
- minimum: Global minimum location
"""

from signgrid.grid.cells import ABSENT, Sign, sign_of
from signgrid.grid.generator import GridGenerator, InvalidDimension, generate
from signgrid.grid.sign_runs import min_replacements, sign_runs
from signgrid.grid.minimum import GlobalMinResult, Position, find_global_min, min_positive

__all__ = [
    "ABSENT",
    "Sign",
    "sign_of",
    "GridGenerator",
    "InvalidDimension",
    "generate",
    "min_replacements",
    "sign_runs",
    "GlobalMinResult",
    "Position",
    "find_global_min",
    "min_positive",
]
