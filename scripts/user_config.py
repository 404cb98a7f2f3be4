"""Signgrid User Configuration.

Modify settings here to customize the report. Anything left out keeps
its default from signgrid.schemas.param.

Usage:
    python scripts/run_grid_report.py --config scripts/user_config.py
    python scripts/run_grid_report.py --config scripts/user_config.py --rows 4
"""

CONFIG = {
    # ========================================================================
    # GRID SETTINGS
    # ========================================================================
    "ROWS": 10,               # Number of rows
    "COLS": 10,               # Cells per row
    "MIN_VALUE": -100,        # Inclusive lower bound
    "MAX_VALUE": 100,         # Inclusive upper bound (swapped if below MIN_VALUE)
    "SEED": None,             # Integer for a reproducible grid

    # ========================================================================
    # REPORT SETTINGS
    # ========================================================================
    "USE_COLORS": None,       # None = only when stdout is a terminal
    "LOG_LEVEL": "WARNING",
}
