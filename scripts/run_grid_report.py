#!/usr/bin/env python3
"""Signgrid report runner.

Usage:
    python scripts/run_grid_report.py
    python scripts/run_grid_report.py --config scripts/user_config.py
    python scripts/run_grid_report.py --rows 5 --cols 8 --seed 42 --no-color

Same as the installed ``signgrid`` command.
"""

import sys
from pathlib import Path

# Add src to path
project_root = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(project_root / "src"))

from signgrid.cli.run_report import main


if __name__ == "__main__":
    main()
