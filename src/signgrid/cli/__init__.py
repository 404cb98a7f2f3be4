"""Command-line interface for the grid report.

This package contains the execution logic; scripts/ holds thin wrappers.
"""

from signgrid.cli.run_report import run_grid_report, main

__all__ = ['run_grid_report', 'main']
