"""`Signgrid` - sign-run and global-minimum analysis of integer grids.

Subpackages:
- grid: Generation, sign-run analysis, minimum location
- report: Terminal table rendering
- schemas: Pydantic configuration
- contracts: Stage invariants
- cli: Command-line entry point
"""

__version__ = "0.1.0"
