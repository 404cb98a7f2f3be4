"""Stage contracts - fail-fast enforcement of analysis invariants.

Key principle:
- Pydantic validates config correctness
- Contracts validate stage output correctness
- Analysis functions tolerate malformed cells
"""

from signgrid.contracts.failure import ContractViolation
from signgrid.contracts.base import require
from signgrid.contracts.grid import assert_generated
from signgrid.contracts.minimum import assert_global_min

__all__ = [
    "ContractViolation",
    "require",
    "assert_generated",
    "assert_global_min",
]
