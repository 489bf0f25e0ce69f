"""Pipeline contracts: fail-fast enforcement of stage invariants.

Contracts fail immediately and loudly when pipeline stages don't produce
their promised invariants.

Key principle:
- Pydantic validates config correctness
- Contracts validate pipeline correctness
- Parsers handle malformed cells by degrading
"""

from grovegrid.contracts.failure import ContractViolation, FailurePolicy
from grovegrid.contracts.base import require
from grovegrid.contracts.slice import assert_slice
from grovegrid.contracts.corpus import assert_corpus
from grovegrid.contracts.grid import assert_grid, assert_gridded

__all__ = [
    "ContractViolation",
    "FailurePolicy",
    "require",
    "assert_slice",
    "assert_corpus",
    "assert_grid",
    "assert_gridded",
]
