"""Centralized failure policy for contract violations.

Contracts fail fast, loud, and once. All violations raise the same
exception type, allowing caller to handle pipeline bugs uniformly.
"""

from enum import Enum


class FailurePolicy(str, Enum):
    """Failure policy for contract violations and file errors.

    FAIL_FAST (only policy): the first bad file or violated invariant
    aborts the whole run and nothing is written.
    """
    FAIL_FAST = "fail_fast"


class ContractViolation(RuntimeError):
    """Raised when a pipeline contract is violated.

    This indicates a bug in pipeline logic, not bad input. It means a
    stage did not produce the invariants it promised.

    Key distinction:
    - FileStructureError / FieldParseError: bad input file
    - ValidationError: config error (handled by Pydantic)
    - ContractViolation: pipeline bug (programmer error)
    """
    pass
