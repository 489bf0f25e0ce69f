"""Base contract enforcement utilities.

The require() function is the single enforcement mechanism for all contracts.
"""

from grovegrid.contracts.failure import ContractViolation


def require(condition: bool, message: str) -> None:
    """Enforce a pipeline contract.

    Called at stage boundaries to verify the preceding stage produced the
    guaranteed invariants. Fail-fast: no recovery, no fallback.

    Raises
    ------
    ContractViolation
        If condition is False.

    Examples
    --------
    >>> require(len(heat) == x_max * y_max, "Grid contract: dense grid is not rectangular")
    """
    if not condition:
        raise ContractViolation(message)
