"""Base contract enforcement utility."""

from signgrid.contracts.failure import ContractViolation


def require(condition: bool, message: str) -> None:
    """Enforce a stage contract.

    Parameters
    ----------
    condition : bool
        The invariant that must be true.
    message : str
        Explanation of the violation.

    Raises
    ------
    ContractViolation
        If condition is False.

    Examples
    --------
    >>> require(len(grid) == rows, "Grid contract: wrong row count")
    """
    if not condition:
        raise ContractViolation(message)
