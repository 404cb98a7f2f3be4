"""Failure type for contract violations.

All violations raise the same exception type so callers can handle
analysis bugs uniformly.
"""


class ContractViolation(RuntimeError):
    """Raised when a stage does not deliver the invariants it promised.

    This indicates a bug in the analysis code, not bad user input.

    Key distinction:
    - ValueError (InvalidDimension, ValidationError): bad input or config
    - ContractViolation: stage bug (programmer error)
    """
    pass
