"""Base contract enforcement utilities.

The require() function is the single enforcement mechanism used by the
label map for argument checks and by the consistency contracts.
"""

from labelmap.contracts.failure import ContractViolation


def require(condition: bool, message: str, error: type = ContractViolation) -> None:
    """Enforce a condition, fail-fast.

    Parameters
    ----------
    condition : bool
        The condition that must be true. If False, ``error`` is raised.

    message : str
        Error message explaining the failure (for debugging).

    error : type, optional
        Exception class to raise. Defaults to ContractViolation; label map
        operations pass one of the error kinds from
        ``labelmap.contracts.failure``.

    Raises
    ------
    ContractViolation or ``error``
        If condition is False.

    Examples
    --------
    >>> require(label_object is not None, "Input LabelObject can't be None", NullArgument)
    >>> require(label not in container, "Label map contract violated: background is a key")
    """
    if not condition:
        raise error(message)
