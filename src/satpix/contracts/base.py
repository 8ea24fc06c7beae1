"""Base contract enforcement utilities.

The require() function is the single enforcement mechanism for all contracts.
"""

from pathlib import Path
from typing import Type

from satpix.contracts.failure import ContractViolation, MissingSourceError


def require(condition: bool, message: str,
            error: Type[Exception] = ContractViolation) -> None:
    """Enforce a pipeline contract.

    This is called at stage boundaries to verify the incoming data satisfies
    the invariants of the stage. It is fail-fast: no recovery, no fallback,
    no silence.

    Parameters
    ----------
    condition : bool
        The invariant that must be true. If False, `error` is raised.

    message : str
        Error message explaining the contract violation.

    error : type, optional
        Exception class to raise. Defaults to ContractViolation; the
        specific subclasses (ShapeMismatchError, OrderingMismatchError,
        NoDataError) are passed by the stage contracts.

    Raises
    ------
    ContractViolation
        If condition is False (or the subclass given in `error`).

    Examples
    --------
    >>> require(value.ndim == 2, "Grid contract: value must be 2-D")
    >>> require(len(files) == len(dates), "Series contract: 3 files, 2 dates",
    ...         OrderingMismatchError)
    """
    if not condition:
        raise error(message)


def require_path(path, kind: str = "file") -> Path:
    """Return `path` as a Path, raising MissingSourceError if absent.

    Parameters
    ----------
    path : str or Path
        Input path.
    kind : {"file", "dir"}
        What the path is expected to be.
    """
    if path is None:
        raise MissingSourceError(f"No {kind} path configured")
    path = Path(path).expanduser()
    if kind == "dir":
        require(path.is_dir(), f"Directory not found: {path}", MissingSourceError)
    else:
        require(path.is_file(), f"File not found: {path}", MissingSourceError)
    return path
