"""Centralized failure types for contract violations.

Contracts fail fast, loud, and once. Every stage-boundary violation raises
a subclass of ContractViolation so callers can handle pipeline failures
uniformly, while still being able to tell the failure kinds apart.
"""


class ContractViolation(RuntimeError):
    """Raised when a pipeline contract is violated.

    It means a pipeline stage received or produced data that breaks the
    invariants the next stage depends on.

    Key distinction:
    - ValueError: User/config error (handled by Pydantic)
    - MissingSourceError: Input path does not exist
    - ContractViolation: Data does not satisfy a stage invariant
    """
    pass


class ShapeMismatchError(ContractViolation):
    """Co-registered arrays (value, latitude, longitude) differ in shape."""
    pass


class OrderingMismatchError(ContractViolation):
    """Raster file listing and acquisition date list cannot be paired.

    Raised for length mismatches, files without a date, dates without a
    file, and duplicate keys on either side.
    """
    pass


class NoDataError(ContractViolation):
    """A no-data result was handed to a stage that cannot consume it.

    Estimators and aggregators return NaN for empty inputs; this error is
    only raised by consumers such as the heat map renderer, which cannot
    draw pixels of undefined size.
    """
    pass


class MissingSourceError(FileNotFoundError):
    """Input file or directory was not found."""
    pass
