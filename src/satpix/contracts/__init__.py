"""Pipeline contracts: fail-fast enforcement of stage invariants.

Contracts fail immediately and loudly when data reaching a stage does not
satisfy the invariants that stage depends on.

Key principle:
- Pydantic validates config correctness
- Contracts validate pipeline correctness
- Estimators and aggregators return NaN for empty inputs
"""

from satpix.contracts.failure import (
    ContractViolation,
    ShapeMismatchError,
    OrderingMismatchError,
    NoDataError,
    MissingSourceError,
)
from satpix.contracts.base import require, require_path
from satpix.contracts.grid import assert_co_registered, assert_pixel_table
from satpix.contracts.resolution import assert_resolved
from satpix.contracts.series import assert_dates_match_files, assert_single_band

__all__ = [
    "ContractViolation",
    "ShapeMismatchError",
    "OrderingMismatchError",
    "NoDataError",
    "MissingSourceError",
    "require",
    "require_path",
    "assert_co_registered",
    "assert_pixel_table",
    "assert_resolved",
    "assert_dates_match_files",
    "assert_single_band",
]
