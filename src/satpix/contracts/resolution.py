"""Resolution stage contract."""

from typing import TYPE_CHECKING

from satpix.contracts.base import require
from satpix.contracts.failure import NoDataError

if TYPE_CHECKING:
    from satpix.scene.resolution import ResolutionEstimate


def assert_resolved(estimate: "ResolutionEstimate") -> None:
    """Enforce that a resolution estimate can be used to size pixels.

    Raises
    ------
    NoDataError
        If pixel height or width is no-data (NaN) or not positive.
    """
    require(
        not estimate.is_nodata,
        "Resolution contract violated: pixel size is no-data "
        f"(height={estimate.pixel_height}, width={estimate.pixel_width})",
        NoDataError,
    )
    require(
        estimate.pixel_height > 0 and estimate.pixel_width > 0,
        "Resolution contract violated: pixel size must be positive "
        f"(height={estimate.pixel_height}, width={estimate.pixel_width})",
        NoDataError,
    )
