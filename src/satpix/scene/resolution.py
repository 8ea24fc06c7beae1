"""Estimate pixel height and width from a flattened pixel table.

Pixel height is the mean absolute first difference of latitude between
each row of the table and its predecessor. Because the table is column-major,
that predecessor is the cell directly above. Pixel width is the same
statistic for longitude taken along each grid row. Pairs that straddle a
column (or row) boundary are not neighbours and are excluded, as is the
first element of each sequence, which has no predecessor. An input with no
neighbouring pairs yields NaN (no-data), not an error.
"""

import logging
import math
from typing import NamedTuple

import pandas as pd

from satpix.contracts import assert_pixel_table

__all__ = ['ResolutionEstimate', 'ResolutionEstimator', 'estimate_resolution']

logger = logging.getLogger(__name__)


class ResolutionEstimate(NamedTuple):
    """Pixel height (degrees latitude) and width (degrees longitude)."""
    pixel_height: float
    pixel_width: float

    @property
    def is_nodata(self) -> bool:
        return math.isnan(self.pixel_height) or math.isnan(self.pixel_width)


def estimate_resolution(table: pd.DataFrame) -> ResolutionEstimate:
    """Compute the mean neighbour spacing of a PixelRecord table.

    Parameters
    ----------
    table : pd.DataFrame
        Output of flatten_grid(), in its original column-major order.

    Returns
    -------
    ResolutionEstimate
        NaN components when no neighbouring pairs exist (e.g. one row).
    """
    assert_pixel_table(table)

    # Column-major order: predecessor is the cell above in the same column
    above = (table["col"].diff() == 0) & (table["row"].diff() == 1)
    dlat = table["latitude"].diff().where(above).abs()

    by_row = table.sort_values(["row", "col"], kind="stable")
    left = (by_row["row"].diff() == 0) & (by_row["col"].diff() == 1)
    dlon = by_row["longitude"].diff().where(left).abs()

    return ResolutionEstimate(float(dlat.mean()), float(dlon.mean()))


class ResolutionEstimator:
    """Stage wrapper around estimate_resolution() with logging."""

    def estimate(self, table: pd.DataFrame) -> ResolutionEstimate:
        estimate = estimate_resolution(table)
        if estimate.is_nodata:
            logger.warning("Resolution is no-data for a table of %d rows", len(table))
        else:
            logger.info("Pixel size: %.5f° lat x %.5f° lon",
                        estimate.pixel_height, estimate.pixel_width)
        return estimate
