"""Flatten co-registered 2-D grids into a row-per-pixel table.

Flattening is column-major (walk down each column before moving to the
next one) and is applied identically to the value, latitude and longitude
grids, so output row ``c * nrows + r`` always holds grid cell ``(r, c)``.
The pixel indices are kept as ``row``/``col`` columns.
"""

import logging

import numpy as np
import pandas as pd
import xarray as xr

from satpix.contracts import assert_co_registered

__all__ = ['GridFlattener', 'flatten_grid']

logger = logging.getLogger(__name__)


def _as_float_array(a) -> np.ndarray:
    """Return a float ndarray with masked cells as NaN."""
    if np.ma.isMaskedArray(a):
        return a.astype(float).filled(np.nan)
    return np.asarray(a, dtype=float)


def flatten_grid(value, latitude, longitude) -> pd.DataFrame:
    """Flatten three co-registered grids into one PixelRecord table.

    Parameters
    ----------
    value, latitude, longitude : array-like
        2-D numpy arrays, masked arrays or xarray.DataArrays of identical
        shape. Inputs are not modified.

    Returns
    -------
    pd.DataFrame
        Columns ``latitude``, ``longitude``, ``value``, ``row``, ``col``;
        one row per grid cell in column-major order.

    Raises
    ------
    ShapeMismatchError
        If an input is not 2-D or the shapes differ.
    """
    assert_co_registered(value, latitude, longitude)

    shape = np.shape(value)
    rows, cols = np.indices(shape)

    return pd.DataFrame({
        "latitude": np.ravel(_as_float_array(latitude), order="F"),
        "longitude": np.ravel(_as_float_array(longitude), order="F"),
        "value": np.ravel(_as_float_array(value), order="F"),
        "row": np.ravel(rows, order="F"),
        "col": np.ravel(cols, order="F"),
    })


class GridFlattener:
    """Turn a grid dataset from GridSourceLoader into a pixel table."""

    def flatten(self, grid: xr.Dataset) -> pd.DataFrame:
        df = flatten_grid(grid["value"], grid["latitude"], grid["longitude"])
        df.attrs["variable"] = grid.attrs.get("variable", "value")
        df.attrs["units"] = grid.attrs.get("units", "")

        n_valid = int(df["value"].notna().sum())
        logger.info("Flattened %d pixels (%d with data)", len(df), n_valid)
        return df
