"""Grid stage contracts.

Enforces the guarantee that the three co-registered arrays of a gridded
scene can be flattened together without losing cell correspondence.
"""

import numpy as np
import pandas as pd

from satpix.contracts.base import require
from satpix.contracts.failure import ShapeMismatchError

PIXEL_TABLE_COLUMNS = ("latitude", "longitude", "value", "row", "col")


def assert_co_registered(value, latitude, longitude) -> None:
    """Enforce grid contract before flattening.

    Parameters
    ----------
    value, latitude, longitude : array-like
        numpy arrays or xarray.DataArrays read from the gridded source.

    Raises
    ------
    ShapeMismatchError
        If any input is not 2-D or the three shapes differ.
    """
    shapes = {
        "value": np.shape(value),
        "latitude": np.shape(latitude),
        "longitude": np.shape(longitude),
    }
    for name, shape in shapes.items():
        require(
            len(shape) == 2,
            f"Grid contract violated: '{name}' has {len(shape)} dims, expected 2",
            ShapeMismatchError,
        )
    require(
        shapes["value"] == shapes["latitude"] == shapes["longitude"],
        "Grid contract violated: co-arrays differ in shape "
        + ", ".join(f"{k}={v}" for k, v in shapes.items()),
        ShapeMismatchError,
    )


def assert_pixel_table(df: pd.DataFrame) -> None:
    """Enforce that a table is a flattened PixelRecord table."""
    missing = [c for c in PIXEL_TABLE_COLUMNS if c not in df.columns]
    require(
        not missing,
        f"Pixel table contract violated: missing columns {missing}",
    )
