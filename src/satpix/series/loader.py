"""Read a single-band raster into an (x, y, value) pixel table."""

import logging
from pathlib import Path

import pandas as pd
import rioxarray

from satpix.contracts import assert_single_band, require_path

__all__ = ['read_raster_table']

logger = logging.getLogger(__name__)

RASTER_COLUMNS = ["x", "y", "value"]


def read_raster_table(path) -> pd.DataFrame:
    """Read a single-band raster file into a long table.

    The no-data sentinel is masked to NaN. The file is read completely
    and closed before returning.

    Parameters
    ----------
    path : str or Path
        GeoTIFF (or any GDAL-readable single-band raster).

    Returns
    -------
    pd.DataFrame
        Columns ``x``, ``y``, ``value``; one row per pixel.

    Raises
    ------
    MissingSourceError
        If the file does not exist.
    ContractViolation
        If the raster has more than one band.
    """
    path = require_path(path)
    with rioxarray.open_rasterio(path, masked=True) as da:
        assert_single_band(da, path)
        if "band" in da.dims:
            da = da.squeeze("band", drop=True)
        df = da.load().to_dataframe(name="value").reset_index()

    logger.debug("Read %d pixels from %s", len(df), Path(path).name)
    return df[RASTER_COLUMNS]
