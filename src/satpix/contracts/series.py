"""Series stage contracts.

Enforces that every raster file is paired with exactly one acquisition
date, and that each raster is a single band grid.
"""

from pathlib import Path
from typing import Sequence

import pandas as pd
import xarray as xr

from satpix.contracts.base import require
from satpix.contracts.failure import ContractViolation, OrderingMismatchError


def assert_dates_match_files(paths: Sequence, dates: Sequence) -> None:
    """Enforce one date per raster file.

    Raises
    ------
    OrderingMismatchError
        If the lengths differ, a date is missing or a file name appears twice.
    """
    require(
        len(paths) == len(dates),
        f"Series contract violated: {len(paths)} raster files but "
        f"{len(dates)} acquisition dates",
        OrderingMismatchError,
    )
    missing = [i for i, d in enumerate(dates) if pd.isna(d)]
    require(
        not missing,
        f"Series contract violated: no acquisition date for positions {missing}",
        OrderingMismatchError,
    )
    names = [Path(p).name for p in paths]
    require(
        len(set(names)) == len(names),
        "Series contract violated: duplicate raster file names",
        OrderingMismatchError,
    )


def assert_single_band(da: xr.DataArray, source) -> None:
    """Enforce that a raster read from `source` holds exactly one band."""
    nbands = da.sizes.get("band", 1)
    require(
        nbands == 1,
        f"Raster contract violated: {Path(source).name} has {nbands} bands, expected 1",
        ContractViolation,
    )
    require(
        "x" in da.dims and "y" in da.dims,
        f"Raster contract violated: {Path(source).name} lacks x/y dimensions",
    )
