"""Read a gridded netCDF scene into co-registered value/latitude/longitude grids.

This module opens a single-scene netCDF file (for example a MODIS/VIIRS
Level-2 ocean color granule) with xarray and extracts three 2-D arrays of
identical shape: the measurement variable and the latitude/longitude of
every cell. The output is an xarray.Dataset with variables ``value``,
``latitude`` and ``longitude`` on dims ``(row, col)``.

Key capabilities:
- Variables may live in netCDF groups (``geophysical_data``, ``navigation_data``)
- Fill values are masked to NaN on read (xarray CF decoding)
- 1-D lat/lon coordinates (Level-3 mapped files) are broadcast to 2-D
- File handles are released on every exit path
"""

from pathlib import Path
from typing import TYPE_CHECKING, Dict, Optional, Sequence
import logging

import xarray as xr

from satpix.contracts import assert_co_registered, require, require_path

if TYPE_CHECKING:
    from satpix.schemas import InternalConfig

__all__ = ['GridSourceLoader']

logger = logging.getLogger(__name__)


class GridSourceLoader:
    """Load a measurement grid and its coordinates from a netCDF file.

    Configuration
    =============
    Reads ``config.scene``:

    - `path` : default input file
    - `variable`, `latitude`, `longitude` : variable names
    - `variable_group`, `coord_group` : netCDF groups holding them
      (None for the root group)

    Examples
    --------
    >>> loader = GridSourceLoader(config)
    >>> grid = loader.load("AQUA_MODIS.20240712T183001.L2.OC.nc")
    >>> grid["value"].dims
    ('row', 'col')
    """

    def __init__(self, config: "InternalConfig"):
        self.path = config.scene.path
        self.variable = config.scene.variable
        self.latitude = config.scene.latitude
        self.longitude = config.scene.longitude
        self.variable_group = config.scene.variable_group
        self.coord_group = config.scene.coord_group

    @staticmethod
    def _read_variables(path: Path, group: Optional[str],
                        names: Sequence[str]) -> Dict[str, xr.DataArray]:
        """Read `names` from one group of `path` into memory and close the file."""
        with xr.open_dataset(path, group=group) as ds:
            available = set(ds.variables)
            for name in names:
                require(
                    name in available,
                    f"Grid contract violated: variable '{name}' not found in "
                    f"{path.name} (group={group}); available: {sorted(available)}"
                )
            return {name: ds[name].load() for name in names}

    def read(self, path=None) -> Dict[str, xr.DataArray]:
        """Read the raw value, latitude and longitude DataArrays.

        Parameters
        ----------
        path : str or Path, optional
            Input file. Defaults to ``config.scene.path``.

        Returns
        -------
        dict
            Keys ``value``, ``latitude``, ``longitude``.

        Raises
        ------
        MissingSourceError
            If the file does not exist.
        ContractViolation
            If a configured variable is absent.
        """
        path = require_path(path if path is not None else self.path)
        coord_names = [self.latitude, self.longitude]

        if self.variable_group == self.coord_group:
            arrays = self._read_variables(path, self.variable_group,
                                          [self.variable] + coord_names)
        else:
            arrays = self._read_variables(path, self.variable_group, [self.variable])
            arrays.update(self._read_variables(path, self.coord_group, coord_names))

        logger.debug("Read %s, %s, %s from %s",
                     self.variable, self.latitude, self.longitude, path.name)
        return {
            "value": arrays[self.variable],
            "latitude": arrays[self.latitude],
            "longitude": arrays[self.longitude],
        }

    @staticmethod
    def _squeeze_extra(da: xr.DataArray, keep: int = 2) -> xr.DataArray:
        """Drop leading singleton dims (e.g. time) beyond the `keep` grid dims.

        A one-line granule (1 x N) keeps both of its grid dims.
        """
        singletons = [d for d in da.dims if da.sizes[d] == 1]
        extra = singletons[:max(da.ndim - keep, 0)]
        return da.squeeze(dim=extra, drop=True) if extra else da

    @classmethod
    def _to_2d(cls, value: xr.DataArray, latitude: xr.DataArray, longitude: xr.DataArray):
        """Drop extra singleton dims and broadcast 1-D coordinates onto the value grid."""
        value = cls._squeeze_extra(value)
        latitude = cls._squeeze_extra(latitude)
        longitude = cls._squeeze_extra(longitude)

        if latitude.ndim == 1 and longitude.ndim == 1 and value.ndim == 2:
            latitude, longitude = xr.broadcast(latitude, longitude)
            if set(latitude.dims) == set(value.dims):
                latitude = latitude.transpose(*value.dims)
                longitude = longitude.transpose(*value.dims)
        return value, latitude, longitude

    def load(self, path=None) -> xr.Dataset:
        """Read a scene and return it as a co-registered 2-D grid dataset.

        Returns
        -------
        xr.Dataset
            Variables ``value``, ``latitude``, ``longitude`` on dims
            ``(row, col)``. ``attrs`` carries the source variable name,
            its units and the file name.

        Raises
        ------
        MissingSourceError
            If the file does not exist.
        ShapeMismatchError
            If the three grids are not 2-D arrays of the same shape.
        """
        arrays = self.read(path)
        value, latitude, longitude = self._to_2d(
            arrays["value"], arrays["latitude"], arrays["longitude"]
        )
        assert_co_registered(value, latitude, longitude)

        dims = ("row", "col")
        grid = xr.Dataset(
            {
                "value": (dims, value.values.astype(float)),
                "latitude": (dims, latitude.values.astype(float)),
                "longitude": (dims, longitude.values.astype(float)),
            },
            attrs={
                "variable": self.variable,
                "units": str(value.attrs.get("units", "")),
                "source": Path(path if path is not None else self.path).name,
            },
        )
        logger.info("Loaded %s grid %s from %s",
                    self.variable, tuple(grid.sizes.values()), grid.attrs["source"])
        return grid
