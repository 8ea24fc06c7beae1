"""Assemble per-date raster tables into one long table."""

import logging
from pathlib import Path
from typing import Callable, Sequence

import pandas as pd

from satpix.contracts import assert_dates_match_files
from satpix.series.loader import RASTER_COLUMNS, read_raster_table

__all__ = ['RasterSeriesIngestor']

logger = logging.getLogger(__name__)

SERIES_COLUMNS = RASTER_COLUMNS + ["date"]


class RasterSeriesIngestor:
    """Read every raster of a series and stack them with their dates.

    Parameters
    ----------
    reader : callable, optional
        ``reader(path) -> DataFrame[x, y, value]``. Defaults to
        read_raster_table().

    Examples
    --------
    >>> ingestor = RasterSeriesIngestor()
    >>> table = ingestor.ingest(catalog["path"], catalog["date"])
    >>> table.columns.tolist()
    ['x', 'y', 'value', 'date']
    """

    def __init__(self, reader: Callable[..., pd.DataFrame] = read_raster_table):
        self.reader = reader

    def ingest(self, raster_paths: Sequence, dates: Sequence) -> pd.DataFrame:
        """Read `raster_paths[i]`, tag it with `dates[i]` and concatenate.

        Concatenation follows the order of `raster_paths`.

        Raises
        ------
        OrderingMismatchError
            If the two sequences differ in length.
        """
        raster_paths = list(raster_paths)
        dates = list(dates)
        assert_dates_match_files(raster_paths, dates)

        tables = []
        for path, date in zip(raster_paths, dates):
            table = self.reader(path)[RASTER_COLUMNS].copy()
            table["date"] = pd.Timestamp(date)
            tables.append(table)
            logger.debug("Ingested %s (%s): %d pixels",
                         Path(path).name, pd.Timestamp(date).date(), len(table))

        if not tables:
            return pd.DataFrame(columns=SERIES_COLUMNS)

        combined = pd.concat(tables, ignore_index=True)
        logger.info("Ingested %d rasters, %d pixels", len(tables), len(combined))
        return combined

    def ingest_catalog(self, catalog: pd.DataFrame) -> pd.DataFrame:
        """Ingest the ``path``/``date`` rows of an AcquisitionCatalog."""
        return self.ingest(catalog["path"], catalog["date"])
