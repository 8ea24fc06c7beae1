"""Multi-date raster time series (Pipeline B).

- catalog: Keyed pairing of raster files and acquisition dates
- loader: Single-band raster to (x, y, value) table
- ingestor: Per-date tables stacked into one long table
- aggregator: Mean value per date
"""

from satpix.series.catalog import AcquisitionCatalog, build_catalog
from satpix.series.loader import read_raster_table
from satpix.series.ingestor import RasterSeriesIngestor
from satpix.series.aggregator import DateAggregator, aggregate_by_date

__all__ = [
    "AcquisitionCatalog",
    "build_catalog",
    "read_raster_table",
    "RasterSeriesIngestor",
    "DateAggregator",
    "aggregate_by_date",
]
