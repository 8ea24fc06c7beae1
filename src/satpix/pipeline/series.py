"""Pipeline B: per-date rasters to a long table, daily means and a time-series plot."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Dict

from satpix.series import AcquisitionCatalog, DateAggregator, RasterSeriesIngestor
from satpix.visualization import TimeSeriesRenderer

if TYPE_CHECKING:
    from satpix.schemas import InternalConfig

__all__ = ['SeriesPipeline']

logger = logging.getLogger(__name__)


class SeriesPipeline:
    """Catalog → ingest → aggregate → render."""

    def __init__(self, config: "InternalConfig", output_dirs: Dict[str, Path]):
        self.plots_dir = Path(output_dirs["plots"])
        self.visualize = config.visualization.enabled
        self.catalog = AcquisitionCatalog(config)
        self.ingestor = RasterSeriesIngestor()
        self.aggregator = DateAggregator()
        self.renderer = TimeSeriesRenderer(config)

    def run(self) -> dict:
        """Execute the series pipeline.

        Returns
        -------
        dict
            ``catalog``, ``table`` (long PixelGrid DataFrame), ``series``
            (per-date means) and ``plots``.
        """
        catalog = self.catalog.build()
        table = self.ingestor.ingest_catalog(catalog)
        series = self.aggregator.aggregate(table)

        plots = []
        if self.visualize:
            plots.append(self.renderer.plot_series(
                series, self.plots_dir / "series_timeseries",
                ylabel="Mean pixel value",
            ))

        return {"catalog": catalog, "table": table, "series": series, "plots": plots}
