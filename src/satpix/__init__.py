"""`satpix` - satellite raster pixels as tables.

Subpackages:
- scene: netCDF scene loading, flattening, pixel-size estimation
- series: raster time series cataloguing, ingestion, aggregation
- visualization: histograms, heat map, time-series plots
- pipeline: scene/series pipelines and orchestrator
- schemas: layered pydantic configuration
- contracts: fail-fast stage checks
"""

__version__ = "0.1.0"
