"""Single-scene gridded data (Pipeline A).

- loader: Read value/latitude/longitude grids from netCDF
- flattener: Column-major flattening into a pixel table
- resolution: Pixel size from neighbouring coordinate differences
"""

from satpix.scene.loader import GridSourceLoader
from satpix.scene.flattener import GridFlattener, flatten_grid
from satpix.scene.resolution import ResolutionEstimate, ResolutionEstimator, estimate_resolution

__all__ = [
    "GridSourceLoader",
    "GridFlattener",
    "flatten_grid",
    "ResolutionEstimate",
    "ResolutionEstimator",
    "estimate_resolution",
]
