"""Pipeline A: single netCDF scene to pixel table, histogram and heat map."""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Dict

from satpix.scene import GridFlattener, GridSourceLoader, ResolutionEstimator
from satpix.visualization import HeatMapRenderer

if TYPE_CHECKING:
    from satpix.schemas import InternalConfig

__all__ = ['ScenePipeline']

logger = logging.getLogger(__name__)


class ScenePipeline:
    """Load → flatten → estimate resolution → render.

    Every stage raises on failure; nothing is retried.
    """

    def __init__(self, config: "InternalConfig", output_dirs: Dict[str, Path]):
        self.plots_dir = Path(output_dirs["plots"])
        self.visualize = config.visualization.enabled
        self.loader = GridSourceLoader(config)
        self.flattener = GridFlattener()
        self.estimator = ResolutionEstimator()
        self.renderer = HeatMapRenderer(config)

    def run(self) -> dict:
        """Execute the scene pipeline.

        Returns
        -------
        dict
            ``table`` (PixelRecord DataFrame), ``resolution``
            (ResolutionEstimate) and ``plots`` (list of written files).
        """
        grid = self.loader.load()
        table = self.flattener.flatten(grid)
        resolution = self.estimator.estimate(table)

        plots = []
        if self.visualize:
            stem = f"{Path(grid.attrs['source']).stem}_{grid.attrs['variable']}"
            plots.append(self.renderer.plot_histograms(table, self.plots_dir / f"{stem}_histogram"))
            plots.append(self.renderer.plot_heat_map(
                table, resolution, self.plots_dir / f"{stem}_heatmap",
                title=grid.attrs["source"],
            ))

        return {"table": table, "resolution": resolution, "plots": plots}
