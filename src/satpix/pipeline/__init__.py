"""Pipeline modules.

- scene: Pipeline A (netCDF scene → table → heat map)
- series: Pipeline B (raster series → table → daily means → plot)
- orchestrator: Runs both, isolating failures
"""

from satpix.pipeline.orchestrator import PipelineOrchestrator
from satpix.pipeline.scene import ScenePipeline
from satpix.pipeline.series import SeriesPipeline

__all__ = [
    "PipelineOrchestrator",
    "ScenePipeline",
    "SeriesPipeline",
]
