"""Shared figure handling for satpix renderers.

Renders to files with the Agg backend; figure size, DPI and output format
come from ``config.visualization``.
"""

import logging
from pathlib import Path
from typing import TYPE_CHECKING, Tuple

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt

if TYPE_CHECKING:
    from satpix.schemas import InternalConfig

__all__ = ['BasePlotter']

logger = logging.getLogger(__name__)

_IMAGE_SUFFIXES = {'.png', '.pdf', '.jpeg', '.jpg'}


class BasePlotter:
    """Common configuration and save logic for all renderers."""

    def __init__(self, config: "InternalConfig"):
        viz = config.visualization
        self.dpi = viz.dpi
        self.figsize = tuple(viz.figsize)
        self.output_format = viz.output_format
        self.use_basemap = viz.use_basemap
        self.basemap_alpha = viz.basemap_alpha
        self.cmap = viz.cmap
        self.hist_bins = viz.hist_bins
        self.line_color = viz.line_color
        self.marker = viz.marker

    def _setup_figure(self, ncols: int = 1) -> Tuple[plt.Figure, object]:
        return plt.subplots(1, ncols, figsize=self.figsize, dpi=self.dpi)

    def _save_figure(self, fig: plt.Figure, output_path) -> str:
        """Save figure in configured format and close it."""
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        # Scene stems contain dots (AQUA_MODIS.20240712...); only swap image suffixes
        extension = f'.{self.output_format}'
        if output_path.suffix.lower() in _IMAGE_SUFFIXES:
            output_file = output_path.with_suffix(extension)
        else:
            output_file = output_path.with_name(output_path.name + extension)

        fig.savefig(
            output_file,
            dpi=self.dpi,
            bbox_inches='tight',
            format=self.output_format
        )
        plt.close(fig)
        logger.info("✓ Plot saved: %s", output_file)

        return str(output_file)
