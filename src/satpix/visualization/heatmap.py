"""Histogram and geographic heat map of a flattened scene.

Each pixel with data is drawn as a rectangle of the estimated pixel size,
centred on its latitude/longitude, coloured by log10 of its value on a
sequential colormap. The map extent is taken from the table's own
coordinate range. An OpenStreetMap-style basemap (contextily) gives the
geographic base layer when enabled.
"""

import logging
from typing import Optional

import contextily as ctx
import numpy as np
import pandas as pd
from matplotlib.collections import PolyCollection

from satpix.contracts import NoDataError, assert_resolved, require
from satpix.scene.resolution import ResolutionEstimate
from satpix.visualization.plotter import BasePlotter, plt

__all__ = ['HeatMapRenderer', 'pixel_polygons']

logger = logging.getLogger(__name__)


def pixel_polygons(longitude: np.ndarray, latitude: np.ndarray,
                   width: float, height: float) -> np.ndarray:
    """Corner vertices, shape (n, 4, 2), of rectangles centred on each pixel."""
    half_w, half_h = width / 2.0, height / 2.0
    x0, x1 = longitude - half_w, longitude + half_w
    y0, y1 = latitude - half_h, latitude + half_h
    return np.stack([
        np.column_stack([x0, y0]),
        np.column_stack([x1, y0]),
        np.column_stack([x1, y1]),
        np.column_stack([x0, y1]),
    ], axis=1)


class HeatMapRenderer(BasePlotter):
    """Renders value histograms and a log-scaled pixel heat map.

    Example usage::

        renderer = HeatMapRenderer(config)
        renderer.plot_histograms(table, "plots/chlor_a_histogram")
        renderer.plot_heat_map(table, resolution, "plots/chlor_a_heatmap")
    """

    @staticmethod
    def _label(table: pd.DataFrame) -> str:
        variable = table.attrs.get("variable", "value")
        units = table.attrs.get("units", "")
        return f"{variable} ({units})" if units else variable

    def plot_histograms(self, table: pd.DataFrame, output_path) -> str:
        """Plot the distribution of values and of their log10.

        Missing values are dropped; the log panel also drops values <= 0.
        """
        values = table["value"].dropna().to_numpy()
        require(len(values) > 0, "Histogram needs at least one pixel with data", NoDataError)
        positive = values[values > 0]

        label = self._label(table)
        fig, (ax1, ax2) = self._setup_figure(ncols=2)

        ax1.hist(values, bins=self.hist_bins, color="#4c72b0", edgecolor="white", linewidth=0.3)
        ax1.set_xlabel(label)
        ax1.set_ylabel("Pixel count")
        ax1.set_title("Distribution")

        if len(positive):
            ax2.hist(np.log10(positive), bins=self.hist_bins, color="#55a868",
                     edgecolor="white", linewidth=0.3)
        ax2.set_xlabel(f"log10 {label}")
        ax2.set_ylabel("Pixel count")
        ax2.set_title("Log10 distribution")

        for ax in (ax1, ax2):
            ax.grid(True, alpha=0.2, linestyle=':', linewidth=0.5)

        logger.debug("Histogram: %d values, %d positive", len(values), len(positive))
        return self._save_figure(fig, output_path)

    def _add_basemap(self, ax: plt.Axes) -> None:
        """Add web tile basemap under the pixels (lat/lon axes)."""
        if not self.use_basemap:
            return

        try:
            ctx.add_basemap(
                ax,
                crs="EPSG:4326",
                source=ctx.providers.CartoDB.Positron,
                alpha=self.basemap_alpha,
                attribution=False,
                zorder=0,
            )
        except Exception as e:
            logger.warning("Could not add basemap: %s", e)

    def plot_heat_map(self, table: pd.DataFrame, resolution: ResolutionEstimate,
                      output_path, title: Optional[str] = None) -> str:
        """Draw every pixel with data as a coloured rectangle on a map.

        Parameters
        ----------
        table : pd.DataFrame
            PixelRecord table (latitude, longitude, value).
        resolution : ResolutionEstimate
            Pixel height/width in degrees.
        output_path : str or Path
            Output file; the extension follows the configured format.
        title : str, optional
            Figure title. Defaults to the variable name.

        Raises
        ------
        NoDataError
            If the resolution is no-data or no pixel has a positive value.
        """
        assert_resolved(resolution)

        coords = table[["longitude", "latitude"]].dropna()
        require(len(coords) > 0, "Heat map needs pixels with coordinates", NoDataError)

        valid = table[table["value"].notna() & (table["value"] > 0)
                      & table["latitude"].notna() & table["longitude"].notna()]
        require(len(valid) > 0, "Heat map needs at least one pixel with a positive value", NoDataError)

        height, width = resolution.pixel_height, resolution.pixel_width
        verts = pixel_polygons(valid["longitude"].to_numpy(), valid["latitude"].to_numpy(),
                               width, height)
        log_values = np.log10(valid["value"].to_numpy())

        fig, ax = self._setup_figure()

        pixels = PolyCollection(verts, cmap=self.cmap, linewidths=0, edgecolors="none", zorder=2)
        pixels.set_array(log_values)
        ax.add_collection(pixels)

        # Viewport from the data's own extent
        ax.set_xlim(coords["longitude"].min() - width / 2, coords["longitude"].max() + width / 2)
        ax.set_ylim(coords["latitude"].min() - height / 2, coords["latitude"].max() + height / 2)
        self._add_basemap(ax)

        cbar = fig.colorbar(pixels, ax=ax, fraction=0.046, pad=0.04)
        cbar.set_label(f"log10 {self._label(table)}")

        ax.set_xlabel("Longitude (°)")
        ax.set_ylabel("Latitude (°)")
        ax.set_title(title or self._label(table), fontsize=12, fontweight="bold")
        ax.grid(True, alpha=0.2, linestyle=':', linewidth=0.5)

        logger.info("Heat map: %d of %d pixels drawn", len(valid), len(table))
        return self._save_figure(fig, output_path)
