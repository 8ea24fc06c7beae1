"""Time-series plot of per-date aggregate values."""

import logging
from typing import Optional

import matplotlib.dates as mdates
import pandas as pd

from satpix.contracts import require
from satpix.visualization.plotter import BasePlotter

__all__ = ['TimeSeriesRenderer']

logger = logging.getLogger(__name__)


class TimeSeriesRenderer(BasePlotter):
    """Connected line-and-point plot, dates on x in chronological order.

    Dates whose aggregate is no-data appear as gaps in the line.
    """

    def plot_series(self, series: pd.DataFrame, output_path,
                    ylabel: str = "Mean value", title: Optional[str] = None) -> str:
        require(
            {"date", "value"} <= set(series.columns),
            f"Time series needs 'date' and 'value' columns, got {list(series.columns)}",
        )
        series = series.sort_values("date", kind="stable")

        fig, ax = self._setup_figure()
        ax.plot(
            pd.to_datetime(series["date"]),
            series["value"],
            marker=self.marker,
            linestyle="-",
            color=self.line_color,
        )

        locator = mdates.AutoDateLocator()
        ax.xaxis.set_major_locator(locator)
        ax.xaxis.set_major_formatter(mdates.ConciseDateFormatter(locator))

        ax.set_xlabel("Acquisition date")
        ax.set_ylabel(ylabel)
        if title:
            ax.set_title(title, fontsize=12, fontweight="bold")
        ax.grid(True, alpha=0.2, linestyle=':', linewidth=0.5)

        logger.debug("Time series: %d points", len(series))
        return self._save_figure(fig, output_path)
