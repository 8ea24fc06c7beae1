"""Visualization: histograms, heat map and time-series plots."""

from satpix.visualization.heatmap import HeatMapRenderer
from satpix.visualization.timeseries import TimeSeriesRenderer

__all__ = ['HeatMapRenderer', 'TimeSeriesRenderer']
