"""Tests for histogram, heat map and time-series renderers.

Basemaps are disabled (see make_config) so nothing is fetched.
"""

import math

import numpy as np
import pandas as pd
import pytest

from satpix.contracts import ContractViolation, NoDataError
from satpix.scene import estimate_resolution, flatten_grid
from satpix.scene.resolution import ResolutionEstimate
from satpix.visualization import HeatMapRenderer, TimeSeriesRenderer
from satpix.visualization.heatmap import pixel_polygons
from tests.helpers.fake_inputs import make_lat_lon


@pytest.fixture
def pixel_table():
    latitude, longitude = make_lat_lon((5, 4))
    value = np.linspace(0.05, 20.0, 20).reshape(5, 4)
    value[0, 0] = np.nan
    value[1, 1] = 0.0
    table = flatten_grid(value, latitude, longitude)
    table.attrs.update(variable="chlor_a", units="mg m^-3")
    return table


class TestPixelPolygons:

    def test_rectangles_centred_on_pixels(self):
        verts = pixel_polygons(np.array([10.0, 20.0]), np.array([1.0, 2.0]), width=2.0, height=1.0)

        assert verts.shape == (2, 4, 2)
        np.testing.assert_allclose(verts[0], [[9.0, 0.5], [11.0, 0.5], [11.0, 1.5], [9.0, 1.5]])
        np.testing.assert_allclose(verts[1].mean(axis=0), [20.0, 2.0])


class TestHeatMapRenderer:

    def test_heat_map_written(self, make_config, output_dirs, pixel_table):
        renderer = HeatMapRenderer(make_config())
        resolution = estimate_resolution(pixel_table)

        path = renderer.plot_heat_map(pixel_table, resolution, output_dirs["plots"] / "scene_heatmap")

        assert path.endswith("scene_heatmap.png")
        assert (output_dirs["plots"] / "scene_heatmap.png").stat().st_size > 0

    def test_output_format_sets_extension(self, make_config, output_dirs, pixel_table):
        renderer = HeatMapRenderer(make_config(OUTPUT_FORMAT="pdf"))
        path = renderer.plot_heat_map(pixel_table, ResolutionEstimate(0.01, 0.02),
                                      output_dirs["plots"] / "scene_heatmap.png")
        assert path.endswith("scene_heatmap.pdf")

    def test_nodata_resolution_raises(self, make_config, output_dirs, pixel_table):
        renderer = HeatMapRenderer(make_config())
        with pytest.raises(NoDataError):
            renderer.plot_heat_map(pixel_table, ResolutionEstimate(math.nan, math.nan),
                                   output_dirs["plots"] / "x")
        assert not list(output_dirs["plots"].iterdir())

    def test_no_positive_values_raises(self, make_config, output_dirs, pixel_table):
        table = pixel_table.assign(value=0.0)
        with pytest.raises(NoDataError, match="positive"):
            HeatMapRenderer(make_config()).plot_heat_map(
                table, ResolutionEstimate(0.01, 0.02), output_dirs["plots"] / "x")

    def test_histograms_written(self, make_config, output_dirs, pixel_table):
        path = HeatMapRenderer(make_config()).plot_histograms(
            pixel_table, output_dirs["plots"] / "scene_histogram")
        assert (output_dirs["plots"] / "scene_histogram.png").exists()
        assert path.endswith(".png")

    def test_histogram_of_empty_table_raises(self, make_config, output_dirs, pixel_table):
        with pytest.raises(NoDataError):
            HeatMapRenderer(make_config()).plot_histograms(
                pixel_table.assign(value=np.nan), output_dirs["plots"] / "x")

    def test_basemap_failure_is_not_fatal(self, make_config, output_dirs, pixel_table, monkeypatch, caplog):
        import satpix.visualization.heatmap as heatmap

        def offline(*args, **kwargs):
            raise ConnectionError("offline")

        monkeypatch.setattr(heatmap.ctx, "add_basemap", offline)
        renderer = HeatMapRenderer(make_config(USE_BASEMAP=True))

        with caplog.at_level("INFO"):
            path = renderer.plot_heat_map(pixel_table, estimate_resolution(pixel_table),
                                          output_dirs["plots"] / "with_basemap")
        assert path.endswith("with_basemap.png")
        assert "Could not add basemap: offline" in caplog.text
        assert f"Plot saved: {path}" in caplog.text


class TestTimeSeriesRenderer:

    def test_series_plot_written(self, make_config, output_dirs):
        series = pd.DataFrame({
            "date": pd.to_datetime(["2024-02-02", "2024-01-01", "2024-01-17"]),
            "value": [3.0, 1.0, np.nan],
            "n_valid": [4, 4, 0],
        })

        path = TimeSeriesRenderer(make_config()).plot_series(series, output_dirs["plots"] / "series")

        assert (output_dirs["plots"] / "series.png").exists()
        assert path.endswith("series.png")

    def test_series_needs_date_and_value(self, make_config, output_dirs):
        with pytest.raises(ContractViolation):
            TimeSeriesRenderer(make_config()).plot_series(
                pd.DataFrame({"value": [1.0]}), output_dirs["plots"] / "series")
