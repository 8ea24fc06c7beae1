"""Tests for pipeline contracts.

These tests verify that contracts are enforced at stage boundaries.
They test contract violations directly, without defensive logic downstream.
"""

import math

import numpy as np
import pandas as pd
import pytest
import xarray as xr

pytestmark = pytest.mark.unit

from satpix.contracts import (
    ContractViolation,
    MissingSourceError,
    NoDataError,
    OrderingMismatchError,
    ShapeMismatchError,
    assert_co_registered,
    assert_dates_match_files,
    assert_pixel_table,
    assert_resolved,
    assert_single_band,
    require,
    require_path,
)
from satpix.scene.resolution import ResolutionEstimate


class TestErrorHierarchy:

    def test_stage_errors_are_contract_violations(self):
        for error in (ShapeMismatchError, OrderingMismatchError, NoDataError):
            assert issubclass(error, ContractViolation)
            assert issubclass(error, RuntimeError)

    def test_missing_source_is_file_not_found(self):
        assert issubclass(MissingSourceError, FileNotFoundError)

    def test_require_raises_given_error(self):
        with pytest.raises(OrderingMismatchError, match="boom"):
            require(False, "boom", OrderingMismatchError)

    def test_require_passes(self):
        require(True, "never raised")


class TestRequirePath:

    def test_existing_file(self, temp_dir):
        path = temp_dir / "a.csv"
        path.write_text("date\n")
        assert require_path(str(path)) == path

    def test_missing_file(self, temp_dir):
        with pytest.raises(MissingSourceError, match="File not found"):
            require_path(temp_dir / "missing.nc")

    def test_unconfigured_path(self):
        with pytest.raises(MissingSourceError, match="No dir path configured"):
            require_path(None, kind="dir")

    def test_file_is_not_a_dir(self, temp_dir):
        path = temp_dir / "a.csv"
        path.write_text("")
        with pytest.raises(MissingSourceError, match="Directory not found"):
            require_path(path, kind="dir")


class TestGridContract:
    """Test grid stage contract."""

    def test_passes_with_matching_2d_arrays(self):
        a = np.ones((3, 4))
        assert_co_registered(a, a, a)

    def test_accepts_data_arrays(self):
        da = xr.DataArray(np.ones((2, 2)), dims=("row", "col"))
        assert_co_registered(da, da, da)

    def test_fails_on_shape_mismatch(self):
        with pytest.raises(ShapeMismatchError, match="differ in shape"):
            assert_co_registered(np.ones((3, 4)), np.ones((3, 4)), np.ones((4, 3)))

    def test_fails_on_1d_input(self):
        with pytest.raises(ShapeMismatchError, match="'latitude' has 1 dims"):
            assert_co_registered(np.ones((3, 4)), np.ones(12), np.ones((3, 4)))

    def test_pixel_table_columns(self):
        df = pd.DataFrame(columns=["latitude", "longitude", "value"])
        with pytest.raises(ContractViolation, match=r"missing columns \['row', 'col'\]"):
            assert_pixel_table(df)


class TestResolutionContract:

    def test_passes_for_positive_estimate(self):
        assert_resolved(ResolutionEstimate(0.01, 0.02))

    def test_nodata_estimate(self):
        with pytest.raises(NoDataError, match="no-data"):
            assert_resolved(ResolutionEstimate(math.nan, 0.02))

    def test_zero_estimate(self):
        with pytest.raises(NoDataError, match="positive"):
            assert_resolved(ResolutionEstimate(0.0, 0.02))


class TestSeriesContract:

    def test_lengths_must_match(self):
        with pytest.raises(OrderingMismatchError, match="2 raster files but 1 acquisition dates"):
            assert_dates_match_files(["a.tif", "b.tif"], ["2024-01-01"])

    def test_dates_must_be_present(self):
        with pytest.raises(OrderingMismatchError, match="no acquisition date"):
            assert_dates_match_files(["a.tif", "b.tif"], [pd.Timestamp("2024-01-01"), pd.NaT])

    def test_file_names_must_be_unique(self):
        with pytest.raises(OrderingMismatchError, match="duplicate"):
            assert_dates_match_files(["x/a.tif", "y/a.tif"], ["2024-01-01", "2024-01-02"])

    def test_single_band(self):
        da = xr.DataArray(np.ones((1, 2, 2)), dims=("band", "y", "x"))
        assert_single_band(da, "a.tif")

    def test_multi_band(self):
        da = xr.DataArray(np.ones((2, 2, 2)), dims=("band", "y", "x"))
        with pytest.raises(ContractViolation, match="a.tif has 2 bands"):
            assert_single_band(da, "data/a.tif")

    def test_needs_spatial_dims(self):
        da = xr.DataArray(np.ones((2, 2)), dims=("row", "col"))
        with pytest.raises(ContractViolation, match="x/y"):
            assert_single_band(da, "a.tif")
