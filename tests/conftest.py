"""Root-level pytest fixtures for the satpix test suite.

Provides shared configuration fixtures following the Pydantic-based
architecture. Tests use these fixtures instead of creating raw dict configs.
"""

import shutil
import tempfile
from pathlib import Path

import numpy as np
import pytest

from satpix.schemas import ParamConfig, UserConfig, resolve_config
from satpix.setup_directories import setup_output_directories
from tests.helpers.fake_inputs import (
    make_lat_lon,
    write_level2_scene,
    write_metadata,
    write_ndvi_series,
)


# =============================================================================
# Configuration Fixtures (Pydantic-based)
# =============================================================================

@pytest.fixture
def param_config():
    """Expert configuration with all defaults."""
    return ParamConfig()


@pytest.fixture
def internal_config(param_config):
    """Fully validated runtime configuration (no overrides)."""
    return resolve_config(param_config, None, None)


@pytest.fixture
def make_config(param_config):
    """Factory fixture for creating custom test configs.

    Accepts UserConfig-compatible kwargs. The basemap is off unless a test
    asks for it, so no test touches the network.

    Examples
    --------
    >>> def test_custom_variable(make_config):
    ...     config = make_config(CHL_VAR="chl_ocx")
    ...     assert config.scene.variable == "chl_ocx"
    """
    def _make(**user_overrides):
        user_overrides.setdefault("USE_BASEMAP", False)
        user = UserConfig(**user_overrides)
        return resolve_config(param_config, user, None)

    return _make


# =============================================================================
# Directory Fixtures
# =============================================================================

@pytest.fixture
def temp_dir():
    """Temporary directory that is cleaned up after test."""
    d = tempfile.mkdtemp()
    yield Path(d)
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def output_dirs(temp_dir):
    """Standard satpix output directory structure (base, plots, logs)."""
    return setup_output_directories(temp_dir / "output")


# =============================================================================
# Input Fixtures (synthetic scene and raster series)
# =============================================================================

SERIES_DATES = ["2024-01-01", "2024-01-17", "2024-02-02"]


@pytest.fixture
def scene_path(temp_dir):
    """Level-2 style netCDF scene, 6x5 pixels, one fill value."""
    latitude, longitude = make_lat_lon((6, 5))
    value = np.geomspace(0.05, 30.0, 30).reshape(6, 5)
    value[2, 3] = np.nan
    return write_level2_scene(temp_dir / "AQUA_MODIS.20240712.L2.OC.nc", value, latitude, longitude)


@pytest.fixture
def series_inputs(temp_dir):
    """Three dated constant NDVI rasters (0.2, 0.4, 0.6) and their metadata CSV."""
    raster_dir = temp_dir / "ndvi"
    write_ndvi_series(raster_dir, zip(SERIES_DATES, [0.2, 0.4, 0.6]))
    metadata = write_metadata(temp_dir / "metadata.csv", SERIES_DATES)
    return raster_dir, metadata
