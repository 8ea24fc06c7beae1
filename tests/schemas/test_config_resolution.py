"""Test config resolution and validation with Pydantic."""

import pytest
from pydantic import ValidationError

from satpix.schemas import ParamConfig, UserConfig, CLIConfig, InternalConfig
from satpix.schemas.resolve import deep_merge, resolve_config
from satpix.schemas.user import UserSceneConfig, UserSeriesConfig, UserVisualizationConfig


class TestConfigResolution:
    """Test resolve_config() precedence and merging."""

    def test_resolve_config_all_defaults(self):
        """Resolving with no user/CLI overrides uses all ParamConfig defaults."""
        config = resolve_config(ParamConfig(), None, None)

        assert isinstance(config, InternalConfig)
        assert config.scene.variable == "chlor_a"
        assert config.scene.variable_group == "geophysical_data"
        assert config.series.raster_glob == "*.tif"
        assert config.series.raster_dir is None
        assert config.pipelines == ["scene", "series"]
        assert config.visualization.cmap == "viridis"

    def test_user_config_overrides_param_config(self):
        config = resolve_config(ParamConfig(), UserConfig(CHL_VAR="chl_ocx"), None)
        assert config.scene.variable == "chl_ocx"

    def test_dict_inputs_are_validated(self):
        config = resolve_config(ParamConfig(), {"RASTER_DIR": "data/ndvi"}, {"base_dir": "/tmp/out"})
        assert config.series.raster_dir == "data/ndvi"
        assert config.base_dir == "/tmp/out"

    def test_precedence_cli_user_param(self):
        """Full precedence: CLI > User > Param."""
        user = UserConfig(SCENE_PATH="user.nc", BASE_DIR="user_out", LOG_LEVEL="warning")
        cli = CLIConfig(scene_path="cli.nc")
        config = resolve_config(ParamConfig(), user, cli)

        assert config.scene.path == "cli.nc"
        assert config.base_dir == "user_out"
        assert config.logging.level == "WARNING"

    def test_empty_user_config_uses_all_param_defaults(self):
        config = resolve_config(ParamConfig(), UserConfig(), None)
        assert config == resolve_config(ParamConfig(), None, None)

    def test_internal_config_is_frozen(self, internal_config):
        with pytest.raises(ValidationError):
            internal_config.base_dir = "elsewhere"

    def test_pipeline_order_is_scene_then_series(self):
        config = resolve_config(ParamConfig(), UserConfig(PIPELINES=["series", "scene"]), None)
        assert config.pipelines == ["scene", "series"]


class TestUserConfigAliases:
    """Test UserConfig flat aliases map correctly."""

    def test_scene_aliases(self):
        user = UserConfig(SCENE_PATH="a.nc", CHL_VAR="chl", LAT_VAR="lat", LON_VAR="lon")
        config = resolve_config(ParamConfig(), user, None)

        assert config.scene.path == "a.nc"
        assert config.scene.variable == "chl"
        assert config.scene.latitude == "lat"
        assert config.scene.longitude == "lon"

    def test_series_aliases(self):
        user = UserConfig(
            RASTER_DIR="ndvi", METADATA_CSV="ndvi/meta.csv", RASTER_GLOB="NDVI_*.tif",
            DATE_COLUMN="acquired", FILENAME_DATE_FORMAT="%Y%m%d",
        )
        config = resolve_config(ParamConfig(), user, None)

        assert config.series.raster_dir == "ndvi"
        assert config.series.metadata_csv == "ndvi/meta.csv"
        assert config.series.raster_glob == "NDVI_*.tif"
        assert config.series.date_column == "acquired"
        assert config.series.filename_date_format == "%Y%m%d"

    def test_positional_join_is_opt_in(self):
        assert resolve_config(ParamConfig(), None, None).series.positional_join is False
        config = resolve_config(ParamConfig(), UserConfig(POSITIONAL_JOIN=True), None)
        assert config.series.positional_join is True

    def test_field_names_work_too(self):
        user = UserConfig(raster_dir="ndvi", scene_variable="chl_ocx")
        assert user.to_internal_overrides() == {
            "scene": {"variable": "chl_ocx"},
            "series": {"raster_dir": "ndvi"},
        }

    def test_unknown_keys_are_ignored(self):
        user = UserConfig(RASTER_DIR="ndvi", SOMETHING_ELSE=1)
        assert user.to_internal_overrides() == {"series": {"raster_dir": "ndvi"}}

    def test_pipelines_string(self):
        assert UserConfig(PIPELINES="Scene").pipelines == ["scene"]
        assert UserConfig(PIPELINES="scene, series").pipelines == ["scene", "series"]

    def test_invalid_pipeline(self):
        with pytest.raises(ValidationError):
            UserConfig(PIPELINES=["mosaic"])

    def test_output_format_normalized(self):
        config = resolve_config(ParamConfig(), UserConfig(OUTPUT_FORMAT=".PDF"), None)
        assert config.visualization.output_format == "pdf"


class TestNestedOverrides:

    def test_nested_scene_wins_over_flat_alias(self):
        user = UserConfig(CHL_VAR="chl", scene=UserSceneConfig(variable="chl_ocx"))
        config = resolve_config(ParamConfig(), user, None)
        assert config.scene.variable == "chl_ocx"

    def test_nested_none_clears_netcdf_groups(self):
        user = UserConfig(scene={"variable_group": None, "coord_group": None})
        config = resolve_config(ParamConfig(), user, None)

        assert config.scene.variable_group is None
        assert config.scene.coord_group is None
        assert config.scene.variable == "chlor_a"

    def test_nested_series(self):
        user = UserConfig(series=UserSeriesConfig(file_column="file"))
        config = resolve_config(ParamConfig(), user, None)
        assert config.series.file_column == "file"

    def test_nested_visualization(self):
        user = UserConfig(visualization=UserVisualizationConfig(dpi=72, cmap="magma"))
        config = resolve_config(ParamConfig(), user, None)

        assert config.visualization.dpi == 72
        assert config.visualization.cmap == "magma"
        assert config.visualization.use_basemap is True

    def test_both_join_keys_rejected(self):
        user = UserConfig(FILE_COLUMN="file", FILENAME_DATE_FORMAT="%Y%m%d")
        with pytest.raises(ValidationError, match="only one"):
            resolve_config(ParamConfig(), user, None)


class TestParamConfigValidation:

    def test_extra_fields_rejected(self):
        with pytest.raises(ValidationError):
            ParamConfig(unknown=1)

    def test_dpi_lower_bound(self):
        with pytest.raises(ValidationError):
            ParamConfig(visualization={"dpi": 10})

    def test_lowercase_log_level(self):
        assert ParamConfig(logging={"level": "debug"}).logging.level == "DEBUG"


def test_deep_merge():
    base = {"a": 1, "b": {"c": 2, "d": 3}}
    override = {"b": {"d": 4, "e": 5}, "f": 6}

    assert deep_merge(base, override) == {"a": 1, "b": {"c": 2, "d": 4, "e": 5}, "f": 6}
    assert base == {"a": 1, "b": {"c": 2, "d": 3}}
