"""UserConfig: Forgiving, minimal user-facing configuration.

This schema accepts user inputs in a variety of formats, with aliases
for common naming patterns (e.g., SCENE_PATH → scene_path, RASTER_DIR → raster_dir).

UserConfig is intentionally minimal - users only specify what they want
to override from the expert defaults.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from satpix.schemas.base import SatpixBaseModel


def _normalize_pipelines(v):
    """Accept 'scene', 'Scene,Series' or a list of names."""
    if isinstance(v, str):
        v = v.split(",")
    if isinstance(v, (list, tuple)):
        return [str(p).lower().strip() for p in v if str(p).strip()]
    return v


class UserSceneConfig(SatpixBaseModel):
    """User-facing scene config."""
    path: Optional[str] = None
    variable: Optional[str] = None
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    variable_group: Optional[str] = None
    coord_group: Optional[str] = None


class UserSeriesConfig(SatpixBaseModel):
    """User-facing series config."""
    raster_dir: Optional[str] = None
    metadata_csv: Optional[str] = None
    raster_glob: Optional[str] = None
    date_column: Optional[str] = None
    date_format: Optional[str] = None
    file_column: Optional[str] = None
    filename_date_format: Optional[str] = None
    positional_join: Optional[bool] = None


class UserVisualizationConfig(SatpixBaseModel):
    """User-facing visualization config."""
    enabled: Optional[bool] = None
    dpi: Optional[int] = None
    figsize: Optional[tuple[float, float]] = None
    output_format: Optional[str] = None
    use_basemap: Optional[bool] = None
    basemap_alpha: Optional[float] = None
    cmap: Optional[str] = None
    hist_bins: Optional[int] = None

    @field_validator("output_format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        """Normalize format names to lowercase without a leading dot."""
        if isinstance(v, str):
            return v.lower().strip().lstrip(".")
        return v


class UserConfig(SatpixBaseModel):
    """User-facing configuration schema.

    Minimal, forgiving, and uses common aliases. Users only specify
    what they want to override from ParamConfig defaults.

    Usage
    -----
        user_cfg = UserConfig(
            SCENE_PATH="data/AQUA_MODIS.20240712T183001.L2.OC.nc",
            RASTER_DIR="data/ndvi",
            METADATA_CSV="data/ndvi/metadata.csv",
        )

        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    # Top-level operational settings
    base_dir: Optional[str] = Field(None, alias="BASE_DIR")
    pipelines: Optional[list[Literal["scene", "series"]]] = Field(None, alias="PIPELINES")
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(None, alias="LOG_LEVEL")

    # Scene settings (flat aliases)
    scene_path: Optional[str] = Field(None, alias="SCENE_PATH")
    scene_variable: Optional[str] = Field(None, alias="CHL_VAR")
    latitude_variable: Optional[str] = Field(None, alias="LAT_VAR")
    longitude_variable: Optional[str] = Field(None, alias="LON_VAR")

    # Series settings (flat aliases)
    raster_dir: Optional[str] = Field(None, alias="RASTER_DIR")
    metadata_csv: Optional[str] = Field(None, alias="METADATA_CSV")
    raster_glob: Optional[str] = Field(None, alias="RASTER_GLOB")
    date_column: Optional[str] = Field(None, alias="DATE_COLUMN")
    file_column: Optional[str] = Field(None, alias="FILE_COLUMN")
    filename_date_format: Optional[str] = Field(None, alias="FILENAME_DATE_FORMAT")
    positional_join: Optional[bool] = Field(None, alias="POSITIONAL_JOIN")

    # Visualization settings (flat aliases)
    use_basemap: Optional[bool] = Field(None, alias="USE_BASEMAP")
    output_format: Optional[str] = Field(None, alias="OUTPUT_FORMAT")

    # Nested overrides (advanced users)
    scene: Optional[UserSceneConfig] = None
    series: Optional[UserSeriesConfig] = None
    visualization: Optional[UserVisualizationConfig] = None

    model_config = SatpixBaseModel.model_config.copy()
    # Allow forgiving input dictionaries (ignore unknown keys)
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("pipelines", mode="before")
    @classmethod
    def normalize_pipelines(cls, v):
        return _normalize_pipelines(v)

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        if isinstance(v, str):
            return v.upper().strip()
        return v

    @field_validator("output_format", mode="before")
    @classmethod
    def normalize_format(cls, v):
        if isinstance(v, str):
            return v.lower().strip().lstrip(".")
        return v

    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.

        Nested sections win over the flat aliases they overlap with. Fields
        set explicitly to None in the nested scene/series sections are kept,
        so a default netCDF group can be cleared.

        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}

        if self.base_dir is not None:
            overrides["base_dir"] = str(self.base_dir)
        if self.pipelines is not None:
            overrides["pipelines"] = list(self.pipelines)
        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        # Scene section
        scene = {}
        if self.scene_path is not None:
            scene["path"] = str(self.scene_path)
        if self.scene_variable is not None:
            scene["variable"] = self.scene_variable
        if self.latitude_variable is not None:
            scene["latitude"] = self.latitude_variable
        if self.longitude_variable is not None:
            scene["longitude"] = self.longitude_variable

        if self.scene is not None:
            scene.update(self.scene.model_dump(exclude_unset=True))

        if scene:
            overrides["scene"] = scene

        # Series section
        series = {}
        if self.raster_dir is not None:
            series["raster_dir"] = str(self.raster_dir)
        if self.metadata_csv is not None:
            series["metadata_csv"] = str(self.metadata_csv)
        if self.raster_glob is not None:
            series["raster_glob"] = self.raster_glob
        if self.date_column is not None:
            series["date_column"] = self.date_column
        if self.file_column is not None:
            series["file_column"] = self.file_column
        if self.filename_date_format is not None:
            series["filename_date_format"] = self.filename_date_format
        if self.positional_join is not None:
            series["positional_join"] = self.positional_join

        if self.series is not None:
            series.update(self.series.model_dump(exclude_unset=True))

        if series:
            overrides["series"] = series

        # Visualization section
        visualization = {}
        if self.use_basemap is not None:
            visualization["use_basemap"] = self.use_basemap
        if self.output_format is not None:
            visualization["output_format"] = self.output_format

        if self.visualization is not None:
            visualization.update(self.visualization.model_dump(exclude_none=True))

        if visualization:
            overrides["visualization"] = visualization

        return overrides
