"""ParamConfig: Expert defaults for the satpix pipelines.

This module defines the complete default configuration. ALL pipeline
parameters must have defaults here. No runtime code should define fallback
values - this is the single source of truth for defaults.

Runtime code NEVER reads from ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator, model_validator
from satpix.schemas.base import SatpixBaseModel


PipelineName = Literal["scene", "series"]


# =============================================================================
# Nested Configuration Models
# =============================================================================

class SceneConfig(SatpixBaseModel):
    """Single-scene gridded source (Pipeline A).

    Defaults follow the OBPG Level-2 ocean color layout, where the
    measurement lives in the ``geophysical_data`` group and the per-pixel
    coordinates in ``navigation_data``. Set both groups to None for flat
    files (e.g. Level-3 mapped products with 1-D lat/lon).
    """
    path: Optional[str] = None
    variable: str = "chlor_a"
    latitude: str = "latitude"
    longitude: str = "longitude"
    variable_group: Optional[str] = "geophysical_data"
    coord_group: Optional[str] = "navigation_data"


class SeriesConfig(SatpixBaseModel):
    """Multi-file raster time series (Pipeline B)."""
    raster_dir: Optional[str] = None
    metadata_csv: Optional[str] = None
    raster_glob: str = "*.tif"
    date_column: str = "date"
    date_format: Optional[str] = Field(None, description="strptime format of the metadata date column")
    file_column: Optional[str] = Field(None, description="Metadata column holding raster file names")
    filename_date_format: Optional[str] = Field(None, description="strftime format of the date embedded in file names")
    positional_join: bool = Field(False, description="Pair files and dates by listing order when no key is set")

    @model_validator(mode="after")
    def check_single_join_key(self):
        """A raster can be keyed by file name column or by file name date, not both."""
        if self.file_column and self.filename_date_format:
            raise ValueError("Set only one of file_column and filename_date_format")
        return self


class VisualizationConfig(SatpixBaseModel):
    """Visualization settings."""
    enabled: bool = True
    dpi: int = Field(150, ge=50)
    figsize: tuple[float, float] = (10.0, 8.0)
    output_format: Literal["png", "pdf", "jpeg"] = "png"
    use_basemap: bool = True
    basemap_alpha: float = Field(0.8, ge=0, le=1.0)
    cmap: str = "viridis"
    hist_bins: int = Field(50, ge=1)
    line_color: str = "#2e7d32"
    marker: str = "o"


class LoggingConfig(SatpixBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("level", mode="before")
    @classmethod
    def upper_level(cls, v):
        """Accept lowercase level names."""
        if isinstance(v, str):
            return v.upper().strip()
        return v


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(SatpixBaseModel):
    """Complete expert configuration with all defaults.

    This is the single source of truth for all pipeline parameters.
    Every tunable parameter MUST have a default here.

    Usage
    -----
    This config is NOT used directly by runtime code. It serves as the
    base layer in config resolution:

        internal_cfg = resolve_config(param_cfg, user_cfg, cli_cfg)

    Runtime code only sees InternalConfig.
    """

    base_dir: str = "./satpix_output"
    pipelines: list[PipelineName] = Field(default_factory=lambda: ["scene", "series"])
    scene: SceneConfig = Field(default_factory=SceneConfig)
    series: SeriesConfig = Field(default_factory=SeriesConfig)
    visualization: VisualizationConfig = Field(default_factory=VisualizationConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
