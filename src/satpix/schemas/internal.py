"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully validated,
normalized, and immutable.

All .get() calls and fallback defaults are FORBIDDEN in runtime code -
everything is explicit here.
"""

from typing import Literal, Optional
from pydantic import ConfigDict, model_validator
from satpix.schemas.base import SatpixBaseModel


# =============================================================================
# Nested Configuration Models (Runtime)
# =============================================================================

class InternalSceneConfig(SatpixBaseModel):
    """Runtime scene configuration.

    Note: path may be None during config merging; the scene pipeline
    raises MissingSourceError when it is still None at run time.
    """
    path: Optional[str]
    variable: str
    latitude: str
    longitude: str
    variable_group: Optional[str]
    coord_group: Optional[str]


class InternalSeriesConfig(SatpixBaseModel):
    """Runtime series configuration."""
    raster_dir: Optional[str]
    metadata_csv: Optional[str]
    raster_glob: str
    date_column: str
    date_format: Optional[str]
    file_column: Optional[str]
    filename_date_format: Optional[str]
    positional_join: bool

    @model_validator(mode="after")
    def check_single_join_key(self):
        if self.file_column and self.filename_date_format:
            raise ValueError("Set only one of file_column and filename_date_format")
        return self


class InternalVisualizationConfig(SatpixBaseModel):
    """Runtime visualization settings."""
    enabled: bool
    dpi: int
    figsize: tuple[float, float]
    output_format: Literal["png", "pdf", "jpeg"]
    use_basemap: bool
    basemap_alpha: float
    cmap: str
    hist_bins: int
    line_color: str
    marker: str


class InternalLoggingConfig(SatpixBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


# =============================================================================
# Main InternalConfig
# =============================================================================

class InternalConfig(SatpixBaseModel):
    """Authoritative runtime configuration.

    Runtime modules receive InternalConfig and access fields directly:

        def __init__(self, config: InternalConfig):
            self.variable = config.scene.variable  # NOT .get()

    Rules
    -----
    - NO .get() calls
    - NO fallback defaults
    - NO validation

    All of that happens during config resolution, not in runtime code.
    """

    base_dir: str
    pipelines: list[Literal["scene", "series"]]
    scene: InternalSceneConfig
    series: InternalSeriesConfig
    visualization: InternalVisualizationConfig
    logging: InternalLoggingConfig

    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
