"""CLIConfig: Command-line operational overrides.

Minimal configuration for operational parameters that commonly change
between runs: input paths, output directory, which pipelines, verbosity.

This schema handles command-line arguments parsed by argparse.
"""

from typing import Literal, Optional
from pydantic import field_validator
from satpix.schemas.base import SatpixBaseModel
from satpix.schemas.user import _normalize_pipelines


class CLIConfig(SatpixBaseModel):
    """Command-line configuration overrides.

    Operational-only settings that override user and param configs.
    Highest priority in config resolution.

    Usage
    -----
        cli_cfg = CLIConfig(
            scene_path="data/scene.nc",
            base_dir="/scratch/satpix_output",
            pipelines=["scene"],
        )

        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """

    scene_path: Optional[str] = None
    raster_dir: Optional[str] = None
    metadata_csv: Optional[str] = None
    base_dir: Optional[str] = None
    pipelines: Optional[list[Literal["scene", "series"]]] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None

    @field_validator("pipelines", mode="before")
    @classmethod
    def normalize_pipelines(cls, v):
        return _normalize_pipelines(v)

    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.

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

        if self.scene_path is not None:
            overrides["scene"] = {"path": str(self.scene_path)}

        series_overrides = {}
        if self.raster_dir is not None:
            series_overrides["raster_dir"] = str(self.raster_dir)
        if self.metadata_csv is not None:
            series_overrides["metadata_csv"] = str(self.metadata_csv)
        if series_overrides:
            overrides["series"] = series_overrides

        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}

        return overrides
