"""Core pipeline execution logic.

This module contains the actual pipeline runner, separated from argument parsing.
Scripts are thin wrappers; this is the real implementation.
"""

import argparse
import importlib.util
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from satpix.pipeline.orchestrator import PipelineOrchestrator
from satpix.schemas import CLIConfig, ParamConfig, UserConfig, resolve_config
from satpix.setup_directories import setup_output_directories

logger = logging.getLogger(__name__)


def load_user_config_dict(config_path: str) -> dict:
    """Load user config dict from Python file.

    Returns the raw dict before Pydantic validation.

    Raises
    ------
    FileNotFoundError
        If config file does not exist.
    ValueError
        If no CONFIG dict found in file.
    """
    path = Path(config_path)
    if not path.exists():
        raise FileNotFoundError(f"Config not found: {path}")

    spec = importlib.util.spec_from_file_location("config_module", path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Could not load config module from {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)

    # Find CONFIG dict
    for name in dir(module):
        if name.startswith('CONFIG'):
            obj = getattr(module, name)
            if isinstance(obj, dict):
                return obj

    raise ValueError(f"No CONFIG dict found in {path}")


def run_pipelines(
    user_config_path: Optional[str] = None,
    cli_args: Optional[Dict[str, Any]] = None,
    verbose: bool = False,
) -> Dict[str, str]:
    """Resolve configuration and run the scene and/or series pipelines.

    Parameters
    ----------
    user_config_path : str, optional
        Python file with a CONFIG dict. If None, only CLI overrides apply.
    cli_args : dict, optional
        CLI overrides. Keys: scene_path, raster_dir, metadata_csv,
        base_dir, pipelines, log_level. None values are ignored.
    verbose : bool, optional
        Enable DEBUG logging and print the resolved config.

    Returns
    -------
    dict
        Pipeline name to "completed" or "failed".
    """
    param_cfg = ParamConfig()

    user_cfg_dict = load_user_config_dict(user_config_path) if user_config_path else {}
    user_cfg = UserConfig.model_validate(user_cfg_dict)

    cli_args = dict(cli_args or {})
    if verbose and "log_level" not in cli_args:
        cli_args["log_level"] = "DEBUG"
    cli_dict = {k: v for k, v in cli_args.items() if v is not None}
    cli_cfg = CLIConfig.model_validate(cli_dict) if cli_dict else CLIConfig()

    config = resolve_config(param_cfg, user_cfg, cli_cfg)
    output_dirs = setup_output_directories(config.base_dir)

    print(f"\n{'='*60}")
    print("satpix raster pipelines")
    print('='*60)
    print(f"Config:    {user_config_path}")
    print(f"Pipelines: {', '.join(config.pipelines)}")
    print(f"Output:    {output_dirs['base']}")
    print('='*60)

    if verbose:
        print("\nFull Internal Configuration:")
        print(json.dumps(config.model_dump(), indent=2))
        print('='*60)

    orchestrator = PipelineOrchestrator(config, output_dirs)
    return orchestrator.run()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Run the satpix scene and series pipelines")
    parser.add_argument("config", nargs="?", help="Path to user config file")
    parser.add_argument("--scene-path", help="netCDF scene file (Pipeline A)")
    parser.add_argument("--raster-dir", help="Directory of per-date rasters (Pipeline B)")
    parser.add_argument("--metadata-csv", help="CSV with acquisition dates (Pipeline B)")
    parser.add_argument("--base-dir", help="Output directory")
    parser.add_argument("--only", choices=["scene", "series"], help="Run a single pipeline")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    status = run_pipelines(
        args.config,
        cli_args={
            "scene_path": args.scene_path,
            "raster_dir": args.raster_dir,
            "metadata_csv": args.metadata_csv,
            "base_dir": args.base_dir,
            "pipelines": [args.only] if args.only else None,
        },
        verbose=args.verbose,
    )
    return 0 if all(s == "completed" for s in status.values()) else 1
