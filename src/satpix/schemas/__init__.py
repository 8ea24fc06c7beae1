"""Pydantic configuration schemas for satpix.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Expert defaults (complete)
UserConfig : class
    User-facing configuration (forgiving, minimal)
CLIConfig : class
    Command-line operational overrides
"""

from satpix.schemas.resolve import resolve_config
from satpix.schemas.internal import InternalConfig
from satpix.schemas.param import ParamConfig
from satpix.schemas.user import UserConfig
from satpix.schemas.cli import CLIConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
    'CLIConfig',
]
