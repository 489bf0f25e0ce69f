"""Pydantic configuration schemas for the GroveGrid pipeline.

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

from grovegrid.schemas.resolve import resolve_config
from grovegrid.schemas.internal import InternalConfig
from grovegrid.schemas.param import ParamConfig
from grovegrid.schemas.user import UserConfig
from grovegrid.schemas.cli import CLIConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
    'CLIConfig',
]
