"""Pydantic configuration schemas for signgrid.

Exports
-------
resolve_config : function
    Single entrypoint for configuration resolution
InternalConfig : class
    Fully validated, authoritative runtime configuration
ParamConfig : class
    Complete defaults
UserConfig : class
    User-facing configuration (forgiving, minimal)
CLIConfig : class
    Command-line overrides
"""

from signgrid.schemas.resolve import resolve_config
from signgrid.schemas.internal import InternalConfig
from signgrid.schemas.param import ParamConfig
from signgrid.schemas.user import UserConfig
from signgrid.schemas.cli import CLIConfig

__all__ = [
    'resolve_config',
    'InternalConfig',
    'ParamConfig',
    'UserConfig',
    'CLIConfig',
]
