"""InternalConfig: Authoritative runtime configuration.

This is the ONLY config schema that runtime code sees. It is fully
validated and frozen; runtime code reads fields directly.
"""

from typing import Literal, Optional
from pydantic import Field, ConfigDict
from signgrid.schemas.base import SigngridBaseModel


class InternalGeneratorConfig(SigngridBaseModel):
    """Runtime generator configuration."""
    rows: int = Field(ge=1)
    cols: int = Field(ge=1)
    min_value: int
    max_value: int
    seed: Optional[int] = Field(ge=0)


class InternalRendererConfig(SigngridBaseModel):
    """Runtime renderer configuration.

    ``use_colors`` stays Optional here: None is resolved against the
    output stream by the CLI before rendering.
    """
    use_colors: Optional[bool]


class InternalLoggingConfig(SigngridBaseModel):
    """Runtime logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class InternalConfig(SigngridBaseModel):
    """Authoritative runtime configuration.
    
    Usage
    -----
        generator = GridGenerator(config)
        rows = config.generator.rows  # NOT .get()
    """
    
    generator: InternalGeneratorConfig
    renderer: InternalRendererConfig
    logging: InternalLoggingConfig
    
    model_config = ConfigDict(
        extra='forbid',
        validate_assignment=True,
        use_enum_values=True,
        str_strip_whitespace=True,
        frozen=True,  # Immutable after construction
    )
