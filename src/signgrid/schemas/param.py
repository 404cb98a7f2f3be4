"""ParamConfig: Complete defaults for the grid report.

Every tunable parameter has its default here. Runtime code never reads
ParamConfig directly - it only receives InternalConfig.
"""

from typing import Literal, Optional
from pydantic import Field
from signgrid.schemas.base import SigngridBaseModel


DEFAULT_ROWS = 10
DEFAULT_COLS = 10
DEFAULT_MIN_VALUE = -100
DEFAULT_MAX_VALUE = 100


# =============================================================================
# Nested Configuration Models
# =============================================================================

class GeneratorConfig(SigngridBaseModel):
    """Random grid generator configuration.

    Bounds may be given in either order; the generator swaps them.
    """
    rows: int = Field(DEFAULT_ROWS, ge=1, description="Number of grid rows")
    cols: int = Field(DEFAULT_COLS, ge=1, description="Number of cells per row")
    min_value: int = Field(DEFAULT_MIN_VALUE, description="Inclusive lower bound")
    max_value: int = Field(DEFAULT_MAX_VALUE, description="Inclusive upper bound")
    seed: Optional[int] = Field(None, ge=0, description="RNG seed, None for fresh entropy")


class RendererConfig(SigngridBaseModel):
    """Table renderer configuration.

    ``use_colors=None`` means "decide from the output stream" and is
    resolved by the caller, never by the renderer.
    """
    use_colors: Optional[bool] = None


class LoggingConfig(SigngridBaseModel):
    """Logging configuration."""
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"


# =============================================================================
# Main ParamConfig
# =============================================================================

class ParamConfig(SigngridBaseModel):
    """Complete configuration with all defaults.
    
    This is the base layer in config resolution:
    
        internal_cfg = resolve_config(param_cfg, user_cfg, cli_cfg)
    
    Runtime code only sees InternalConfig.
    """
    
    generator: GeneratorConfig = Field(default_factory=GeneratorConfig)
    renderer: RendererConfig = Field(default_factory=RendererConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
