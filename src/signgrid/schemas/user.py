"""UserConfig: Forgiving, minimal user-facing configuration.

Accepts flat keys in lower or upper case (ROWS -> rows, USE_COLORS ->
use_colors) plus nested sections for advanced users. Users only specify
what they want to override from ParamConfig.
"""

from typing import Literal, Optional
from pydantic import Field, field_validator
from signgrid.schemas.base import SigngridBaseModel


class UserGeneratorConfig(SigngridBaseModel):
    """User-facing generator config."""
    rows: Optional[int] = None
    cols: Optional[int] = None
    min_value: Optional[int] = None
    max_value: Optional[int] = None
    seed: Optional[int] = None


class UserRendererConfig(SigngridBaseModel):
    """User-facing renderer config."""
    use_colors: Optional[bool] = None


class UserConfig(SigngridBaseModel):
    """User-facing configuration schema.
    
    Usage
    -----
        user_cfg = UserConfig(ROWS=5, COLS=8, USE_COLORS=False)
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """
    
    # Generator settings (flat aliases)
    rows: Optional[int] = Field(None, alias="ROWS")
    cols: Optional[int] = Field(None, alias="COLS")
    min_value: Optional[int] = Field(None, alias="MIN_VALUE")
    max_value: Optional[int] = Field(None, alias="MAX_VALUE")
    seed: Optional[int] = Field(None, alias="SEED")
    
    # Renderer settings
    use_colors: Optional[bool] = Field(None, alias="USE_COLORS")
    
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = Field(
        None, alias="LOG_LEVEL"
    )
    
    # Nested overrides (advanced users)
    generator: Optional[UserGeneratorConfig] = None
    renderer: Optional[UserRendererConfig] = None
    
    model_config = SigngridBaseModel.model_config.copy()
    # Ignore unknown keys so config files can carry unrelated settings
    model_config.update({"populate_by_name": True, "extra": "ignore"})

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.upper().strip()
        return v
    
    def to_internal_overrides(self) -> dict:
        """Convert flat UserConfig to nested InternalConfig structure.
        
        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}
        
        generator = {}
        for key in ("rows", "cols", "min_value", "max_value", "seed"):
            value = getattr(self, key)
            if value is not None:
                generator[key] = value
        
        # Explicit nested section wins over flat keys
        if self.generator is not None:
            generator.update(self.generator.model_dump(exclude_none=True))
        
        if generator:
            overrides["generator"] = generator
        
        renderer = {}
        if self.use_colors is not None:
            renderer["use_colors"] = self.use_colors
        if self.renderer is not None:
            renderer.update(self.renderer.model_dump(exclude_none=True))
        
        if renderer:
            overrides["renderer"] = renderer
        
        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}
        
        return overrides
