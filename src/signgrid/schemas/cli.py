"""CLIConfig: Command-line overrides.

Holds the values parsed by argparse. Highest priority in config resolution.
"""

from typing import Literal, Optional
from signgrid.schemas.base import SigngridBaseModel


class CLIConfig(SigngridBaseModel):
    """Command-line configuration overrides.
    
    Usage
    -----
        cli_cfg = CLIConfig(rows=4, cols=6, use_colors=False)
        internal = resolve_config(param_cfg, user_cfg, cli_cfg)
    """
    
    rows: Optional[int] = None
    cols: Optional[int] = None
    min_value: Optional[int] = None
    max_value: Optional[int] = None
    seed: Optional[int] = None
    use_colors: Optional[bool] = None
    log_level: Optional[Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]] = None
    
    def to_internal_overrides(self) -> dict:
        """Convert CLI config to internal config structure.
        
        Returns
        -------
        dict
            Nested dictionary matching InternalConfig structure
        """
        overrides = {}
        
        generator = {
            key: getattr(self, key)
            for key in ("rows", "cols", "min_value", "max_value", "seed")
            if getattr(self, key) is not None
        }
        if generator:
            overrides["generator"] = generator
        
        if self.use_colors is not None:
            overrides["renderer"] = {"use_colors": self.use_colors}
        
        if self.log_level is not None:
            overrides["logging"] = {"level": self.log_level}
        
        return overrides
