"""Base Pydantic model with strict defaults for signgrid configs.

All signgrid config schemas inherit from this base so parameter, user,
CLI and internal configs validate the same way.
"""

from pydantic import BaseModel, ConfigDict


class SigngridBaseModel(BaseModel):
    """Base model for all signgrid configuration schemas.
    
    Enforces strict validation:
    - No extra fields allowed
    - Validates assignments after initialization
    - Strips whitespace from strings
    """
    
    model_config = ConfigDict(
        extra='forbid',           # Reject unknown fields
        validate_assignment=True, # Validate on field mutation
        use_enum_values=True,     # Convert enums to values
        str_strip_whitespace=True,# Strip whitespace from strings
    )
