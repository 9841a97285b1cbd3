"""Root configuration schema.

This module contains ShadeSailConfiguration, the top-level structure of a
shade sail configuration file.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import SUPPORTED_VERSIONS
from .rates_schema import RatesConfigSchema
from .shade_schema import ShadeConfig
from .validation_schema import ValidationConfigSchema


class ShadeSailConfiguration(BaseModel):
    """Root configuration model.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0")
        shade: The sail and its product options
        validation: Optional cross-check tolerance overrides
        rates: Optional rate table overrides

    Example:
        >>> config = ShadeSailConfiguration(
        ...     schema_version="1.0",
        ...     shade=ShadeConfig(corners=3, measurements={"AB": 3000}),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(..., pattern=r"^\d+\.\d+$")
    shade: ShadeConfig
    validation: ValidationConfigSchema | None = Field(
        default=None, description="Validation tolerances (optional)"
    )
    rates: RatesConfigSchema | None = Field(
        default=None, description="Rate table overrides (optional)"
    )

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Accept supported versions and newer minors of a supported major."""
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )
