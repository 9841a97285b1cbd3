"""Schema for validation tolerance overrides."""

from pydantic import BaseModel, ConfigDict, Field

from shadesail.domain.services.geometry.constants import (
    CROSS_CHECK_MIN_TOLERANCE_MM,
    CROSS_CHECK_RELATIVE_TOLERANCE,
)


class ValidationConfigSchema(BaseModel):
    """Cross-check tolerances.

    Attributes:
        relative_tolerance: Allowed deviation as a fraction of the expected
            length (0 < x < 1).
        min_tolerance_mm: Absolute floor for the allowed deviation.
    """

    model_config = ConfigDict(extra="forbid")

    relative_tolerance: float = Field(
        default=CROSS_CHECK_RELATIVE_TOLERANCE, gt=0.0, lt=1.0
    )
    min_tolerance_mm: float = Field(default=CROSS_CHECK_MIN_TOLERANCE_MM, ge=0.0)
