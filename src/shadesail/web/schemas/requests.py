"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from shadesail.domain.services.geometry.constants import (
    CROSS_CHECK_MIN_TOLERANCE_MM,
    CROSS_CHECK_RELATIVE_TOLERANCE,
)
from shadesail.domain.value_objects import Unit


class MeasurementValidateRequest(BaseModel):
    """Request for validating a raw measurement set.

    Lengths are millimetres. Unknown keys and non-positive values are
    ignored rather than rejected, matching how the storefront sends fields
    the customer has not filled in yet.
    """

    corners: int = Field(..., description="Number of corners (3 to 6)")
    measurements: dict[str, float] = Field(
        default_factory=dict, description="Lengths in mm keyed by corner pair"
    )
    unit: Unit = Field(default=Unit.METRIC, description="Display unit for messages")
    dismissed_suggestions: dict[str, float] = Field(
        default_factory=dict, description="Dismissed advisories with their values"
    )
    relative_tolerance: float = Field(
        default=CROSS_CHECK_RELATIVE_TOLERANCE, gt=0.0, lt=1.0
    )
    min_tolerance_mm: float = Field(default=CROSS_CHECK_MIN_TOLERANCE_MM, ge=0.0)


class CalculateRequest(BaseModel):
    """Request for a full assessment of a configuration."""

    config: dict[str, Any] = Field(..., description="Shade sail configuration JSON")
