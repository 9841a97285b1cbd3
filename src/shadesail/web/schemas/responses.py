"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class ValidationIssueSchema(BaseModel):
    """A single validation finding."""

    kind: str = Field(..., description="Issue category")
    involved_keys: list[str] = Field(..., description="Measurements involved")
    message: str = Field(..., description="Human-readable description")
    suggested_correction_mm: float | None = Field(
        default=None, description="Suggested value for the suspect measurement"
    )
    feasible_range_mm: list[float] | None = Field(
        default=None, description="Open interval the suspect must lie in"
    )
    suspect_key: str | None = Field(
        default=None, description="Measurement most likely at fault"
    )


class ValidationResultSchema(BaseModel):
    """Response for measurement validation."""

    is_valid: bool = Field(..., description="Complete and free of blocking issues")
    complete: bool = Field(..., description="All required measurements present")
    issues: list[ValidationIssueSchema] = Field(
        default_factory=list, description="Findings in detection order"
    )


class CalculationsSchema(BaseModel):
    """Derived metrics and price."""

    area_m2: float
    perimeter_mm: float
    total_price_minor: int
    currency: str
    formatted_price: str
    total_weight_grams: float
    wire_thickness_mm: float | None = None
    webbing_width_mm: float | None = None


class ProgressSchema(BaseModel):
    """What the customer still has to enter."""

    missing_edges: list[str]
    missing_diagonals: list[str]
    ready_for_pricing: bool
    has_open_advisories: bool
    ready_for_checkout: bool


class AssessmentSchema(BaseModel):
    """Response for a full configuration assessment."""

    is_valid: bool
    validation: ValidationResultSchema
    calculations: CalculationsSchema
    progress: ProgressSchema
    record: dict[str, Any] = Field(
        default_factory=dict, description="Dual-unit manufacturing record"
    )


class DiagonalKeysSchema(BaseModel):
    """Response listing the diagonals of a shape."""

    corners: int
    diagonals: list[str]


class ErrorResponseSchema(BaseModel):
    """Error response."""

    error: str
    error_type: str
    details: Any = None
