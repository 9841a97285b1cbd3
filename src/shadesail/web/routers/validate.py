"""Measurement validation endpoints."""

from fastapi import APIRouter

from shadesail.application import diagonal_keys_for, validate_geometry
from shadesail.domain.services.geometry import ValidationPolicy
from shadesail.infrastructure import issue_to_dict
from shadesail.web.schemas.requests import MeasurementValidateRequest
from shadesail.web.schemas.responses import DiagonalKeysSchema, ValidationResultSchema

router = APIRouter(tags=["validate"])


@router.post("/validate", response_model=ValidationResultSchema)
async def validate_measurements(
    request: MeasurementValidateRequest,
) -> ValidationResultSchema:
    """Check a measurement set for feasibility and likely typos.

    Geometry problems come back as issues with a 200 response; only a
    malformed request body is rejected.
    """
    result = validate_geometry(
        request.measurements,
        request.corners,
        policy=ValidationPolicy(
            relative_tolerance=request.relative_tolerance,
            min_tolerance_mm=request.min_tolerance_mm,
        ),
        dismissed=request.dismissed_suggestions,
        unit=request.unit,
    )
    return ValidationResultSchema(
        is_valid=result.is_valid,
        complete=result.complete,
        issues=[issue_to_dict(issue) for issue in result.issues],
    )


@router.get("/diagonals/{corner_count}", response_model=DiagonalKeysSchema)
async def list_diagonals(corner_count: int) -> DiagonalKeysSchema:
    """Diagonal labels for a shape; empty outside 3-6 corners."""
    return DiagonalKeysSchema(
        corners=corner_count, diagonals=diagonal_keys_for(corner_count)
    )
