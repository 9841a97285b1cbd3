"""Pydantic schemas for the REST API."""

from shadesail.web.schemas.requests import CalculateRequest, MeasurementValidateRequest
from shadesail.web.schemas.responses import (
    AssessmentSchema,
    CalculationsSchema,
    DiagonalKeysSchema,
    ErrorResponseSchema,
    ProgressSchema,
    ValidationIssueSchema,
    ValidationResultSchema,
)

__all__ = [
    # Requests
    "CalculateRequest",
    "MeasurementValidateRequest",
    # Responses
    "AssessmentSchema",
    "CalculationsSchema",
    "DiagonalKeysSchema",
    "ErrorResponseSchema",
    "ProgressSchema",
    "ValidationIssueSchema",
    "ValidationResultSchema",
]
