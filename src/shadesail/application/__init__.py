"""Application layer - engine entry points and configuration files."""

from .dtos import ShadeAssessment
from .engine import (
    assess,
    compute_shade_calculations,
    convert_unit,
    diagonal_keys_for,
    format_area,
    format_dual_measurement,
    format_measurement,
    validate_geometry,
)
from .progress import MeasurementProgress

__all__ = [
    "MeasurementProgress",
    "ShadeAssessment",
    "assess",
    "compute_shade_calculations",
    "convert_unit",
    "diagonal_keys_for",
    "format_area",
    "format_dual_measurement",
    "format_measurement",
    "validate_geometry",
]
