"""Domain services for shade sail measurement and pricing.

This package provides:
- Unit conversion between millimetres and display units
- Geometry reconstruction and validation
- Derived manufacturing metrics and pricing
"""

from .units import (
    convert_unit,
    format_area,
    format_dual,
    format_primary,
    round_to_display_precision,
    to_canonical_mm,
    to_display,
)
from .geometry import (
    GeometryReconstructor,
    GeometryValidator,
    MeasurementGraph,
    ValidationPolicy,
    ValidationResult,
)
from .pricing import DerivedMetricsEngine, RateTable, ShadeCalculations

__all__ = [
    "DerivedMetricsEngine",
    "GeometryReconstructor",
    "GeometryValidator",
    "MeasurementGraph",
    "RateTable",
    "ShadeCalculations",
    "ValidationPolicy",
    "ValidationResult",
    "convert_unit",
    "format_area",
    "format_dual",
    "format_primary",
    "round_to_display_precision",
    "to_canonical_mm",
    "to_display",
]
