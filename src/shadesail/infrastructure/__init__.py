"""Infrastructure layer - report formatting and manufacturing records."""

from .formatters import (
    CalculationReportFormatter,
    JsonExporter,
    ValidationReportFormatter,
    issue_to_dict,
)
from .records import (
    ManufacturingRecord,
    build_manufacturing_record,
    format_edge_size,
    format_weight,
)

__all__ = [
    "CalculationReportFormatter",
    "JsonExporter",
    "ManufacturingRecord",
    "ValidationReportFormatter",
    "build_manufacturing_record",
    "format_edge_size",
    "format_weight",
    "issue_to_dict",
]
