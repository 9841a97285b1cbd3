"""Output formatters and exporters for shade sail assessments."""

from __future__ import annotations

import json
from typing import Any

from shadesail.application.dtos import ShadeAssessment
from shadesail.domain.services.geometry import ValidationIssue, ValidationResult
from shadesail.domain.services.pricing import DEFAULT_RATE_TABLE, RateTable
from shadesail.domain.services.units import format_area, format_primary
from shadesail.domain.value_objects import Unit

from .records import build_manufacturing_record, format_edge_size, format_weight


def _issue_line(issue: ValidationIssue, unit: Unit) -> str:
    line = f"[{issue.kind.value}] {issue.message}"
    if issue.suggested_correction_mm is not None and issue.suspect_key:
        suggestion = format_primary(issue.suggested_correction_mm, unit)
        line += f" (suggested {issue.suspect_key}: {suggestion})"
    return line


class ValidationReportFormatter:
    """Formats a ValidationResult as a plain text report."""

    def format(self, result: ValidationResult, unit: Unit = Unit.METRIC) -> str:
        if result.is_valid and not result.issues:
            return "Measurements are consistent."

        lines = ["MEASUREMENT CHECK", "=" * 60]
        if not result.complete:
            lines.append("Status: incomplete")
        elif result.is_valid:
            lines.append("Status: valid (with advisories)")
        else:
            lines.append("Status: invalid")
        lines.append("-" * 60)
        for issue in result.issues:
            lines.append(_issue_line(issue, unit))
        return "\n".join(lines)


class CalculationReportFormatter:
    """Formats derived metrics and price for display."""

    def __init__(self, rates: RateTable = DEFAULT_RATE_TABLE) -> None:
        self.rates = rates

    def format(self, assessment: ShadeAssessment) -> str:
        config = assessment.config
        calc = assessment.calculations
        unit = config.unit
        fabric = self.rates.fabric(config.fabric_id)

        lines = [
            "SHADE SAIL",
            "=" * 60,
            f"{'Corners':<20} {config.corner_count}",
            f"{'Fabric':<20} {fabric.label if fabric else config.fabric_id}",
            f"{'Edge':<20} {config.edge_type.label}",
            f"{'Hardware':<20} "
            f"{'Included' if config.hardware_included else 'Not Included'}",
            "-" * 60,
            f"{'Area':<20} {format_area(calc.area_m2, unit)}",
            f"{'Perimeter':<20} {format_primary(calc.perimeter_mm, unit)}",
            f"{'Weight':<20} {format_weight(calc.total_weight_grams, unit)}",
        ]
        if calc.wire_thickness_mm is not None:
            lines.append(
                f"{'Wire Thickness':<20} {format_edge_size(calc.wire_thickness_mm, unit)}"
            )
        if calc.webbing_width_mm is not None:
            lines.append(
                f"{'Webbing Width':<20} {format_edge_size(calc.webbing_width_mm, unit)}"
            )
        lines.append("-" * 60)
        lines.append(f"{'TOTAL':<20} {calc.formatted_price()}")

        progress = assessment.progress
        if progress.missing_fan_keys:
            lines.append("")
            lines.append(f"Missing for pricing: {', '.join(progress.missing_fan_keys)}")
        elif progress.missing_diagonals:
            lines.append("")
            lines.append(
                f"Required before checkout: {', '.join(progress.missing_diagonals)}"
            )
        elif progress.has_open_advisories:
            lines.append("")
            lines.append("Correct or dismiss the suggested measurements before checkout")
        return "\n".join(lines)


class JsonExporter:
    """Exports an assessment as JSON, including the manufacturing record."""

    def __init__(self, rates: RateTable = DEFAULT_RATE_TABLE) -> None:
        self.rates = rates

    def export(self, assessment: ShadeAssessment) -> str:
        return json.dumps(self.to_dict(assessment), indent=2, ensure_ascii=False)

    def to_dict(self, assessment: ShadeAssessment) -> dict[str, Any]:
        calc = assessment.calculations
        progress = assessment.progress
        return {
            "is_valid": assessment.is_valid,
            "validation": self._validation_dict(assessment.validation),
            "calculations": {
                "area_m2": calc.area_m2,
                "perimeter_mm": calc.perimeter_mm,
                "total_price_minor": calc.total_price_minor,
                "currency": calc.currency,
                "formatted_price": calc.formatted_price(),
                "total_weight_grams": calc.total_weight_grams,
                "wire_thickness_mm": calc.wire_thickness_mm,
                "webbing_width_mm": calc.webbing_width_mm,
            },
            "progress": {
                "missing_edges": list(progress.missing_edges),
                "missing_diagonals": list(progress.missing_diagonals),
                "ready_for_pricing": progress.ready_for_pricing,
                "has_open_advisories": progress.has_open_advisories,
                "ready_for_checkout": progress.ready_for_checkout,
            },
            "record": build_manufacturing_record(
                assessment.config, calc, self.rates
            ).to_dict(),
        }

    def _validation_dict(self, result: ValidationResult) -> dict[str, Any]:
        return {
            "is_valid": result.is_valid,
            "complete": result.complete,
            "issues": [issue_to_dict(issue) for issue in result.issues],
        }


def issue_to_dict(issue: ValidationIssue) -> dict[str, Any]:
    return {
        "kind": issue.kind.value,
        "involved_keys": list(issue.involved_keys),
        "message": issue.message,
        "suggested_correction_mm": issue.suggested_correction_mm,
        "feasible_range_mm": (
            list(issue.feasible_range_mm) if issue.feasible_range_mm else None
        ),
        "suspect_key": issue.suspect_key,
    }
