"""Unit tests for manufacturing records and output formatters."""

from __future__ import annotations

import json

import pytest

from shadesail.application.engine import assess
from shadesail.domain.entities import ShadeConfiguration
from shadesail.domain.services.geometry import IssueKind, ValidationIssue, ValidationResult
from shadesail.domain.value_objects import (
    Corner,
    EdgeType,
    FixingType,
    MeasurementSemantics,
    Unit,
)
from shadesail.infrastructure import (
    CalculationReportFormatter,
    JsonExporter,
    ValidationReportFormatter,
    build_manufacturing_record,
    format_edge_size,
    format_weight,
    issue_to_dict,
)


@pytest.fixture
def square_config(square: dict[str, float]) -> ShadeConfiguration:
    return ShadeConfiguration.build(
        4,
        square,
        corners=(Corner(index=0, height_mm=2500.0, fixing_type=FixingType.POST),),
    )


# =============================================================================
# Test Class: Field Formatting
# =============================================================================


class TestFieldFormatting:
    """Tests for edge size and weight strings."""

    @pytest.mark.parametrize(
        ("size", "unit", "expected"),
        [
            (4.0, Unit.METRIC, "4mm"),
            (50.0, Unit.METRIC, "50mm"),
            (4.0, Unit.IMPERIAL, '0.16"'),
            (None, Unit.METRIC, "N/A"),
        ],
    )
    def test_format_edge_size(self, size, unit: Unit, expected: str) -> None:
        assert format_edge_size(size, unit) == expected

    def test_format_weight(self) -> None:
        assert format_weight(3420.0, Unit.METRIC) == "3.4 kg"
        assert format_weight(3420.0, Unit.IMPERIAL) == "7.5 lb"


# =============================================================================
# Test Class: Manufacturing Record
# =============================================================================


class TestManufacturingRecord:
    """Tests for build_manufacturing_record."""

    def test_dual_unit_measurements(self, square_config: ShadeConfiguration) -> None:
        calc = assess(square_config).calculations
        record = build_manufacturing_record(square_config, calc)
        assert record.edge_measurements["AB"] == '3000mm (118.11")'
        assert list(record.edge_measurements) == ["AB", "BC", "CD", "AD"]
        assert record.diagonal_measurements == {
            "AC": '4243mm (167.03")',
            "BD": '4243mm (167.03")',
        }

    def test_product_fields(self, square_config: ShadeConfiguration) -> None:
        calc = assess(square_config).calculations
        record = build_manufacturing_record(square_config, calc)
        assert record.corners == 4
        assert record.original_unit == "metric"
        assert record.hardware_included == "Included"
        assert record.fabric_type == "ShadeTec 320"
        assert record.warranty_years == 10
        assert record.edge_type == "Cabled Edge"
        assert record.wire_thickness == "4mm"
        assert record.webbing_width == "N/A"
        assert record.perimeter == "12000mm"

    def test_anchor_heights_recorded(self, square_config: ShadeConfiguration) -> None:
        calc = assess(square_config).calculations
        record = build_manufacturing_record(square_config, calc)
        assert record.anchor_measurements == {"A": '2500mm (98.43")'}
        assert record.fixing_types == {"A": "post"}

    def test_no_anchors_for_finished_dimensions(
        self, square: dict[str, float]
    ) -> None:
        config = ShadeConfiguration.build(
            4,
            square,
            measurement_semantics=MeasurementSemantics.FINISHED_SAIL_DIMENSIONS,
            corners=(Corner(index=0, height_mm=2500.0),),
        )
        record = build_manufacturing_record(config, assess(config).calculations)
        assert record.anchor_measurements == {}
        assert record.hardware_included == "Not Included"

    def test_no_anchors_for_triangle(self, triangle_345: dict[str, float]) -> None:
        config = ShadeConfiguration.build(
            3, triangle_345, corners=(Corner(index=1, height_mm=2000.0),)
        )
        record = build_manufacturing_record(config, assess(config).calculations)
        assert record.anchor_measurements == {}

    def test_imperial_customer_unit_first(self) -> None:
        inch = 25.4
        config = ShadeConfiguration.build(
            3,
            {"AB": 120 * inch, "BC": 160 * inch, "AC": 200 * inch},
            unit=Unit.IMPERIAL,
            edge_type=EdgeType.WEBBING,
        )
        record = build_manufacturing_record(config, assess(config).calculations)
        assert record.edge_measurements["AB"] == '120.00" (3048mm)'
        assert record.webbing_width == '1.97"'
        assert record.area.endswith("ft²")

    def test_to_dict(self, square_config: ShadeConfiguration) -> None:
        data = build_manufacturing_record(
            square_config, assess(square_config).calculations
        ).to_dict()
        assert data["corners"] == 4
        assert data["edge_measurements"]["BC"] == '3000mm (118.11")'


# =============================================================================
# Test Class: Report Formatters
# =============================================================================


class TestValidationReportFormatter:
    """Tests for the plain text validation report."""

    def test_consistent(self) -> None:
        result = ValidationResult(complete=True)
        assert ValidationReportFormatter().format(result) == "Measurements are consistent."

    def test_invalid_lists_issues(self) -> None:
        issue = ValidationIssue(
            kind=IssueKind.TRIANGLE_INEQUALITY,
            involved_keys=("AB", "BC", "AC"),
            message="Triangle ABC: Diagonal AC (5000mm) is too long.",
            suggested_correction_mm=1500.0,
            suspect_key="AC",
        )
        text = ValidationReportFormatter().format(
            ValidationResult(issues=(issue,), complete=True)
        )
        assert "Status: invalid" in text
        assert "[triangle_inequality] Triangle ABC" in text
        assert "(suggested AC: 1500mm)" in text

    def test_incomplete(self) -> None:
        issue = ValidationIssue(
            kind=IssueKind.INCOMPLETE, involved_keys=("AC",), message="Missing: AC"
        )
        text = ValidationReportFormatter().format(ValidationResult(issues=(issue,)))
        assert "Status: incomplete" in text


class TestCalculationReportFormatter:
    """Tests for the plain text calculation report."""

    def test_priced_sail(self, square_config: ShadeConfiguration) -> None:
        text = CalculationReportFormatter().format(assess(square_config))
        assert "ShadeTec 320" in text
        assert "Wire Thickness" in text
        assert "Webbing Width" not in text
        assert "NZ$" in text

    def test_lists_missing_fan_keys(self, square: dict[str, float]) -> None:
        del square["AC"]
        text = CalculationReportFormatter().format(
            assess(ShadeConfiguration.build(4, square))
        )
        assert "Missing for pricing: AC" in text

    def test_lists_diagonals_for_checkout(self, square: dict[str, float]) -> None:
        del square["BD"]
        text = CalculationReportFormatter().format(
            assess(ShadeConfiguration.build(4, square))
        )
        assert "Required before checkout: BD" in text

    def test_asks_to_resolve_open_typo(
        self, square_with_typo: dict[str, float]
    ) -> None:
        text = CalculationReportFormatter().format(
            assess(ShadeConfiguration.build(4, square_with_typo))
        )
        assert "Correct or dismiss the suggested measurements" in text


class TestJsonExporter:
    """Tests for JSON export."""

    def test_export_round_trips_through_json(
        self, square_config: ShadeConfiguration
    ) -> None:
        data = json.loads(JsonExporter().export(assess(square_config)))
        assert data["is_valid"] is True
        assert data["calculations"]["currency"] == "NZD"
        assert data["progress"]["has_open_advisories"] is False
        assert data["progress"]["ready_for_checkout"] is True
        assert data["record"]["fabric_type"] == "ShadeTec 320"
        assert data["validation"]["issues"] == []

    def test_issue_to_dict(self) -> None:
        issue = ValidationIssue(
            kind=IssueKind.SUSPECTED_TYPO,
            involved_keys=("AC", "BD"),
            message="Diagonal AC doesn't match",
            suggested_correction_mm=4243.0,
            suspect_key="AC",
        )
        assert issue_to_dict(issue) == {
            "kind": "suspected_typo",
            "involved_keys": ["AC", "BD"],
            "message": "Diagonal AC doesn't match",
            "suggested_correction_mm": 4243.0,
            "feasible_range_mm": None,
            "suspect_key": "AC",
        }
