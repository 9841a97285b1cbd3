"""Unit tests for configuration loading, schemas and adapters.

Tests cover:
- File system and JSON syntax errors
- Schema validation with JSON paths in error details
- Schema version checks
- Conversion of imperial input to millimetres
- Validation policy and rate table overrides
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from shadesail.application.config import (
    ConfigError,
    ShadeSailConfiguration,
    config_to_policy,
    config_to_rate_table,
    config_to_shade,
    load_config,
    load_config_from_dict,
)
from shadesail.application.config.schemas import ShadeConfig
from shadesail.domain.services.geometry import DEFAULT_POLICY
from shadesail.domain.services.pricing import DEFAULT_RATE_TABLE
from shadesail.domain.value_objects import (
    EdgeType,
    FixingType,
    MeasurementSemantics,
    Unit,
)


# =============================================================================
# Test Class: Loader
# =============================================================================


class TestLoadConfig:
    """Tests for load_config error reporting."""

    def test_loads_valid_file(self, write_config, config_data: dict[str, Any]) -> None:
        config = load_config(write_config(config_data))
        assert config.shade.corners == 4
        assert config.shade.currency == "NZD"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_config(tmp_path / "nope.json")
        assert exc_info.value.error_type == "file_not_found"
        assert "nope.json" in str(exc_info.value)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"schema_version": "1.0",\n  "shade": }', encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config(path)
        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 2
        assert "line 2" in error.message

    def test_validation_error_has_json_path(
        self, write_config, config_data: dict[str, Any]
    ) -> None:
        config_data["shade"]["corners"] = 9
        with pytest.raises(ConfigError) as exc_info:
            load_config(write_config(config_data))
        error = exc_info.value
        assert error.error_type == "validation"
        assert error.details[0]["path"] == "shade.corners"
        assert "shade.corners" in error.message
        assert "(got: 9)" in error.message

    def test_anchor_path_includes_index(self, config_data: dict[str, Any]) -> None:
        config_data["shade"]["anchors"] = [{"corner": "A"}, {"corner": "B", "height": -1}]
        with pytest.raises(ConfigError) as exc_info:
            load_config_from_dict(config_data)
        assert exc_info.value.details[0]["path"] == "shade.anchors[1].height"


# =============================================================================
# Test Class: Schemas
# =============================================================================


class TestSchemas:
    """Tests for schema validation rules."""

    def test_defaults(self) -> None:
        shade = ShadeConfig(corners=3)
        assert shade.unit is Unit.METRIC
        assert shade.measurement_semantics is MeasurementSemantics.SPACE_BETWEEN_FIXING_POINTS
        assert shade.fabric == "shadetec320"
        assert shade.edge_type is EdgeType.CABLED
        assert shade.measurements == {}

    def test_extra_fields_forbidden(self) -> None:
        with pytest.raises(ValidationError):
            ShadeConfig(corners=3, colour="green")

    def test_currency_uppercased(self) -> None:
        assert ShadeConfig(corners=3, currency="usd").currency == "USD"

    @pytest.mark.parametrize("value", [0, -5])
    def test_non_positive_length_rejected(self, value: float) -> None:
        with pytest.raises(ValidationError, match="positive"):
            ShadeConfig(corners=3, measurements={"AB": value})

    def test_key_outside_shape_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Invalid measurements key 'AE'"):
            ShadeConfig(corners=4, measurements={"AE": 3000})

    def test_reversed_key_accepted(self) -> None:
        shade = ShadeConfig(corners=3, measurements={"CA": 5000})
        assert shade.measurements == {"CA": 5000}

    def test_anchor_outside_shape_rejected(self) -> None:
        with pytest.raises(ValidationError, match="does not exist"):
            ShadeConfig(corners=3, anchors=[{"corner": "D"}])

    def test_duplicate_anchor_rejected(self) -> None:
        with pytest.raises(ValidationError, match="Duplicate anchor"):
            ShadeConfig(corners=4, anchors=[{"corner": "a"}, {"corner": "A"}])

    def test_newer_minor_version_accepted(self) -> None:
        config = ShadeSailConfiguration(schema_version="1.3", shade={"corners": 3})
        assert config.schema_version == "1.3"

    def test_unsupported_major_version(self) -> None:
        with pytest.raises(ValidationError, match="Unsupported schema version"):
            ShadeSailConfiguration(schema_version="2.0", shade={"corners": 3})

    def test_relative_tolerance_range(self) -> None:
        with pytest.raises(ValidationError):
            ShadeSailConfiguration(
                schema_version="1.0",
                shade={"corners": 3},
                validation={"relative_tolerance": 1.5},
            )


# =============================================================================
# Test Class: Adapters
# =============================================================================


class TestAdapters:
    """Tests for converting schemas to domain objects."""

    def test_metric_shade(self, config_data: dict[str, Any]) -> None:
        shade = config_to_shade(load_config_from_dict(config_data))
        assert shade.corner_count == 4
        assert shade.length("AD") == 3000.0
        assert shade.length("DA") == 3000.0
        assert shade.unit is Unit.METRIC

    def test_imperial_lengths_converted(self) -> None:
        config = load_config_from_dict(
            {
                "schema_version": "1.0",
                "shade": {
                    "corners": 4,
                    "unit": "imperial",
                    "measurements": {"AB": 100, "BC": 50.5},
                    "anchors": [{"corner": "B", "height": 96, "fixing_type": "post"}],
                    "dismissed_suggestions": {"AB": 100},
                },
            }
        )
        shade = config_to_shade(config)
        assert shade.length("AB") == pytest.approx(2540.0)
        assert shade.length("BC") == pytest.approx(1282.7)
        corner = shade.corner(1)
        assert corner.height_mm == pytest.approx(2438.4)
        assert corner.fixing_type is FixingType.POST
        assert shade.dismissed_suggestions == (("AB", pytest.approx(2540.0)),)

    def test_anchor_without_height(self) -> None:
        config = load_config_from_dict(
            {"schema_version": "1.0", "shade": {"corners": 4, "anchors": [{"corner": "C"}]}}
        )
        corner = config_to_shade(config).corner(2)
        assert corner.height_mm is None

    def test_default_policy(self, config_data: dict[str, Any]) -> None:
        assert config_to_policy(load_config_from_dict(config_data)) is DEFAULT_POLICY

    def test_policy_override(self, config_data: dict[str, Any]) -> None:
        config_data["validation"] = {"relative_tolerance": 0.05, "min_tolerance_mm": 25}
        policy = config_to_policy(load_config_from_dict(config_data))
        assert policy.relative_tolerance == 0.05
        assert policy.tolerance_mm(100.0) == 25.0

    def test_default_rates(self, config_data: dict[str, Any]) -> None:
        rates = config_to_rate_table(load_config_from_dict(config_data))
        assert rates is DEFAULT_RATE_TABLE

    def test_rate_overrides_merge(
        self, config_data: dict[str, Any], caplog: pytest.LogCaptureFixture
    ) -> None:
        config_data["rates"] = {
            "fabrics": {
                "budget": {"label": "Budget", "grams_per_m2": 200, "price_per_m2": 20}
            },
            "exchange_rates": {"jpy": 90.0},
            "max_perimeter_mm": 30000,
        }
        with caplog.at_level(logging.WARNING):
            rates = config_to_rate_table(load_config_from_dict(config_data))
        assert rates.fabric("budget").label == "Budget"
        assert rates.fabric("shadetec320") is not None
        assert rates.exchange_rate("JPY") == 90.0
        assert rates.exchange_rate("USD") == DEFAULT_RATE_TABLE.exchange_rate("USD")
        assert rates.max_perimeter_mm == 30000
        assert DEFAULT_RATE_TABLE.fabric("budget") is None
        assert "Rate table overridden" in caplog.text
