"""Unit tests for ShadeConfiguration."""

from __future__ import annotations

import dataclasses

import pytest

from shadesail.domain.entities import ShadeConfiguration, normalize_measurements
from shadesail.domain.value_objects import Corner, FixingType, MeasurementSemantics


class TestNormalizeMeasurements:
    """Tests for normalize_measurements."""

    def test_canonical_sorted_pairs(self) -> None:
        result = normalize_measurements({"CA": 5000, "AB": 3000, "BC": 4000}, 3)
        assert result == (("AB", 3000.0), ("AC", 5000.0), ("BC", 4000.0))

    def test_lowercase_labels_ignored(self) -> None:
        assert normalize_measurements({"ab": 3000, "AB": 2000}, 3) == (("AB", 2000.0),)

    def test_drops_invalid_values_and_keys(self) -> None:
        result = normalize_measurements(
            {"AB": 0, "BC": -1, "CD": float("nan"), "AD": "x", "ZZ": 10, "AC": 100},
            4,
        )
        assert result == (("AC", 100.0),)


class TestShadeConfiguration:
    """Tests for ShadeConfiguration."""

    def test_build_defaults(self) -> None:
        config = ShadeConfiguration.build(3, {"AB": 3000})
        assert config.fabric_id == "shadetec320"
        assert config.currency == "NZD"
        assert config.measurement_semantics is (
            MeasurementSemantics.SPACE_BETWEEN_FIXING_POINTS
        )
        assert config.hardware_included

    def test_is_frozen_and_hashable(self) -> None:
        config = ShadeConfiguration.build(3, {"AB": 3000})
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.corner_count = 4  # type: ignore[misc]
        assert hash(config) == hash(ShadeConfiguration.build(3, {"AB": 3000}))

    def test_equal_regardless_of_key_spelling(self) -> None:
        a = ShadeConfiguration.build(3, {"CA": 5000, "AB": 3000})
        b = ShadeConfiguration.build(3, {"AB": 3000, "AC": 5000})
        assert a == b

    def test_accepts_raw_mapping(self) -> None:
        config = ShadeConfiguration(
            corner_count=3,
            measurements={"CA": 5000.0, "AB": 3000.0, "BC": -1.0},
            dismissed_suggestions={"CA": 5000.0},
        )
        assert config.measurements == (("AB", 3000.0), ("AC", 5000.0))
        assert config.dismissed_suggestions == (("AC", 5000.0),)
        assert config == ShadeConfiguration.build(
            3, {"AB": 3000, "AC": 5000}, dismissed_suggestions=(("AC", 5000.0),)
        )
        hash(config)

    def test_length_lookup(self) -> None:
        config = ShadeConfiguration.build(3, {"AB": 3000})
        assert config.length("BA") == 3000
        assert config.length("BC") is None
        assert config.length("nonsense") is None

    def test_with_measurement_returns_new_instance(self) -> None:
        config = ShadeConfiguration.build(3)
        updated = config.with_measurement("AB", 2500.0)
        assert config.measurements == ()
        assert updated.length("AB") == 2500.0

    def test_with_measurement_none_clears(self) -> None:
        config = ShadeConfiguration.build(3, {"AB": 3000})
        assert config.without_measurement("AB").measurements == ()

    def test_with_measurement_ignores_bad_key(self) -> None:
        config = ShadeConfiguration.build(3, {"AB": 3000})
        assert config.with_measurement("AD", 1.0) is config

    def test_with_corner_count_resets(self) -> None:
        config = ShadeConfiguration.build(4, {"AB": 3000, "AC": 4000})
        config = config.with_corner(Corner(index=1, height_mm=2000.0))
        config = config.dismiss_suggestion("AC")
        switched = config.with_corner_count(5)
        assert switched.corner_count == 5
        assert switched.measurements == ()
        assert switched.corners == ()
        assert switched.dismissed_suggestions == ()

    def test_with_corner_replaces_existing(self) -> None:
        config = ShadeConfiguration.build(4)
        config = config.with_corner(Corner(index=2, height_mm=2000.0))
        config = config.with_corner(
            Corner(index=2, height_mm=2500.0, fixing_type=FixingType.BUILDING)
        )
        assert len(config.corners) == 1
        assert config.corner(2).height_mm == 2500.0
        assert config.corner(0) == Corner(index=0)

    def test_dismiss_suggestion_records_value(self) -> None:
        config = ShadeConfiguration.build(4, {"AC": 424})
        dismissed = config.dismiss_suggestion("CA")
        assert dismissed.dismissed_suggestions == (("AC", 424.0),)
        assert dismissed.dismiss_suggestion("AC") is dismissed

    def test_dismiss_missing_measurement_is_noop(self) -> None:
        config = ShadeConfiguration.build(4)
        assert config.dismiss_suggestion("AC") is config

    def test_apply_suggestion(self) -> None:
        config = ShadeConfiguration.build(4, {"AC": 424})
        assert config.apply_suggestion("AC", 4243.0).length("AC") == 4243.0
