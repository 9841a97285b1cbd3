"""Domain entities for shade sail configuration."""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, replace

from .value_objects import (
    Corner,
    EdgeType,
    MeasurementKey,
    MeasurementSemantics,
    Unit,
)

logger = logging.getLogger(__name__)

DEFAULT_FABRIC_ID = "shadetec320"
DEFAULT_CURRENCY = "NZD"


def normalize_measurements(
    measurements: Mapping[str, float], corner_count: int
) -> tuple[tuple[str, float], ...]:
    """Canonicalize a raw measurement map into a sorted tuple of pairs.

    Keys are rewritten alphabetically ("CA" -> "AC"). Malformed keys and
    values that are not finite positive numbers are dropped: they mean
    "not entered yet".
    """
    cleaned: dict[str, float] = {}
    for raw_key, raw_value in measurements.items():
        key = MeasurementKey.parse(raw_key, corner_count)
        if key is None:
            logger.debug(f"Ignoring malformed measurement key {raw_key!r}")
            continue
        try:
            value = float(raw_value)
        except (TypeError, ValueError):
            continue
        if not math.isfinite(value) or value <= 0:
            continue
        cleaned[key.label] = value
    return tuple(sorted(cleaned.items()))


@dataclass(frozen=True)
class ShadeConfiguration:
    """Immutable snapshot of everything the customer has entered.

    The UI owns the live configuration and builds a new snapshot after every
    change; the engine never mutates one. Measurements are stored as a sorted
    tuple of ``(label, millimetres)`` pairs so a snapshot is hashable and two
    snapshots with the same content compare equal.

    Attributes:
        corner_count: Number of fixing points. Values outside 3-6 describe a
            transient UI state and produce empty results rather than errors.
        measurements: Canonical ``(label, mm)`` pairs, see ``build``.
        unit: Display unit for formatting and suggestion rounding.
        measurement_semantics: Whether lengths are the space between fixing
            points or the finished sail.
        fabric_id: Key into the rate table's fabric catalog.
        edge_type: Cabled or webbing-reinforced edge.
        currency: ISO currency code for the quoted price.
        corners: Optional per-corner installation details.
        dismissed_suggestions: ``(label, mm)`` pairs whose typo advisory the
            customer dismissed while the measurement held that value.
    """

    corner_count: int
    measurements: tuple[tuple[str, float], ...] = ()
    unit: Unit = Unit.METRIC
    measurement_semantics: MeasurementSemantics = (
        MeasurementSemantics.SPACE_BETWEEN_FIXING_POINTS
    )
    fabric_id: str = DEFAULT_FABRIC_ID
    edge_type: EdgeType = EdgeType.CABLED
    currency: str = DEFAULT_CURRENCY
    corners: tuple[Corner, ...] = ()
    dismissed_suggestions: tuple[tuple[str, float], ...] = ()

    def __post_init__(self) -> None:
        # Raw {label: mm} maps are accepted and stored canonically
        for name in ("measurements", "dismissed_suggestions"):
            value = getattr(self, name)
            if isinstance(value, Mapping):
                object.__setattr__(
                    self, name, normalize_measurements(value, self.corner_count)
                )

    @classmethod
    def build(
        cls,
        corner_count: int,
        measurements: Mapping[str, float] | None = None,
        **kwargs,
    ) -> ShadeConfiguration:
        """Create a configuration from a raw ``{label: mm}`` mapping."""
        return cls(
            corner_count=corner_count,
            measurements=normalize_measurements(measurements or {}, corner_count),
            **kwargs,
        )

    @property
    def measurement_map(self) -> dict[str, float]:
        """Measurements as a fresh ``{label: mm}`` dict."""
        return dict(self.measurements)

    def length(self, label: str) -> float | None:
        key = MeasurementKey.parse(label, self.corner_count)
        if key is None:
            return None
        return self.measurement_map.get(key.label)

    @property
    def hardware_included(self) -> bool:
        return self.measurement_semantics.includes_hardware

    def corner(self, index: int) -> Corner:
        """Installation details for a corner, blank if none were given."""
        for corner in self.corners:
            if corner.index == index:
                return corner
        return Corner(index=index)

    def with_corner_count(self, corner_count: int) -> ShadeConfiguration:
        """Switch shape. Measurements, corners and dismissals are reset."""
        return replace(
            self,
            corner_count=corner_count,
            measurements=(),
            corners=(),
            dismissed_suggestions=(),
        )

    def with_measurement(self, label: str, value_mm: float | None) -> ShadeConfiguration:
        """Set (or clear, when ``value_mm`` is None) a single measurement."""
        updated = self.measurement_map
        key = MeasurementKey.parse(label, self.corner_count)
        if key is None:
            return self
        if value_mm is None:
            updated.pop(key.label, None)
        else:
            updated[key.label] = value_mm
        return replace(
            self, measurements=normalize_measurements(updated, self.corner_count)
        )

    def without_measurement(self, label: str) -> ShadeConfiguration:
        return self.with_measurement(label, None)

    def with_corner(self, corner: Corner) -> ShadeConfiguration:
        others = tuple(c for c in self.corners if c.index != corner.index)
        return replace(
            self, corners=tuple(sorted(others + (corner,), key=lambda c: c.index))
        )

    def dismiss_suggestion(self, label: str) -> ShadeConfiguration:
        """Remember that the advisory for ``label`` was dismissed.

        The dismissal is tied to the current value, so editing the
        measurement again re-enables the advisory.
        """
        value = self.length(label)
        key = MeasurementKey.parse(label, self.corner_count)
        if value is None or key is None:
            return self
        entry = (key.label, value)
        if entry in self.dismissed_suggestions:
            return self
        return replace(
            self,
            dismissed_suggestions=tuple(sorted(self.dismissed_suggestions + (entry,))),
        )

    def apply_suggestion(self, label: str, value_mm: float) -> ShadeConfiguration:
        """Accept a suggested correction for ``label``."""
        return self.with_measurement(label, value_mm)
