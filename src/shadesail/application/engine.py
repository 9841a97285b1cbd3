"""Public entry points of the measurement engine.

Every function here is a pure function of its arguments. Geometry work is
memoized on a hashable fingerprint of the measurements, corner count,
policy, display unit and dismissals; cached values are frozen dataclasses,
so a result handed out earlier can never change.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from functools import lru_cache

from shadesail.domain.entities import ShadeConfiguration, normalize_measurements
from shadesail.domain.services import units
from shadesail.domain.services.geometry import (
    DEFAULT_POLICY,
    GeometryReconstructor,
    GeometryValidator,
    MeasurementGraph,
    Reconstruction,
    ValidationPolicy,
    ValidationResult,
    diagonal_keys,
)
from shadesail.domain.services.pricing import (
    DEFAULT_RATE_TABLE,
    DerivedMetricsEngine,
    RateTable,
    ShadeCalculations,
)
from shadesail.domain.value_objects import Unit

from .dtos import ShadeAssessment
from .progress import MeasurementProgress

logger = logging.getLogger(__name__)

Fingerprint = tuple[tuple[str, float], ...]

CACHE_SIZE = 256


@lru_cache(maxsize=CACHE_SIZE)
def _analyze(
    corner_count: int,
    measurements: Fingerprint,
    policy: ValidationPolicy,
    unit: Unit,
    dismissed: Fingerprint,
) -> tuple[Reconstruction, ValidationResult]:
    graph = MeasurementGraph(corner_count, dict(measurements))
    reconstruction = GeometryReconstructor(policy).reconstruct(graph)
    validation = GeometryValidator(policy, unit).validate(graph, dismissed)
    logger.debug(
        f"Analyzed {corner_count}-corner sail: {reconstruction.status.value}, "
        f"{len(validation.issues)} issue(s)"
    )
    return reconstruction, validation


def _fingerprint(measurements: Mapping[str, float], corner_count: int) -> Fingerprint:
    return normalize_measurements(measurements, corner_count)


def clear_cache() -> None:
    """Drop every memoized analysis."""
    _analyze.cache_clear()


def cache_info():
    return _analyze.cache_info()


def validate_geometry(
    measurements: Mapping[str, float],
    corner_count: int,
    policy: ValidationPolicy = DEFAULT_POLICY,
    dismissed: Mapping[str, float] | Iterable[tuple[str, float]] = (),
    unit: Unit = Unit.METRIC,
) -> ValidationResult:
    """Validate a raw ``{label: mm}`` measurement map.

    Args:
        measurements: Lengths in millimetres keyed by corner pair. Malformed
            keys and non-positive values are ignored.
        corner_count: Number of fixing points. Outside 3-6 the result is
            empty and incomplete.
        policy: Cross-check tolerances.
        dismissed: Advisories the customer dismissed, as ``{label: mm}`` or
            ``(label, mm)`` pairs.
        unit: Display unit for messages and suggestion rounding.

    Returns:
        ValidationResult; geometry problems are reported as issues, never
        raised.
    """
    if isinstance(dismissed, Mapping):
        dismissed = dismissed.items()
    _, validation = _analyze(
        corner_count,
        _fingerprint(measurements, corner_count),
        policy,
        unit,
        _fingerprint(dict(dismissed), corner_count),
    )
    return validation


def compute_shade_calculations(
    config: ShadeConfiguration,
    rates: RateTable = DEFAULT_RATE_TABLE,
    policy: ValidationPolicy = DEFAULT_POLICY,
) -> ShadeCalculations:
    """Area, perimeter, weight, edge sizing and price for ``config``.

    Never raises on malformed geometry: incomplete or infeasible shapes give
    zero area and zero price.
    """
    reconstruction, _ = _analyze(
        config.corner_count,
        config.measurements,
        policy,
        config.unit,
        config.dismissed_suggestions,
    )
    graph = MeasurementGraph(config.corner_count, config.measurement_map)
    return DerivedMetricsEngine(rates).calculate(config, graph, reconstruction)


def assess(
    config: ShadeConfiguration,
    rates: RateTable = DEFAULT_RATE_TABLE,
    policy: ValidationPolicy = DEFAULT_POLICY,
) -> ShadeAssessment:
    """Validation, calculations, manufacturing limits and progress in one call."""
    _, validation = _analyze(
        config.corner_count,
        config.measurements,
        policy,
        config.unit,
        config.dismissed_suggestions,
    )
    engine = DerivedMetricsEngine(rates)
    calculations = compute_shade_calculations(config, rates, policy)
    limits = ValidationResult(
        issues=engine.manufacturing_issues(calculations, config), complete=True
    )
    validation = validation.merge(limits)
    graph = MeasurementGraph(config.corner_count, config.measurement_map)
    return ShadeAssessment(
        config=config,
        validation=validation,
        calculations=calculations,
        progress=MeasurementProgress.from_graph(graph, validation),
    )


def diagonal_keys_for(corner_count: int) -> list[str]:
    """All diagonal labels for a shape, empty outside 3-6 corners."""
    return diagonal_keys(corner_count)


def convert_unit(value: float, from_unit: Unit, to_unit: Unit) -> float:
    return units.convert_unit(value, from_unit, to_unit)


def format_measurement(mm: float, unit: Unit) -> str:
    """A length in the customer's unit, e.g. ``3000mm`` or ``118.11"``."""
    return units.format_primary(mm, unit)


def format_dual_measurement(mm: float, unit: Unit = Unit.METRIC) -> str:
    """A length in both units, customer's unit first."""
    return units.format_dual(mm, unit)


def format_area(area_m2: float, unit: Unit) -> str:
    return units.format_area(area_m2, unit)
