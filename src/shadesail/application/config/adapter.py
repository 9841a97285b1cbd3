"""Adapters from configuration schemas to domain objects.

The schema layer speaks the customer's unit and plain JSON types; the domain
speaks millimetres, frozen dataclasses and enums. These functions are the
only place the two meet.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from shadesail.application.config.schemas import (
    RatesConfigSchema,
    ShadeSailConfiguration,
)
from shadesail.domain.entities import ShadeConfiguration, normalize_measurements
from shadesail.domain.services.geometry import DEFAULT_POLICY, ValidationPolicy
from shadesail.domain.services.pricing import DEFAULT_RATE_TABLE, FabricSpec, RateTable
from shadesail.domain.services.units import to_canonical_mm
from shadesail.domain.value_objects import Corner, Unit

logger = logging.getLogger(__name__)


def _lengths_to_mm(values: dict[str, float], unit: Unit) -> dict[str, float]:
    converted = {}
    for key, value in values.items():
        mm = to_canonical_mm(value, unit)
        if mm is not None:
            converted[key] = mm
    return converted


def config_to_shade(config: ShadeSailConfiguration) -> ShadeConfiguration:
    """Convert the ``shade`` section into a ShadeConfiguration.

    Measurements, anchor heights and dismissed values are converted from the
    display unit to millimetres.
    """
    shade = config.shade
    corners = tuple(
        Corner(
            index=anchor.index,
            height_mm=to_canonical_mm(anchor.height, shade.unit),
            fixing_type=anchor.fixing_type,
        )
        for anchor in sorted(shade.anchors, key=lambda a: a.index)
    )
    dismissed = normalize_measurements(
        _lengths_to_mm(shade.dismissed_suggestions, shade.unit), shade.corners
    )
    return ShadeConfiguration.build(
        shade.corners,
        _lengths_to_mm(shade.measurements, shade.unit),
        unit=shade.unit,
        measurement_semantics=shade.measurement_semantics,
        fabric_id=shade.fabric,
        edge_type=shade.edge_type,
        currency=shade.currency,
        corners=corners,
        dismissed_suggestions=dismissed,
    )


def config_to_policy(config: ShadeSailConfiguration) -> ValidationPolicy:
    """Validation policy from the optional ``validation`` section."""
    if config.validation is None:
        return DEFAULT_POLICY
    return ValidationPolicy(
        relative_tolerance=config.validation.relative_tolerance,
        min_tolerance_mm=config.validation.min_tolerance_mm,
    )


def config_to_rate_table(
    config: ShadeSailConfiguration,
    base: RateTable = DEFAULT_RATE_TABLE,
) -> RateTable:
    """Merge the optional ``rates`` section onto ``base``."""
    if config.rates is None:
        return base
    return merge_rates(base, config.rates)


def merge_rates(base: RateTable, overrides: RatesConfigSchema) -> RateTable:
    changes: dict = {}
    if overrides.fabrics:
        fabrics = dict(base.fabrics)
        for fabric_id, fabric in overrides.fabrics.items():
            fabrics[fabric_id] = FabricSpec(
                fabric_id=fabric_id,
                label=fabric.label,
                grams_per_m2=fabric.grams_per_m2,
                price_per_m2=fabric.price_per_m2,
                warranty_years=fabric.warranty_years,
            )
        changes["fabrics"] = fabrics
    if overrides.edge_rates_per_metre:
        changes["edge_rates_per_metre"] = {
            **base.edge_rates_per_metre,
            **overrides.edge_rates_per_metre,
        }
    if overrides.hardware_pack_prices:
        changes["hardware_pack_prices"] = {
            **base.hardware_pack_prices,
            **overrides.hardware_pack_prices,
        }
    if overrides.exchange_rates:
        changes["exchange_rates"] = {
            **base.exchange_rates,
            **{code.upper(): rate for code, rate in overrides.exchange_rates.items()},
        }
    if overrides.hardware_allowance_grams is not None:
        changes["hardware_allowance_grams"] = overrides.hardware_allowance_grams
    if overrides.max_perimeter_mm is not None:
        changes["max_perimeter_mm"] = overrides.max_perimeter_mm

    if changes:
        logger.warning(f"Rate table overridden: {', '.join(sorted(changes))}")
    return replace(base, **changes)
