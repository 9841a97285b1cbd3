"""Derived manufacturing metrics and pricing.

Turns a reconstruction plus the configuration's options into area,
perimeter, weight, edge hardware sizing and price. Everything is derived
from the reconstruction, never from the UI's canvas positions.
"""

from __future__ import annotations

import logging

from shadesail.domain.entities import ShadeConfiguration
from shadesail.domain.services.geometry import (
    IssueKind,
    MeasurementGraph,
    Reconstruction,
    ValidationIssue,
    edge_keys,
)
from shadesail.domain.services.units import format_primary
from shadesail.domain.value_objects import EdgeType

from .models import DEFAULT_RATE_TABLE, RateTable, ShadeCalculations

logger = logging.getLogger(__name__)

MM2_PER_M2 = 1_000_000


class DerivedMetricsEngine:
    """Computes ShadeCalculations from a reconstruction.

    Args:
        rates: Pricing and sizing data.
    """

    def __init__(self, rates: RateTable = DEFAULT_RATE_TABLE) -> None:
        self.rates = rates

    def perimeter_mm(self, graph: MeasurementGraph) -> float:
        """Sum of the edges, or 0 while any edge is missing."""
        edges = edge_keys(graph.corner_count)
        if not edges or graph.missing(edges):
            return 0.0
        return sum(graph.length_of(label) for label in edges)

    def area_m2(self, reconstruction: Reconstruction) -> float:
        return reconstruction.area_mm2 / MM2_PER_M2

    def calculate(
        self,
        config: ShadeConfiguration,
        graph: MeasurementGraph,
        reconstruction: Reconstruction,
    ) -> ShadeCalculations:
        """Derive every quantity for ``config``.

        Area, weight, sizing and price stay at zero until the reconstruction
        is complete; the perimeter is reported as soon as every edge exists.
        """
        perimeter = self.perimeter_mm(graph)
        area = self.area_m2(reconstruction)
        currency = config.currency.upper()

        if area <= 0:
            return ShadeCalculations(
                perimeter_mm=perimeter,
                currency=currency,
                minor_unit_exponent=self.rates.minor_unit_exponent,
            )

        fabric = self.rates.fabric(config.fabric_id)
        if fabric is None:
            logger.warning(f"Unknown fabric {config.fabric_id!r}, pricing skipped")
            return ShadeCalculations(
                area_m2=area,
                perimeter_mm=perimeter,
                currency=currency,
                minor_unit_exponent=self.rates.minor_unit_exponent,
            )

        hardware = config.hardware_included
        weight = area * fabric.grams_per_m2
        if hardware:
            weight += self.rates.hardware_allowance_grams

        wire = webbing = None
        if config.edge_type is EdgeType.WEBBING:
            webbing = self.rates.webbing_width_mm(perimeter, area)
        else:
            wire = self.rates.wire_thickness_mm(perimeter, area)

        base_price = fabric.price_per_m2 * area
        base_price += self.rates.edge_rates_per_metre.get(config.edge_type, 0.0) * (
            perimeter / 1000
        )
        if hardware:
            base_price += self.rates.hardware_pack_prices.get(graph.corner_count, 0.0)

        if self.rates.exchange_rate(currency) is None:
            logger.warning(f"Unsupported currency {currency!r}, quoting in base currency")
            currency = self.rates.base_currency

        return ShadeCalculations(
            area_m2=area,
            perimeter_mm=perimeter,
            total_price_minor=self.rates.to_minor_units(base_price, currency),
            currency=currency,
            total_weight_grams=weight,
            wire_thickness_mm=wire,
            webbing_width_mm=webbing,
            minor_unit_exponent=self.rates.minor_unit_exponent,
        )

    def manufacturing_issues(
        self, calculations: ShadeCalculations, config: ShadeConfiguration
    ) -> tuple[ValidationIssue, ...]:
        """Blocking issues for sails the factory cannot make."""
        if calculations.perimeter_mm <= self.rates.max_perimeter_mm:
            return ()
        limit = format_primary(self.rates.max_perimeter_mm, config.unit)
        perimeter = format_primary(calculations.perimeter_mm, config.unit)
        return (
            ValidationIssue(
                kind=IssueKind.PERIMETER_TOO_LARGE,
                involved_keys=tuple(edge_keys(config.corner_count)),
                message=(
                    f"Shade sail too large: perimeter {perimeter} exceeds the "
                    f"{limit} manufacturing limit"
                ),
            ),
        )
