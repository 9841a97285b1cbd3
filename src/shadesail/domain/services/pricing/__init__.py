"""Pricing and manufacturing metrics for shade sails.

This package provides:
- The default rate table (fabrics, edge rates, hardware packs, currencies)
- Edge sizing bands for wire thickness and webbing width
- DerivedMetricsEngine for area, perimeter, weight and price
"""

from __future__ import annotations

from .constants import (
    BASE_CURRENCY,
    CURRENCY_SYMBOLS,
    MAX_PERIMETER_MM,
)
from .metrics_engine import DerivedMetricsEngine
from .models import (
    DEFAULT_RATE_TABLE,
    FabricSpec,
    RateTable,
    ShadeCalculations,
    format_currency,
)

__all__ = [
    "BASE_CURRENCY",
    "CURRENCY_SYMBOLS",
    "DEFAULT_RATE_TABLE",
    "DerivedMetricsEngine",
    "FabricSpec",
    "MAX_PERIMETER_MM",
    "RateTable",
    "ShadeCalculations",
    "format_currency",
]
