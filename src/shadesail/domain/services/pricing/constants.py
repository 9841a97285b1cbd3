"""Manufacturing and pricing constants.

This module provides:
- The fabric catalog (areal density, price, warranty)
- Edge finish rates and corner hardware pack prices
- Wire thickness and webbing width bands
- Exchange rates and display symbols for supported currencies
- The manufacturable perimeter limit
"""

from __future__ import annotations

from shadesail.domain.value_objects import EdgeType

BASE_CURRENCY = "NZD"


# Fabric catalog
# Key: fabric id
# Value: (label, areal density in g/m², price per m² in base currency, warranty years)
FABRICS: dict[str, tuple[str, float, float, int]] = {
    "shadetec320": ("ShadeTec 320", 320.0, 32.00, 10),
    "monotec370": ("Monotec 370", 370.0, 38.00, 15),
    "extrablock330": ("Extrablock 330", 330.0, 45.00, 10),
}


# Edge finish price per metre of perimeter, base currency
EDGE_RATES_PER_METRE: dict[EdgeType, float] = {
    EdgeType.CABLED: 12.50,
    EdgeType.WEBBING: 9.00,
}

# Corner hardware pack price by corner count, base currency.
# Only charged when measurements are the space between fixing points.
HARDWARE_PACK_PRICES: dict[int, float] = {
    3: 89.00,
    4: 119.00,
    5: 149.00,
    6: 179.00,
}

# Shipping weight of a hardware pack (turnbuckles, shackles, pad eyes)
HARDWARE_ALLOWANCE_GRAMS: float = 1500.0


# Edge sizing bands, checked in order
# Value: (max perimeter in mm, max area in m², size in mm)
# A sail exceeding every band gets the fallback size.
WIRE_THICKNESS_BANDS: tuple[tuple[float, float, float], ...] = (
    (15000.0, 15.0, 4.0),
    (25000.0, 35.0, 5.0),
)
WIRE_THICKNESS_FALLBACK_MM: float = 6.0

WEBBING_WIDTH_BANDS: tuple[tuple[float, float, float], ...] = (
    (15000.0, 15.0, 50.0),
)
WEBBING_WIDTH_FALLBACK_MM: float = 75.0


# Units of currency per one unit of base currency
EXCHANGE_RATES: dict[str, float] = {
    "NZD": 1.0,
    "AUD": 0.92,
    "USD": 0.60,
    "GBP": 0.48,
    "EUR": 0.55,
    "CAD": 0.82,
}

CURRENCY_SYMBOLS: dict[str, str] = {
    "NZD": "NZ$",
    "USD": "US$",
    "AUD": "AU$",
    "GBP": "£",
    "EUR": "€",
    "CAD": "CA$",
}

# Decimal places of each currency's minor unit
MINOR_UNIT_EXPONENT: int = 2


# Largest perimeter the factory can make, in mm
MAX_PERIMETER_MM: float = 50000.0
