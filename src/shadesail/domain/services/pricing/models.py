"""Data models for derived manufacturing metrics and pricing."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from shadesail.domain.value_objects import EdgeType

from .constants import (
    BASE_CURRENCY,
    CURRENCY_SYMBOLS,
    EDGE_RATES_PER_METRE,
    EXCHANGE_RATES,
    FABRICS,
    HARDWARE_ALLOWANCE_GRAMS,
    HARDWARE_PACK_PRICES,
    MAX_PERIMETER_MM,
    MINOR_UNIT_EXPONENT,
    WEBBING_WIDTH_BANDS,
    WEBBING_WIDTH_FALLBACK_MM,
    WIRE_THICKNESS_BANDS,
    WIRE_THICKNESS_FALLBACK_MM,
)


@dataclass(frozen=True)
class FabricSpec:
    """A fabric the sail can be made from.

    Attributes:
        fabric_id: Catalog key, e.g. "shadetec320".
        label: Display name.
        grams_per_m2: Areal density.
        price_per_m2: Price per square metre in the base currency.
        warranty_years: Manufacturer warranty.
    """

    fabric_id: str
    label: str
    grams_per_m2: float
    price_per_m2: float
    warranty_years: int = 0

    def __post_init__(self) -> None:
        if self.grams_per_m2 <= 0:
            raise ValueError("grams_per_m2 must be positive")
        if self.price_per_m2 < 0:
            raise ValueError("price_per_m2 cannot be negative")


def _default_fabrics() -> dict[str, FabricSpec]:
    return {
        fabric_id: FabricSpec(fabric_id, label, gsm, price, warranty)
        for fabric_id, (label, gsm, price, warranty) in FABRICS.items()
    }


def _lookup_band(
    bands: tuple[tuple[float, float, float], ...],
    fallback: float,
    perimeter_mm: float,
    area_m2: float,
) -> float:
    for max_perimeter, max_area, size in bands:
        if perimeter_mm <= max_perimeter and area_m2 <= max_area:
            return size
    return fallback


@dataclass(frozen=True)
class RateTable:
    """Injected pricing and sizing data.

    Defaults mirror the production storefront. Tests and configuration files
    can supply their own table without touching the engine.

    Attributes:
        fabrics: Fabric catalog by id.
        edge_rates_per_metre: Edge finish price per metre, base currency.
        hardware_pack_prices: Hardware pack price by corner count.
        hardware_allowance_grams: Weight added when hardware is included.
        wire_thickness_bands: (max perimeter mm, max area m², thickness mm).
        wire_thickness_fallback_mm: Thickness beyond the last band.
        webbing_width_bands: (max perimeter mm, max area m², width mm).
        webbing_width_fallback_mm: Width beyond the last band.
        exchange_rates: Currency units per base currency unit.
        base_currency: Currency all prices are defined in.
        minor_unit_exponent: Decimal places of the minor unit.
        max_perimeter_mm: Largest manufacturable perimeter.
    """

    fabrics: dict[str, FabricSpec] = field(default_factory=_default_fabrics)
    edge_rates_per_metre: dict[EdgeType, float] = field(
        default_factory=lambda: dict(EDGE_RATES_PER_METRE)
    )
    hardware_pack_prices: dict[int, float] = field(
        default_factory=lambda: dict(HARDWARE_PACK_PRICES)
    )
    hardware_allowance_grams: float = HARDWARE_ALLOWANCE_GRAMS
    wire_thickness_bands: tuple[tuple[float, float, float], ...] = WIRE_THICKNESS_BANDS
    wire_thickness_fallback_mm: float = WIRE_THICKNESS_FALLBACK_MM
    webbing_width_bands: tuple[tuple[float, float, float], ...] = WEBBING_WIDTH_BANDS
    webbing_width_fallback_mm: float = WEBBING_WIDTH_FALLBACK_MM
    exchange_rates: dict[str, float] = field(default_factory=lambda: dict(EXCHANGE_RATES))
    base_currency: str = BASE_CURRENCY
    minor_unit_exponent: int = MINOR_UNIT_EXPONENT
    max_perimeter_mm: float = MAX_PERIMETER_MM

    def __post_init__(self) -> None:
        if self.base_currency not in self.exchange_rates:
            raise ValueError(f"No exchange rate for base currency {self.base_currency}")
        if any(rate <= 0 for rate in self.exchange_rates.values()):
            raise ValueError("Exchange rates must be positive")
        if self.minor_unit_exponent < 0:
            raise ValueError("minor_unit_exponent cannot be negative")
        if self.max_perimeter_mm <= 0:
            raise ValueError("max_perimeter_mm must be positive")

    def fabric(self, fabric_id: str) -> FabricSpec | None:
        return self.fabrics.get(fabric_id)

    def wire_thickness_mm(self, perimeter_mm: float, area_m2: float) -> float:
        return _lookup_band(
            self.wire_thickness_bands,
            self.wire_thickness_fallback_mm,
            perimeter_mm,
            area_m2,
        )

    def webbing_width_mm(self, perimeter_mm: float, area_m2: float) -> float:
        return _lookup_band(
            self.webbing_width_bands,
            self.webbing_width_fallback_mm,
            perimeter_mm,
            area_m2,
        )

    def exchange_rate(self, currency: str) -> float | None:
        return self.exchange_rates.get(currency.upper())

    def to_minor_units(self, amount: float, currency: str) -> int:
        """Convert a base-currency amount and round half-up to minor units.

        Raises:
            ValueError: If the currency has no exchange rate.
        """
        rate = self.exchange_rate(currency)
        if rate is None:
            raise ValueError(f"Unsupported currency: {currency}")
        scale = Decimal(10) ** self.minor_unit_exponent
        converted = Decimal(str(amount)) * Decimal(str(rate)) * scale
        return int(converted.quantize(Decimal(1), rounding=ROUND_HALF_UP))


DEFAULT_RATE_TABLE = RateTable()


def format_currency(minor_units: int, currency: str, exponent: int = MINOR_UNIT_EXPONENT) -> str:
    """Format a minor-unit amount with its symbol, e.g. ``NZ$1,234.50``."""
    symbol = CURRENCY_SYMBOLS.get(currency.upper(), f"{currency.upper()} ")
    amount = Decimal(minor_units).scaleb(-exponent)
    return f"{symbol}{amount:,.{exponent}f}"


@dataclass(frozen=True)
class ShadeCalculations:
    """Derived quantities for one configuration.

    All fields are 0 (or None for the edge sizes) until the configuration is
    complete and feasible, except the perimeter which only needs the edges.

    Attributes:
        area_m2: Sail area in square metres.
        perimeter_mm: Sum of the edges.
        total_price_minor: Price in minor units (cents) of ``currency``.
        currency: ISO code of the quoted price.
        total_weight_grams: Fabric weight plus any hardware allowance.
        wire_thickness_mm: Cable diameter, cabled edges only.
        webbing_width_mm: Webbing width, webbing edges only.
        minor_unit_exponent: Decimal places of ``total_price_minor``, taken
            from the rate table that produced the quote.
    """

    area_m2: float = 0.0
    perimeter_mm: float = 0.0
    total_price_minor: int = 0
    currency: str = BASE_CURRENCY
    total_weight_grams: float = 0.0
    wire_thickness_mm: float | None = None
    webbing_width_mm: float | None = None
    minor_unit_exponent: int = MINOR_UNIT_EXPONENT

    @property
    def total_price(self) -> float:
        return self.total_price_minor / 10**self.minor_unit_exponent

    @property
    def priced(self) -> bool:
        return self.area_m2 > 0

    def formatted_price(self) -> str:
        return format_currency(
            self.total_price_minor, self.currency, self.minor_unit_exponent
        )
