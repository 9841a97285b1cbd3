"""Schema for rate table overrides.

Every field is optional; whatever is given is merged onto the default rate
table, so a file only needs to name the prices it changes.
"""

from pydantic import BaseModel, ConfigDict, Field

from .base import EdgeType


class FabricConfigSchema(BaseModel):
    """A fabric catalog entry."""

    model_config = ConfigDict(extra="forbid")

    label: str = Field(..., min_length=1)
    grams_per_m2: float = Field(..., gt=0.0)
    price_per_m2: float = Field(..., ge=0.0)
    warranty_years: int = Field(default=0, ge=0)


class RatesConfigSchema(BaseModel):
    """Overrides for pricing and sizing data.

    Attributes:
        fabrics: Fabric entries to add or replace, by id.
        edge_rates_per_metre: Edge finish price per metre, base currency.
        hardware_pack_prices: Hardware pack price by corner count.
        hardware_allowance_grams: Weight added when hardware is included.
        exchange_rates: Currency units per base currency unit.
        max_perimeter_mm: Largest manufacturable perimeter.
    """

    model_config = ConfigDict(extra="forbid")

    fabrics: dict[str, FabricConfigSchema] | None = None
    edge_rates_per_metre: dict[EdgeType, float] | None = None
    hardware_pack_prices: dict[int, float] | None = None
    hardware_allowance_grams: float | None = Field(default=None, ge=0.0)
    exchange_rates: dict[str, float] | None = None
    max_perimeter_mm: float | None = Field(default=None, gt=0.0)
