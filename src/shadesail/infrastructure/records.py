"""Manufacturing records for order fulfilment.

The factory works in millimetres but customers may have measured in
inches, so every length on a record is written in both units, the
customer's unit first.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any

from shadesail.domain.entities import ShadeConfiguration
from shadesail.domain.services.geometry import diagonal_keys, edge_keys
from shadesail.domain.services.pricing import (
    DEFAULT_RATE_TABLE,
    RateTable,
    ShadeCalculations,
)
from shadesail.domain.services.units import (
    MM_PER_INCH,
    format_area,
    format_dual,
    format_primary,
)
from shadesail.domain.value_objects import Unit

GRAMS_PER_POUND = 453.592


def format_edge_size(size_mm: float | None, unit: Unit) -> str:
    """Wire thickness or webbing width, ``N/A`` when not applicable."""
    if size_mm is None:
        return "N/A"
    if unit is Unit.IMPERIAL:
        return f'{size_mm / MM_PER_INCH:.2f}"'
    return f"{size_mm:g}mm"


def format_weight(grams: float, unit: Unit) -> str:
    if unit is Unit.IMPERIAL:
        return f"{grams / GRAMS_PER_POUND:.1f} lb"
    return f"{grams / 1000:.1f} kg"


@dataclass(frozen=True)
class ManufacturingRecord:
    """Everything the factory needs to make one sail.

    Attributes:
        corners: Number of fixing points.
        original_unit: Unit the customer measured in.
        hardware_included: "Included" or "Not Included".
        fabric_type: Fabric label.
        warranty_years: Fabric warranty.
        edge_type: "Cabled Edge" or "Webbing Reinforced".
        wire_thickness: Cable size in the customer's unit, or "N/A".
        webbing_width: Webbing size in the customer's unit, or "N/A".
        area: Formatted area.
        perimeter: Formatted perimeter.
        weight: Formatted shipping weight.
        edge_measurements: Dual-unit edge lengths by label.
        diagonal_measurements: Dual-unit diagonal lengths by label.
        anchor_measurements: Dual-unit anchor heights by corner letter.
        fixing_types: Fixing type by corner letter.
    """

    corners: int
    original_unit: str
    hardware_included: str
    fabric_type: str
    warranty_years: int
    edge_type: str
    wire_thickness: str
    webbing_width: str
    area: str
    perimeter: str
    weight: str
    edge_measurements: dict[str, str] = field(default_factory=dict)
    diagonal_measurements: dict[str, str] = field(default_factory=dict)
    anchor_measurements: dict[str, str] = field(default_factory=dict)
    fixing_types: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def build_manufacturing_record(
    config: ShadeConfiguration,
    calculations: ShadeCalculations,
    rates: RateTable = DEFAULT_RATE_TABLE,
) -> ManufacturingRecord:
    """Assemble the dual-unit record for ``config``.

    Anchor heights are only recorded for sails with four or more corners
    measured as the space between fixing points; for anything else the
    factory makes the sail flat to the given lengths.
    """
    lengths = config.measurement_map
    unit = config.unit

    edges = {
        label: format_dual(lengths[label], unit)
        for label in edge_keys(config.corner_count)
        if label in lengths
    }
    diagonals = {
        label: format_dual(lengths[label], unit)
        for label in diagonal_keys(config.corner_count)
        if label in lengths
    }

    anchors: dict[str, str] = {}
    fixing_types: dict[str, str] = {}
    if config.corner_count > 3 and config.hardware_included:
        for corner in config.corners:
            if corner.height_mm:
                anchors[corner.label] = format_dual(corner.height_mm, unit)
            if corner.fixing_type is not None:
                fixing_types[corner.label] = corner.fixing_type.value

    fabric = rates.fabric(config.fabric_id)
    return ManufacturingRecord(
        corners=config.corner_count,
        original_unit=unit.value,
        hardware_included="Included" if config.hardware_included else "Not Included",
        fabric_type=fabric.label if fabric else config.fabric_id,
        warranty_years=fabric.warranty_years if fabric else 0,
        edge_type=config.edge_type.label,
        wire_thickness=format_edge_size(calculations.wire_thickness_mm, unit),
        webbing_width=format_edge_size(calculations.webbing_width_mm, unit),
        area=format_area(calculations.area_m2, unit),
        perimeter=format_primary(calculations.perimeter_mm, unit),
        weight=format_weight(calculations.total_weight_grams, unit),
        edge_measurements=edges,
        diagonal_measurements=diagonals,
        anchor_measurements=anchors,
        fixing_types=fixing_types,
    )
