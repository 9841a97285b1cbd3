"""Unit conversion between canonical millimetres and display units.

All lengths are stored in millimetres. Conversions are linear and never
round; rounding only happens when a value is formatted for display, so
repeated edits in either unit do not accumulate error.
"""

from __future__ import annotations

import math
from typing import Any

from shadesail.domain.value_objects import Unit

MM_PER_INCH: float = 25.4
SQ_FT_PER_SQ_M: float = 10.763910416709722

# Number of decimals shown for a length in each display unit
DISPLAY_DECIMALS: dict[Unit, int] = {
    Unit.METRIC: 0,
    Unit.IMPERIAL: 2,
}

UNIT_SUFFIX: dict[Unit, str] = {
    Unit.METRIC: "mm",
    Unit.IMPERIAL: '"',
}


def to_display(mm: float, unit: Unit) -> float:
    """Convert canonical millimetres to the display unit, unrounded."""
    if unit is Unit.IMPERIAL:
        return mm / MM_PER_INCH
    return mm


def to_canonical_mm(value: Any, unit: Unit) -> float | None:
    """Convert a display-unit value to millimetres.

    Returns None instead of raising for anything that cannot be a length
    (non-numeric, NaN, infinite, zero or negative), so a field the user is
    still typing into simply reads as empty.
    """
    if isinstance(value, bool):
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(number) or number <= 0:
        return None
    if unit is Unit.IMPERIAL:
        return number * MM_PER_INCH
    return number


def convert_unit(value: float, from_unit: Unit, to_unit: Unit) -> float:
    """Convert a length between display units."""
    if from_unit is to_unit:
        return value
    mm = value * MM_PER_INCH if from_unit is Unit.IMPERIAL else value
    return to_display(mm, to_unit)


def display_step_mm(unit: Unit) -> float:
    """Size in millimetres of one step of the unit's display precision."""
    step = 10 ** -DISPLAY_DECIMALS[unit]
    return step * MM_PER_INCH if unit is Unit.IMPERIAL else step


def round_to_display_precision(mm: float, unit: Unit) -> float:
    """Snap a length to the nearest value the display unit can show exactly."""
    shown = round(to_display(mm, unit), DISPLAY_DECIMALS[unit])
    if unit is Unit.IMPERIAL:
        return shown * MM_PER_INCH
    return float(shown)


def format_primary(mm: float, unit: Unit) -> str:
    """Format a length in the customer's unit, e.g. ``3000mm`` or ``118.11"``."""
    decimals = DISPLAY_DECIMALS[unit]
    return f"{to_display(mm, unit):.{decimals}f}{UNIT_SUFFIX[unit]}"


def format_secondary(mm: float, unit: Unit) -> str:
    """Format a length in the unit the customer did not choose."""
    other = Unit.IMPERIAL if unit is Unit.METRIC else Unit.METRIC
    return format_primary(mm, other)


def format_dual(mm: float, unit: Unit = Unit.METRIC) -> str:
    """Format a length in both units for manufacturing records.

    The customer's unit comes first: ``3000mm (118.11")`` for metric input,
    ``118.11" (3000mm)`` for imperial input.
    """
    return f"{format_primary(mm, unit)} ({format_secondary(mm, unit)})"


def format_area(area_m2: float, unit: Unit) -> str:
    """Format an area as square metres or square feet."""
    if unit is Unit.IMPERIAL:
        return f"{area_m2 * SQ_FT_PER_SQ_M:.2f} ft²"
    return f"{area_m2:.2f} m²"
