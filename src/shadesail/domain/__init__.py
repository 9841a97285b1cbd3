"""Domain layer - shade sail geometry and pricing logic."""

from .entities import ShadeConfiguration
from .value_objects import (
    Corner,
    EdgeType,
    FixingType,
    KeyKind,
    MeasurementKey,
    MeasurementSemantics,
    Point2D,
    Unit,
)

__all__ = [
    "Corner",
    "EdgeType",
    "FixingType",
    "KeyKind",
    "MeasurementKey",
    "MeasurementSemantics",
    "Point2D",
    "ShadeConfiguration",
    "Unit",
]
