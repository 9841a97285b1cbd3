"""Base enums and shared values for shade sail configuration schemas.

Domain enums are used directly; they are ``(str, Enum)`` so they read and
write as plain JSON strings.
"""

from shadesail.domain.value_objects import (
    EdgeType,
    FixingType,
    MeasurementSemantics,
    Unit,
)

# Supported schema versions for configuration files
# Version 1.0: Corners, measurements, fabric, edge, currency, anchors,
#   validation tolerances and rate overrides
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

__all__ = [
    "EdgeType",
    "FixingType",
    "MeasurementSemantics",
    "SUPPORTED_VERSIONS",
    "Unit",
]
