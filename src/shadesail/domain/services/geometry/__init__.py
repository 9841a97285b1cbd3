"""Geometry services for shade sail measurements.

This package provides:
- Canonical measurement keys and the weighted measurement graph
- Fan reconstruction and trilateration of corner coordinates
- Two-phase validation (triangle feasibility, redundant cross-check)
- Digit-level typo scoring used to attribute inconsistencies
"""

from __future__ import annotations

# Re-export constants
from .constants import (
    CROSS_CHECK_MIN_TOLERANCE_MM,
    CROSS_CHECK_RELATIVE_TOLERANCE,
    MAX_CORNERS,
    MIN_CORNERS,
    TRIANGLE_EPSILON,
)

# Re-export key helpers and the graph
from .graph import (
    MeasurementGraph,
    all_keys,
    diagonal_keys,
    edge_keys,
    fan_diagonal_keys,
    fan_keys,
    fan_triangles,
    is_supported_corner_count,
    parse_key,
)

# Re-export models
from .models import (
    DEFAULT_POLICY,
    FanTriangle,
    IssueKind,
    Reconstruction,
    ReconstructionStatus,
    ValidationIssue,
    ValidationPolicy,
    ValidationResult,
    is_triangle,
)

# Re-export services
from .reconstructor import GeometryReconstructor
from .typo import damerau_levenshtein, digit_string, typo_distance
from .validator import GeometryValidator

__all__ = [
    # Constants
    "CROSS_CHECK_MIN_TOLERANCE_MM",
    "CROSS_CHECK_RELATIVE_TOLERANCE",
    "MAX_CORNERS",
    "MIN_CORNERS",
    "TRIANGLE_EPSILON",
    # Graph
    "MeasurementGraph",
    "all_keys",
    "diagonal_keys",
    "edge_keys",
    "fan_diagonal_keys",
    "fan_keys",
    "fan_triangles",
    "is_supported_corner_count",
    "parse_key",
    # Models
    "DEFAULT_POLICY",
    "FanTriangle",
    "IssueKind",
    "Reconstruction",
    "ReconstructionStatus",
    "ValidationIssue",
    "ValidationPolicy",
    "ValidationResult",
    "is_triangle",
    # Services
    "GeometryReconstructor",
    "GeometryValidator",
    "damerau_levenshtein",
    "digit_string",
    "typo_distance",
]
