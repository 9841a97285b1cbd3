"""Geometry limits and floating point tolerances.

This module provides:
- The supported corner count range
- The relative epsilon used by every triangle inequality test
- Default cross-check tolerances for typo detection
"""

from __future__ import annotations

# Supported number of fixing points
MIN_CORNERS: int = 3
MAX_CORNERS: int = 6

# Relative slack for strict triangle inequalities: a + b must exceed c by more
# than TRIANGLE_EPSILON * max(a, b, c). Degenerate (flat) triangles fail.
TRIANGLE_EPSILON: float = 1e-9

# Redundant diagonals disagreeing with the reconstruction by more than
# max(CROSS_CHECK_RELATIVE_TOLERANCE * expected, CROSS_CHECK_MIN_TOLERANCE_MM)
# are treated as suspected typos.
CROSS_CHECK_RELATIVE_TOLERANCE: float = 0.02  # 2%
CROSS_CHECK_MIN_TOLERANCE_MM: float = 10.0
