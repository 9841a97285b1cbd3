"""Digit-level similarity between an entered length and its estimate.

A mistyped measurement usually differs from the intended one by a dropped,
doubled, swapped or wrong digit. Comparing the digits the customer actually
saw (rounded to the display precision) ranks such candidates above ones that
are merely numerically close.
"""

from __future__ import annotations

from shadesail.domain.services.units import DISPLAY_DECIMALS, to_display
from shadesail.domain.value_objects import Unit


def digit_string(mm: float, unit: Unit) -> str:
    """Digits of a length as displayed in ``unit``, without the decimal point."""
    decimals = DISPLAY_DECIMALS[unit]
    return f"{to_display(mm, unit):.{decimals}f}".replace(".", "")


def damerau_levenshtein(a: str, b: str) -> int:
    """Edit distance counting adjacent transpositions as a single edit."""
    rows = len(a) + 1
    cols = len(b) + 1
    dist = [[0] * cols for _ in range(rows)]
    for i in range(rows):
        dist[i][0] = i
    for j in range(cols):
        dist[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            dist[i][j] = min(
                dist[i - 1][j] + 1,
                dist[i][j - 1] + 1,
                dist[i - 1][j - 1] + cost,
            )
            if i > 1 and j > 1 and a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]:
                dist[i][j] = min(dist[i][j], dist[i - 2][j - 2] + 1)
    return dist[-1][-1]


def typo_distance(entered_mm: float, estimate_mm: float, unit: Unit) -> float:
    """Normalized digit distance in [0, 1]; 0 means the digits are identical."""
    entered = digit_string(entered_mm, unit)
    estimate = digit_string(estimate_mm, unit)
    longest = max(len(entered), len(estimate), 1)
    return damerau_levenshtein(entered, estimate) / longest
