"""Measurement keys and the weighted measurement graph.

Key lists are generated algorithmically from the corner count, so there is
no per-shape table to keep in sync. The public helpers only answer for the
supported range of corner counts; anything else yields an empty list.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping

from shadesail.domain.value_objects import KeyKind, MeasurementKey

from .constants import MAX_CORNERS, MIN_CORNERS
from .models import FanTriangle

logger = logging.getLogger(__name__)


def is_supported_corner_count(corner_count: int) -> bool:
    return isinstance(corner_count, int) and MIN_CORNERS <= corner_count <= MAX_CORNERS


def _edge_pairs(corner_count: int) -> list[MeasurementKey]:
    return [
        MeasurementKey.of(i, (i + 1) % corner_count) for i in range(corner_count)
    ]


def _diagonal_pairs(corner_count: int) -> list[MeasurementKey]:
    return [
        MeasurementKey(i, j)
        for i in range(corner_count)
        for j in range(i + 1, corner_count)
        if MeasurementKey(i, j).kind(corner_count) is KeyKind.DIAGONAL
    ]


def edge_keys(corner_count: int) -> list[str]:
    """Edge labels in polygon order, closing pair last (e.g. AB, BC, CD, AD)."""
    if not is_supported_corner_count(corner_count):
        return []
    return [key.label for key in _edge_pairs(corner_count)]


def diagonal_keys(corner_count: int) -> list[str]:
    """Every non-adjacent pair, sorted (4 corners -> AC, BD)."""
    if not is_supported_corner_count(corner_count):
        return []
    return [key.label for key in _diagonal_pairs(corner_count)]


def fan_diagonal_keys(corner_count: int) -> list[str]:
    """Diagonals radiating from corner A, used by the fan triangulation."""
    if not is_supported_corner_count(corner_count):
        return []
    return [MeasurementKey(0, i).label for i in range(2, corner_count - 1)]


def fan_keys(corner_count: int) -> list[str]:
    """Minimum set of lengths that fixes the shape: all edges plus A's diagonals."""
    return edge_keys(corner_count) + fan_diagonal_keys(corner_count)


def all_keys(corner_count: int) -> list[str]:
    return edge_keys(corner_count) + diagonal_keys(corner_count)


def fan_triangles(corner_count: int) -> list[FanTriangle]:
    """Triangles (A, i, i+1) for i = 1 .. N-2."""
    if not is_supported_corner_count(corner_count):
        return []
    return [FanTriangle(0, i, i + 1) for i in range(1, corner_count - 1)]


def parse_key(text: str, corner_count: int) -> str | None:
    """Canonical label for ``text`` or None when it is not a valid pair."""
    if not is_supported_corner_count(corner_count):
        return None
    key = MeasurementKey.parse(text, corner_count)
    return key.label if key is not None else None


class MeasurementGraph:
    """Corners as nodes, entered lengths as weighted edges.

    Built from a raw ``{label: mm}`` mapping. Malformed or unknown labels and
    values that are not finite positive numbers are ignored, so the graph
    only ever contains usable measurements.
    """

    def __init__(self, corner_count: int, measurements: Mapping[str, float]) -> None:
        self.corner_count = corner_count
        self._lengths: dict[MeasurementKey, float] = {}
        if not is_supported_corner_count(corner_count):
            logger.debug(f"Unsupported corner count {corner_count}, graph left empty")
            return
        for label, value in measurements.items():
            key = MeasurementKey.parse(label, corner_count)
            if key is None:
                logger.debug(f"Ignoring unknown measurement key {label!r}")
                continue
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                continue
            if not math.isfinite(value) or value <= 0:
                continue
            self._lengths[key] = float(value)

    @property
    def supported(self) -> bool:
        return is_supported_corner_count(self.corner_count)

    @property
    def keys(self) -> list[MeasurementKey]:
        return sorted(self._lengths)

    @property
    def labels(self) -> list[str]:
        return [key.label for key in self.keys]

    def __contains__(self, label: str) -> bool:
        key = MeasurementKey.parse(label, self.corner_count)
        return key is not None and key in self._lengths

    def __len__(self) -> int:
        return len(self._lengths)

    def length(self, i: int, j: int) -> float | None:
        """Entered length between corners ``i`` and ``j``, if any."""
        if i == j:
            return None
        return self._lengths.get(MeasurementKey.of(i, j))

    def length_of(self, label: str) -> float | None:
        key = MeasurementKey.parse(label, self.corner_count)
        if key is None:
            return None
        return self._lengths.get(key)

    def neighbours(self, corner: int) -> list[int]:
        """Corners joined to ``corner`` by an entered measurement."""
        result = []
        for key in self._lengths:
            if key.first == corner:
                result.append(key.second)
            elif key.second == corner:
                result.append(key.first)
        return sorted(result)

    def missing(self, labels: list[str]) -> list[str]:
        return [label for label in labels if label not in self]

    def missing_fan_keys(self) -> list[str]:
        return self.missing(fan_keys(self.corner_count))

    @property
    def fan_complete(self) -> bool:
        return self.supported and not self.missing_fan_keys()

    def fan_triangles(self) -> list[FanTriangle]:
        return fan_triangles(self.corner_count)

    def redundant_diagonals(self) -> list[MeasurementKey]:
        """Entered diagonals that are not part of the fan triangulation."""
        fan = set(fan_diagonal_keys(self.corner_count))
        return [
            key
            for key in self.keys
            if key.kind(self.corner_count) is KeyKind.DIAGONAL and key.label not in fan
        ]

    def without(self, key: MeasurementKey) -> MeasurementGraph:
        """Copy of the graph with one measurement left out."""
        return self.with_lengths({k: v for k, v in self._lengths.items() if k != key})

    def with_lengths(self, lengths: Mapping[MeasurementKey, float]) -> MeasurementGraph:
        graph = MeasurementGraph(self.corner_count, {})
        graph._lengths = dict(lengths)
        return graph

    def as_dict(self) -> dict[str, float]:
        return {key.label: value for key, value in sorted(self._lengths.items())}
