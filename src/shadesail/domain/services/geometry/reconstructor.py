"""Planar reconstruction of corner positions from measured lengths.

Two strategies are provided:

- ``reconstruct`` builds the polygon from a fan triangulation rooted at
  corner A. It needs exactly the fan measurements (every edge plus A's
  diagonals) and runs in O(N) with no iteration.
- ``trilaterate`` places corners one at a time by intersecting two circles
  around already-placed corners. It works on any rigid subset of the graph
  and is used to estimate what a single measurement should be from all of
  the others.

Corners are assumed to be entered in convex, counter-clockwise order. Both
strategies pick the mirror solution that keeps that order.
"""

from __future__ import annotations

import logging
import math

from shadesail.domain.value_objects import MeasurementKey, Point2D

from .graph import MeasurementGraph
from .models import (
    DEFAULT_POLICY,
    Reconstruction,
    ReconstructionStatus,
    ValidationPolicy,
    is_triangle,
)

logger = logging.getLogger(__name__)


def _clamp_cosine(value: float) -> float:
    return max(-1.0, min(1.0, value))


def _side(p: int, q: int, w: int, corner_count: int) -> int:
    """+1 when ``w`` lies left of the directed line p->q in CCW corner order."""
    if (q - p) % corner_count < (w - p) % corner_count:
        return 1
    return -1


class GeometryReconstructor:
    """Rebuilds corner coordinates from a MeasurementGraph."""

    def __init__(self, policy: ValidationPolicy = DEFAULT_POLICY) -> None:
        self.policy = policy

    def reconstruct(self, graph: MeasurementGraph) -> Reconstruction:
        """Fan reconstruction from apex A.

        A is placed at the origin and B on the positive x axis. For each fan
        triangle (A, i, i+1) the angle at A follows from the law of cosines
        and is accumulated to place corner i+1.

        Args:
            graph: Entered measurements.

        Returns:
            Reconstruction with status COMPLETE, INCOMPLETE (a fan
            measurement is missing) or INFEASIBLE (a fan triangle cannot
            close).
        """
        if not graph.supported:
            return Reconstruction(status=ReconstructionStatus.INCOMPLETE)

        missing = graph.missing_fan_keys()
        if missing:
            logger.debug(f"Fan reconstruction incomplete, missing {missing}")
            return Reconstruction(
                status=ReconstructionStatus.INCOMPLETE, missing_keys=tuple(missing)
            )

        coordinates = [Point2D(0.0, 0.0), Point2D(graph.length(0, 1), 0.0)]
        theta = 0.0
        for triangle in graph.fan_triangles():
            a = graph.length(triangle.apex, triangle.left)
            b = graph.length(triangle.left, triangle.right)
            c = graph.length(triangle.apex, triangle.right)
            if not is_triangle(a, b, c, self.policy.triangle_epsilon):
                logger.debug(f"Triangle {triangle.label} cannot close: {a}, {b}, {c}")
                return Reconstruction(
                    status=ReconstructionStatus.INFEASIBLE, failed_triangle=triangle
                )
            theta += math.acos(_clamp_cosine((a * a + c * c - b * b) / (2 * a * c)))
            coordinates.append(Point2D(c * math.cos(theta), c * math.sin(theta)))

        return Reconstruction(
            status=ReconstructionStatus.COMPLETE, coordinates=tuple(coordinates)
        )

    def trilaterate(
        self,
        graph: MeasurementGraph,
        exclude: MeasurementKey | None = None,
    ) -> dict[int, Point2D] | None:
        """Place as many corners as the measurements allow.

        Starts from the first entered key (its lower corner at the origin,
        the other on the positive x axis), then repeatedly places the lowest
        unplaced corner that has two placed neighbours.

        Args:
            graph: Entered measurements.
            exclude: A measurement to leave out, if any.

        Returns:
            Placed corners by index, possibly fewer than all of them, or None
            when two circles fail to intersect (the lengths contradict each
            other).
        """
        if exclude is not None:
            graph = graph.without(exclude)
        keys = graph.keys
        if not keys:
            return {}

        start = keys[0]
        placed = {
            start.first: Point2D(0.0, 0.0),
            start.second: Point2D(graph.length(start.first, start.second), 0.0),
        }
        order = [start.first, start.second]
        n = graph.corner_count

        while len(placed) < n:
            for w in range(n):
                if w in placed:
                    continue
                anchors = [p for p in order if graph.length(p, w) is not None]
                if len(anchors) < 2:
                    continue
                p, q = anchors[0], anchors[1]
                point = self._intersect(
                    placed[p],
                    placed[q],
                    graph.length(p, w),
                    graph.length(q, w),
                    _side(p, q, w, n),
                )
                if point is None:
                    return None
                placed[w] = point
                order.append(w)
                break
            else:
                # No further corner is pinned by two placed neighbours
                break
        return placed

    def estimate(self, graph: MeasurementGraph, key: MeasurementKey) -> float | None:
        """What ``key`` should measure according to every other measurement."""
        placed = self.trilaterate(graph, exclude=key)
        if not placed or key.first not in placed or key.second not in placed:
            return None
        return placed[key.first].distance_to(placed[key.second])

    def _intersect(
        self, p: Point2D, q: Point2D, r1: float, r2: float, side: int
    ) -> Point2D | None:
        d = p.distance_to(q)
        if d == 0:
            return None
        slack = self.policy.triangle_epsilon * max(d, r1, r2)
        if r1 + r2 < d - slack or abs(r1 - r2) > d + slack:
            return None
        a = (r1 * r1 - r2 * r2 + d * d) / (2 * d)
        h = math.sqrt(max(r1 * r1 - a * a, 0.0))
        ux, uy = (q.x - p.x) / d, (q.y - p.y) / d
        base_x, base_y = p.x + a * ux, p.y + a * uy
        return Point2D(base_x - side * h * uy, base_y + side * h * ux)
