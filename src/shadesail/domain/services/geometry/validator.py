"""Feasibility and typo detection for entered sail measurements.

Validation runs in two phases:

1. Fan feasibility. Every triangle (A, i, i+1) of the fan triangulation
   must satisfy the strict triangle inequality. A violation is blocking and
   names the measurement most likely at fault together with the range it
   would have to lie in.
2. Redundant cross-check. Once the fan closes, every extra diagonal is
   compared against the distance between the reconstructed corners. A
   disagreement is advisory: the measurement whose removal makes the rest
   consistent, and whose digits look most like a slip of the finger, is
   reported with a suggested correction.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Iterable

from shadesail.domain.services.units import format_primary, round_to_display_precision
from shadesail.domain.value_objects import KeyKind, MeasurementKey, Unit

from .graph import MeasurementGraph
from .models import (
    DEFAULT_POLICY,
    FanTriangle,
    IssueKind,
    ValidationIssue,
    ValidationPolicy,
    ValidationResult,
    is_triangle,
)
from .reconstructor import GeometryReconstructor
from .typo import typo_distance

logger = logging.getLogger(__name__)


class GeometryValidator:
    """Validator for the geometric consistency of a measurement set.

    Args:
        policy: Tolerances for the triangle inequality and the cross-check.
        unit: Display unit, used for messages and suggestion rounding.
    """

    def __init__(
        self,
        policy: ValidationPolicy = DEFAULT_POLICY,
        unit: Unit = Unit.METRIC,
    ) -> None:
        self.policy = policy
        self.unit = unit
        self.reconstructor = GeometryReconstructor(policy)

    @property
    def name(self) -> str:
        return "geometry"

    def validate(
        self,
        graph: MeasurementGraph,
        dismissed: Iterable[tuple[str, float]] = (),
    ) -> ValidationResult:
        """Check the measurements for feasibility and likely typos.

        Args:
            graph: Entered measurements.
            dismissed: ``(label, mm)`` pairs whose advisory the customer has
                dismissed for that exact value.

        Returns:
            ValidationResult. Out-of-range corner counts give an empty,
            incomplete result.
        """
        if not graph.supported:
            return ValidationResult(complete=False)

        issues: list[ValidationIssue] = []
        missing = graph.missing_fan_keys()
        if missing:
            issues.append(
                ValidationIssue(
                    kind=IssueKind.INCOMPLETE,
                    involved_keys=tuple(missing),
                    message=f"Missing measurements: {', '.join(missing)}",
                )
            )

        feasibility = [
            issue
            for triangle in graph.fan_triangles()
            if (issue := self._check_triangle(graph, triangle)) is not None
        ]
        issues.extend(feasibility)

        if not missing and not feasibility:
            issues.extend(self._cross_check(graph))

        dismissed = tuple(dismissed)
        issues = [
            issue for issue in issues if not self._is_dismissed(issue, graph, dismissed)
        ]
        return ValidationResult(issues=tuple(issues), complete=not missing)

    def _check_triangle(
        self, graph: MeasurementGraph, triangle: FanTriangle
    ) -> ValidationIssue | None:
        lengths = {key: graph.length(key.first, key.second) for key in triangle.keys}
        if any(value is None for value in lengths.values()):
            return None
        a, b, c = (lengths[key] for key in triangle.keys)
        if is_triangle(a, b, c, self.policy.triangle_epsilon):
            return None

        n = graph.corner_count
        if n == 3 or triangle.side_c.kind(n) is KeyKind.DIAGONAL:
            suspect = triangle.side_c
        else:
            suspect = triangle.side_a
        p, q = (lengths[key] for key in triangle.keys if key != suspect)
        value = lengths[suspect]
        low, high = abs(p - q), p + q

        noun = "Diagonal" if suspect.kind(n) is KeyKind.DIAGONAL else "Edge"
        shown = format_primary(value, self.unit)
        prefix = f"Triangle {triangle.label}: "
        if value <= low:
            message = (
                f"{prefix}{noun} {suspect.label} ({shown}) is too short. With your edge "
                f"measurements, it should be at least {format_primary(low, self.unit)}"
            )
        elif value >= high:
            message = (
                f"{prefix}{noun} {suspect.label} ({shown}) is too long. With your edge "
                f"measurements, it cannot exceed {format_primary(high, self.unit)}"
            )
        else:
            s1, s2, s3 = sorted((a, b, c))
            message = (
                f"{prefix}Triangle inequality violated: "
                f"{s1:.0f} + {s2:.0f} = {s1 + s2:.0f} ≤ {s3:.0f}"
            )

        estimate = self._explain(graph, suspect)
        suggestion = None
        if estimate is not None and low < estimate < high:
            suggestion = round_to_display_precision(estimate, self.unit)

        logger.debug(f"Triangle {triangle.label} infeasible, suspect {suspect.label}")
        return ValidationIssue(
            kind=IssueKind.TRIANGLE_INEQUALITY,
            involved_keys=tuple(key.label for key in triangle.keys),
            message=message,
            suggested_correction_mm=suggestion,
            feasible_range_mm=(low, high),
            suspect_key=suspect.label,
        )

    def _cross_check(self, graph: MeasurementGraph) -> list[ValidationIssue]:
        reconstruction = self.reconstructor.reconstruct(graph)
        if not reconstruction.is_complete:
            return []

        inconsistent: list[tuple[MeasurementKey, float]] = []
        for key in graph.redundant_diagonals():
            expected = reconstruction.distance(key.first, key.second)
            if not self.policy.agrees(graph.length(key.first, key.second), expected):
                inconsistent.append((key, expected))
        if not inconsistent:
            return []

        n = graph.corner_count
        candidates = []
        for key in graph.keys:
            estimate = self._explain(graph, key)
            if estimate is None:
                continue
            entered = graph.length(key.first, key.second)
            score = typo_distance(entered, estimate, self.unit)
            candidates.append((score, key.kind(n) is KeyKind.EDGE, key.label, key, estimate))

        if candidates:
            candidates.sort(key=lambda c: c[:3])
            _, _, _, suspect, estimate = candidates[0]
            logger.debug(
                f"Attributing inconsistency to {suspect.label} "
                f"out of {[c[2] for c in candidates]}"
            )
            involved = [suspect.label] + [
                key.label for key, _ in inconsistent if key != suspect
            ]
            return [self._typo_issue(graph, suspect, estimate, tuple(involved))]

        # No single measurement explains it; flag each disagreeing diagonal
        return [
            self._typo_issue(graph, key, expected, (key.label,))
            for key, expected in inconsistent
        ]

    def _typo_issue(
        self,
        graph: MeasurementGraph,
        suspect: MeasurementKey,
        estimate: float,
        involved: tuple[str, ...],
    ) -> ValidationIssue:
        entered = graph.length(suspect.first, suspect.second)
        noun = "Diagonal" if suspect.kind(graph.corner_count) is KeyKind.DIAGONAL else "Edge"
        suggestion = round_to_display_precision(estimate, self.unit)
        return ValidationIssue(
            kind=IssueKind.SUSPECTED_TYPO,
            involved_keys=involved,
            message=(
                f"{noun} {suspect.label} ({format_primary(entered, self.unit)}) doesn't "
                f"match your other measurements. Did you mean "
                f"{format_primary(suggestion, self.unit)}?"
            ),
            suggested_correction_mm=suggestion,
            suspect_key=suspect.label,
        )

    def _explain(self, graph: MeasurementGraph, key: MeasurementKey) -> float | None:
        """Estimate for ``key`` if leaving it out makes every other length agree."""
        placed = self.reconstructor.trilaterate(graph, exclude=key)
        if not placed or len(placed) < graph.corner_count:
            return None
        for other in graph.keys:
            if other == key:
                continue
            expected = placed[other.first].distance_to(placed[other.second])
            if not self.policy.agrees(graph.length(other.first, other.second), expected):
                return None
        return placed[key.first].distance_to(placed[key.second])

    def _is_dismissed(
        self,
        issue: ValidationIssue,
        graph: MeasurementGraph,
        dismissed: tuple[tuple[str, float], ...],
    ) -> bool:
        if issue.kind is not IssueKind.SUSPECTED_TYPO or issue.suspect_key is None:
            return False
        current = graph.length_of(issue.suspect_key)
        if current is None:
            return False
        for label, value in dismissed:
            canonical = MeasurementKey.parse(label, graph.corner_count)
            if canonical is None or canonical.label != issue.suspect_key:
                continue
            if math.isclose(value, current, rel_tol=0.0, abs_tol=1e-6):
                return True
        return False
