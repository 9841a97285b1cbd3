"""Data models for geometry reconstruction and validation."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from shadesail.domain.value_objects import MeasurementKey, Point2D, corner_label

from .constants import (
    CROSS_CHECK_MIN_TOLERANCE_MM,
    CROSS_CHECK_RELATIVE_TOLERANCE,
    TRIANGLE_EPSILON,
)


@dataclass(frozen=True)
class ValidationPolicy:
    """Tunable thresholds for feasibility and cross-checking.

    Attributes:
        relative_tolerance: Fraction of the expected length a redundant
            measurement may deviate before it is flagged.
        min_tolerance_mm: Absolute floor for the cross-check tolerance, so
            short lengths are not flagged for millimetre-level noise.
        triangle_epsilon: Relative slack for strict triangle inequalities.
    """

    relative_tolerance: float = CROSS_CHECK_RELATIVE_TOLERANCE
    min_tolerance_mm: float = CROSS_CHECK_MIN_TOLERANCE_MM
    triangle_epsilon: float = TRIANGLE_EPSILON

    def __post_init__(self) -> None:
        if not 0 < self.relative_tolerance < 1:
            raise ValueError("relative_tolerance must be between 0 and 1")
        if self.min_tolerance_mm < 0:
            raise ValueError("min_tolerance_mm cannot be negative")
        if self.triangle_epsilon < 0:
            raise ValueError("triangle_epsilon cannot be negative")

    def tolerance_mm(self, expected_mm: float) -> float:
        """Allowed deviation for a measurement expected to be ``expected_mm``."""
        return max(self.relative_tolerance * expected_mm, self.min_tolerance_mm)

    def agrees(self, entered_mm: float, expected_mm: float) -> bool:
        return abs(entered_mm - expected_mm) <= self.tolerance_mm(expected_mm)


DEFAULT_POLICY = ValidationPolicy()


def is_triangle(a: float, b: float, c: float, epsilon: float = TRIANGLE_EPSILON) -> bool:
    """Strict triangle inequality with a relative epsilon.

    Three lengths close into a non-degenerate triangle iff each pair sums to
    more than the third. Equality (a flat triangle) is rejected.
    """
    if a <= 0 or b <= 0 or c <= 0:
        return False
    slack = epsilon * max(a, b, c)
    return a + b - c > slack and b + c - a > slack and a + c - b > slack


@dataclass(frozen=True)
class FanTriangle:
    """One triangle (apex, left, right) of a fan triangulation.

    ``side_a`` joins the apex to ``left``, ``side_b`` is the polygon edge from
    ``left`` to ``right`` and ``side_c`` joins the apex to ``right``.
    """

    apex: int
    left: int
    right: int

    @property
    def side_a(self) -> MeasurementKey:
        return MeasurementKey.of(self.apex, self.left)

    @property
    def side_b(self) -> MeasurementKey:
        return MeasurementKey.of(self.left, self.right)

    @property
    def side_c(self) -> MeasurementKey:
        return MeasurementKey.of(self.apex, self.right)

    @property
    def keys(self) -> tuple[MeasurementKey, MeasurementKey, MeasurementKey]:
        return (self.side_a, self.side_b, self.side_c)

    @property
    def label(self) -> str:
        return "".join(corner_label(i) for i in sorted((self.apex, self.left, self.right)))


class ReconstructionStatus(str, Enum):
    """Outcome of a reconstruction attempt."""

    COMPLETE = "complete"
    INCOMPLETE = "incomplete"
    INFEASIBLE = "infeasible"


@dataclass(frozen=True)
class Reconstruction:
    """Planar corner coordinates rebuilt from measurements.

    Attributes:
        status: COMPLETE when every corner was placed.
        coordinates: One point per corner in index order, counter-clockwise.
            Empty unless the status is COMPLETE.
        missing_keys: Labels needed but not entered (INCOMPLETE only).
        failed_triangle: First triangle that could not close (INFEASIBLE only).
    """

    status: ReconstructionStatus
    coordinates: tuple[Point2D, ...] = ()
    missing_keys: tuple[str, ...] = ()
    failed_triangle: FanTriangle | None = None

    @property
    def is_complete(self) -> bool:
        return self.status is ReconstructionStatus.COMPLETE

    def distance(self, i: int, j: int) -> float:
        return self.coordinates[i].distance_to(self.coordinates[j])

    @property
    def area_mm2(self) -> float:
        """Shoelace area of the reconstructed polygon, 0 if incomplete."""
        if not self.is_complete:
            return 0.0
        points = self.coordinates
        twice_area = 0.0
        for i, p in enumerate(points):
            q = points[(i + 1) % len(points)]
            twice_area += p.x * q.y - q.x * p.y
        return abs(twice_area) / 2.0


class IssueKind(str, Enum):
    """Category of a validation issue.

    Attributes:
        INCOMPLETE: Measurements needed for reconstruction are missing.
        TRIANGLE_INEQUALITY: A fan triangle cannot close. Blocking.
        SUSPECTED_TYPO: A redundant measurement disagrees with the others.
            Advisory only.
        PERIMETER_TOO_LARGE: Sail exceeds the manufacturable perimeter.
            Blocking.
    """

    INCOMPLETE = "incomplete"
    TRIANGLE_INEQUALITY = "triangle_inequality"
    SUSPECTED_TYPO = "suspected_typo"
    PERIMETER_TOO_LARGE = "perimeter_too_large"

    @property
    def blocking(self) -> bool:
        return self in (IssueKind.TRIANGLE_INEQUALITY, IssueKind.PERIMETER_TOO_LARGE)


@dataclass(frozen=True)
class ValidationIssue:
    """A single validation finding.

    Attributes:
        kind: Issue category.
        involved_keys: Measurement labels the issue concerns.
        message: Human-readable description in the customer's unit.
        suggested_correction_mm: Replacement value for ``suspect_key``,
            already rounded to the display unit's precision.
        feasible_range_mm: Open interval the suspect must lie in for its
            triangle to close.
        suspect_key: The single measurement most likely at fault.
    """

    kind: IssueKind
    involved_keys: tuple[str, ...]
    message: str
    suggested_correction_mm: float | None = None
    feasible_range_mm: tuple[float, float] | None = None
    suspect_key: str | None = None

    @property
    def blocking(self) -> bool:
        return self.kind.blocking


@dataclass(frozen=True)
class ValidationResult:
    """Ordered validation findings for one measurement set.

    Attributes:
        issues: Findings in the order they were detected.
        complete: True when every measurement needed to reconstruct the
            shape was present.
    """

    issues: tuple[ValidationIssue, ...] = field(default_factory=tuple)
    complete: bool = False

    @property
    def is_valid(self) -> bool:
        """Complete and free of blocking issues. Typo advisories never block."""
        return self.complete and not self.errors

    @property
    def errors(self) -> tuple[ValidationIssue, ...]:
        return tuple(issue for issue in self.issues if issue.blocking)

    @property
    def advisories(self) -> tuple[ValidationIssue, ...]:
        return tuple(
            issue for issue in self.issues if issue.kind is IssueKind.SUSPECTED_TYPO
        )

    @property
    def has_advisories(self) -> bool:
        return len(self.advisories) > 0

    @property
    def suggestions(self) -> dict[str, float]:
        """Suggested corrections by measurement label."""
        return {
            issue.suspect_key: issue.suggested_correction_mm
            for issue in self.issues
            if issue.suspect_key and issue.suggested_correction_mm is not None
        }

    @property
    def exit_code(self) -> int:
        """CLI exit code: 1 with errors or when incomplete, 2 with advisories."""
        if self.errors or not self.complete:
            return 1
        if self.advisories:
            return 2
        return 0

    def issues_for(self, label: str) -> tuple[ValidationIssue, ...]:
        return tuple(issue for issue in self.issues if label in issue.involved_keys)

    def merge(self, other: ValidationResult) -> ValidationResult:
        """Combine two results; the merge is complete only if both were."""
        return ValidationResult(
            issues=self.issues + other.issues,
            complete=self.complete and other.complete,
        )
