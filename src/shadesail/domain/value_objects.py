"""Value objects for the shade sail domain.

Immutable data types shared by the geometry, validation and pricing
services. Lengths are always canonical millimetres unless a name says
otherwise.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Unit(str, Enum):
    """Display unit chosen by the customer.

    Attributes:
        METRIC: Lengths shown in millimetres, areas in square metres.
        IMPERIAL: Lengths shown in inches, areas in square feet.
    """

    METRIC = "metric"
    IMPERIAL = "imperial"


class MeasurementSemantics(str, Enum):
    """What the entered lengths describe.

    Attributes:
        SPACE_BETWEEN_FIXING_POINTS: The installation gap between anchors.
            The sail is made to fit and tensioning hardware is included.
        FINISHED_SAIL_DIMENSIONS: The manufactured sail itself, made to the
            exact lengths with no hardware.
    """

    SPACE_BETWEEN_FIXING_POINTS = "space_between_fixing_points"
    FINISHED_SAIL_DIMENSIONS = "finished_sail_dimensions"

    @property
    def includes_hardware(self) -> bool:
        return self is MeasurementSemantics.SPACE_BETWEEN_FIXING_POINTS


class EdgeType(str, Enum):
    """Edge finish of the sail perimeter."""

    CABLED = "cabled"
    WEBBING = "webbing"

    @property
    def label(self) -> str:
        if self is EdgeType.WEBBING:
            return "Webbing Reinforced"
        return "Cabled Edge"


class FixingType(str, Enum):
    """How a corner is anchored on site."""

    POST = "post"
    BUILDING = "building"


class KeyKind(str, Enum):
    """Classification of a measurement between two corners."""

    EDGE = "edge"
    DIAGONAL = "diagonal"


@dataclass(frozen=True)
class Point2D:
    """Planar point in millimetres. Negative coordinates are valid."""

    x: float
    y: float

    def distance_to(self, other: Point2D) -> float:
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2) ** 0.5


@dataclass(frozen=True)
class Corner:
    """A fixing point of the sail.

    Attributes:
        index: Position in polygon order, 0 for corner A.
        display_position: Canvas position used by the UI only. Never used to
            compute geometry.
        height_mm: Installation height above the datum, if provided.
        fixing_type: Post or building attachment, if provided.
    """

    index: int
    display_position: Point2D | None = None
    height_mm: float | None = None
    fixing_type: FixingType | None = None

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError("Corner index must be non-negative")
        if self.height_mm is not None and self.height_mm < 0:
            raise ValueError("Corner height cannot be negative")

    @property
    def label(self) -> str:
        return corner_label(self.index)


@dataclass(frozen=True, order=True)
class MeasurementKey:
    """Canonical pair of corners, lower index first.

    Two corner indices identify one length regardless of the order the user
    typed them in, so ``MeasurementKey.of(2, 0)`` and ``MeasurementKey.of(0, 2)``
    are equal and both render as ``"AC"``.
    """

    first: int
    second: int

    def __post_init__(self) -> None:
        if self.first < 0 or self.second < 0:
            raise ValueError("Corner indices must be non-negative")
        if self.first >= self.second:
            raise ValueError("MeasurementKey must be built with first < second")

    @classmethod
    def of(cls, a: int, b: int) -> MeasurementKey:
        """Build the canonical key for an unordered corner pair."""
        return cls(min(a, b), max(a, b))

    @property
    def label(self) -> str:
        return corner_label(self.first) + corner_label(self.second)

    def kind(self, corner_count: int) -> KeyKind:
        """Classify as an edge (adjacent in polygon order) or a diagonal."""
        gap = self.second - self.first
        if gap == 1 or gap == corner_count - 1:
            return KeyKind.EDGE
        return KeyKind.DIAGONAL

    @classmethod
    def parse(cls, text: str, corner_count: int) -> MeasurementKey | None:
        """Parse a two-letter label such as "CA" into its canonical key.

        Returns None for anything that is not two distinct uppercase corner
        letters of a polygon with ``corner_count`` corners.
        """
        if not isinstance(text, str) or len(text) != 2:
            return None
        a = ord(text[0]) - ord("A")
        b = ord(text[1]) - ord("A")
        if a == b or not (0 <= a < corner_count and 0 <= b < corner_count):
            return None
        return cls.of(a, b)

    def __str__(self) -> str:
        return self.label


def corner_label(index: int) -> str:
    """Letter label for a corner index (0 -> "A")."""
    return chr(ord("A") + index)
