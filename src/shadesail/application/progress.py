"""Measurement completeness tracking.

Edges and A's diagonals are needed before a price can be shown. The other
diagonals are optional while the customer explores, but every diagonal must
be entered before the order can go to checkout, so the factory can verify
the shape. A suspected typo also holds checkout back until the customer
corrects or dismisses it.
"""

from __future__ import annotations

from dataclasses import dataclass

from shadesail.domain.services.geometry import (
    MeasurementGraph,
    ValidationResult,
    diagonal_keys,
    edge_keys,
)


@dataclass(frozen=True)
class MeasurementProgress:
    """What is still missing for a configuration.

    Attributes:
        corner_count: Number of fixing points.
        missing_edges: Edge labels not yet entered, in polygon order.
        missing_diagonals: Diagonal labels not yet entered, sorted.
        missing_fan_keys: Labels still needed to reconstruct the shape.
        has_blocking_issue: Whether validation reported a blocking issue.
        has_open_advisories: Whether a suspected typo is still waiting to be
            corrected or dismissed.
    """

    corner_count: int
    missing_edges: tuple[str, ...] = ()
    missing_diagonals: tuple[str, ...] = ()
    missing_fan_keys: tuple[str, ...] = ()
    has_blocking_issue: bool = False
    has_open_advisories: bool = False

    @classmethod
    def from_graph(
        cls, graph: MeasurementGraph, validation: ValidationResult | None = None
    ) -> MeasurementProgress:
        return cls(
            corner_count=graph.corner_count,
            missing_edges=tuple(graph.missing(edge_keys(graph.corner_count))),
            missing_diagonals=tuple(graph.missing(diagonal_keys(graph.corner_count))),
            missing_fan_keys=tuple(graph.missing_fan_keys()),
            has_blocking_issue=bool(validation and validation.errors),
            has_open_advisories=bool(validation and validation.advisories),
        )

    @property
    def supported(self) -> bool:
        return bool(edge_keys(self.corner_count))

    @property
    def has_all_edges(self) -> bool:
        return self.supported and not self.missing_edges

    @property
    def all_diagonals_entered(self) -> bool:
        return self.supported and not self.missing_diagonals

    @property
    def ready_for_pricing(self) -> bool:
        """The shape can be reconstructed and priced."""
        return self.supported and not self.missing_fan_keys

    @property
    def ready_for_checkout(self) -> bool:
        """Everything is entered and no blocking issue or open typo remains."""
        return (
            self.has_all_edges
            and self.all_diagonals_entered
            and not self.has_blocking_issue
            and not self.has_open_advisories
        )

    @property
    def entered_count(self) -> int:
        return self.required_count - len(self.missing_edges) - len(self.missing_diagonals)

    @property
    def required_count(self) -> int:
        return len(edge_keys(self.corner_count)) + len(diagonal_keys(self.corner_count))
