"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass

from shadesail.domain.entities import ShadeConfiguration
from shadesail.domain.services.geometry import ValidationResult
from shadesail.domain.services.pricing import ShadeCalculations

from .progress import MeasurementProgress


@dataclass(frozen=True)
class ShadeAssessment:
    """Everything the storefront needs to render one configuration.

    Attributes:
        config: The configuration assessed.
        validation: Geometry findings plus manufacturing-limit issues.
        calculations: Derived metrics and price.
        progress: What is still missing.
    """

    config: ShadeConfiguration
    validation: ValidationResult
    calculations: ShadeCalculations
    progress: MeasurementProgress

    @property
    def is_valid(self) -> bool:
        return self.validation.is_valid

    @property
    def can_checkout(self) -> bool:
        return self.is_valid and self.progress.ready_for_checkout
