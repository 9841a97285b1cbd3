"""Schema for the shade sail being quoted."""

from __future__ import annotations

import math

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from shadesail.domain.value_objects import MeasurementKey

from .base import EdgeType, FixingType, MeasurementSemantics, Unit


class AnchorConfig(BaseModel):
    """Installation details for one corner.

    Attributes:
        corner: Corner letter (A-F).
        height: Anchor height in the shade's display unit (optional).
        fixing_type: "post" or "building" (optional).
    """

    model_config = ConfigDict(extra="forbid")

    corner: str = Field(..., pattern=r"^[A-Fa-f]$")
    height: float | None = Field(default=None, ge=0)
    fixing_type: FixingType | None = None

    @property
    def index(self) -> int:
        return ord(self.corner.upper()) - ord("A")


class ShadeConfig(BaseModel):
    """The sail: shape, measurements and product options.

    Measurements and anchor heights are given in ``unit`` (millimetres or
    inches) and converted to millimetres by the adapter.

    Attributes:
        corners: Number of fixing points (3 to 6).
        unit: "metric" or "imperial".
        measurement_semantics: "space_between_fixing_points" or
            "finished_sail_dimensions".
        measurements: Lengths keyed by corner pair, e.g. {"AB": 3000}.
        fabric: Fabric id from the rate table.
        edge_type: "cabled" or "webbing".
        currency: Three-letter currency code.
        anchors: Optional per-corner installation details.
        dismissed_suggestions: Typo advisories the customer dismissed, keyed
            by corner pair with the value that was dismissed.
    """

    model_config = ConfigDict(extra="forbid")

    corners: int = Field(..., ge=3, le=6)
    unit: Unit = Unit.METRIC
    measurement_semantics: MeasurementSemantics = (
        MeasurementSemantics.SPACE_BETWEEN_FIXING_POINTS
    )
    measurements: dict[str, float] = Field(default_factory=dict)
    fabric: str = "shadetec320"
    edge_type: EdgeType = EdgeType.CABLED
    currency: str = Field(default="NZD", pattern=r"^[A-Za-z]{3}$")
    anchors: list[AnchorConfig] = Field(default_factory=list, max_length=6)
    dismissed_suggestions: dict[str, float] = Field(default_factory=dict)

    @field_validator("currency")
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        return v.upper()

    @field_validator("measurements", "dismissed_suggestions")
    @classmethod
    def validate_positive_lengths(cls, v: dict[str, float]) -> dict[str, float]:
        for key, value in v.items():
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"Length for {key} must be a positive number")
        return v

    @model_validator(mode="after")
    def validate_keys_match_corners(self) -> ShadeConfig:
        """Every pair label must name two distinct corners of this shape."""
        for field_name in ("measurements", "dismissed_suggestions"):
            for key in getattr(self, field_name):
                if MeasurementKey.parse(key, self.corners) is None:
                    raise ValueError(
                        f"Invalid {field_name} key '{key}' for a "
                        f"{self.corners}-corner sail"
                    )
        seen: set[int] = set()
        for anchor in self.anchors:
            if anchor.index >= self.corners:
                raise ValueError(
                    f"Anchor corner '{anchor.corner}' does not exist on a "
                    f"{self.corners}-corner sail"
                )
            if anchor.index in seen:
                raise ValueError(f"Duplicate anchor for corner '{anchor.corner}'")
            seen.add(anchor.index)
        return self
