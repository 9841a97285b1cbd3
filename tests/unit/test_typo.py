"""Unit tests for digit-level typo scoring."""

from __future__ import annotations

import pytest

from shadesail.domain.services.geometry import (
    damerau_levenshtein,
    digit_string,
    typo_distance,
)
from shadesail.domain.value_objects import Unit


class TestDamerauLevenshtein:
    """Tests for the edit distance."""

    @pytest.mark.parametrize(
        ("a", "b", "expected"),
        [
            ("4243", "4243", 0),
            ("424", "4243", 1),  # dropped digit
            ("42433", "4243", 1),  # doubled digit
            ("2443", "4243", 1),  # swapped digits
            ("4253", "4243", 1),  # wrong digit
            ("", "123", 3),
            ("5985", "4243", 4),
        ],
    )
    def test_distance(self, a: str, b: str, expected: int) -> None:
        assert damerau_levenshtein(a, b) == expected


class TestTypoDistance:
    """Tests for typo_distance and digit_string."""

    def test_digit_string_metric(self) -> None:
        assert digit_string(4242.64, Unit.METRIC) == "4243"

    def test_digit_string_imperial(self) -> None:
        assert digit_string(254.0, Unit.IMPERIAL) == "1000"

    def test_dropped_digit_scores_low(self) -> None:
        assert typo_distance(424.0, 4242.64, Unit.METRIC) == pytest.approx(0.25)

    def test_unrelated_scores_high(self) -> None:
        assert typo_distance(5985.0, 4242.64, Unit.METRIC) == pytest.approx(1.0)
