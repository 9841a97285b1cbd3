"""Pytest configuration and shared fixtures for shade sail tests."""

from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any

import pytest

from shadesail.application.engine import clear_cache


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture(autouse=True)
def _fresh_engine_cache() -> None:
    """Start every test with an empty memo cache."""
    clear_cache()


# =============================================================================
# Measurement sets
# =============================================================================

SQUARE_DIAGONAL = 3000 * math.sqrt(2)


@pytest.fixture
def triangle_345() -> dict[str, float]:
    return {"AB": 3000.0, "BC": 4000.0, "CA": 5000.0}


@pytest.fixture
def square() -> dict[str, float]:
    """3 m square with both diagonals."""
    return {
        "AB": 3000.0,
        "BC": 3000.0,
        "CD": 3000.0,
        "DA": 3000.0,
        "AC": round(SQUARE_DIAGONAL, 2),
        "BD": round(SQUARE_DIAGONAL, 2),
    }


@pytest.fixture
def square_with_typo(square: dict[str, float]) -> dict[str, float]:
    """The square with a digit dropped from AC."""
    return {**square, "AC": 424.0}


@pytest.fixture
def rectangle() -> dict[str, float]:
    """4 m x 3 m rectangle."""
    return {
        "AB": 4000.0,
        "BC": 3000.0,
        "CD": 4000.0,
        "AD": 3000.0,
        "AC": 5000.0,
        "BD": 5000.0,
    }


@pytest.fixture
def hexagon() -> dict[str, float]:
    """Regular hexagon with 2 m sides and every diagonal."""
    side = 2000.0
    short = side * math.sqrt(3)
    long = side * 2
    return {
        "AB": side,
        "BC": side,
        "CD": side,
        "DE": side,
        "EF": side,
        "AF": side,
        "AC": short,
        "AE": short,
        "BD": short,
        "BF": short,
        "CE": short,
        "DF": short,
        "AD": long,
        "BE": long,
        "CF": long,
    }


# =============================================================================
# Configuration files
# =============================================================================


@pytest.fixture
def config_data(square: dict[str, float]) -> dict[str, Any]:
    return {
        "schema_version": "1.0",
        "shade": {
            "corners": 4,
            "unit": "metric",
            "measurements": square,
            "fabric": "shadetec320",
            "edge_type": "cabled",
            "currency": "NZD",
        },
    }


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a config dict to a JSON file and return its path."""

    def _write(data: dict[str, Any], name: str = "sail.json") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(data), encoding="utf-8")
        return path

    return _write
