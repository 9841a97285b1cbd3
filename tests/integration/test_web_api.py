"""Integration tests for the REST API."""

from __future__ import annotations

from typing import Any

import pytest
from fastapi.testclient import TestClient

from shadesail.web.app import create_app


@pytest.fixture
def client() -> TestClient:
    return TestClient(create_app())


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}


class TestValidateEndpoint:
    """Tests for POST /api/v1/validate."""

    def test_consistent_square(self, client: TestClient, square: dict[str, float]) -> None:
        response = client.post(
            "/api/v1/validate", json={"corners": 4, "measurements": square}
        )
        assert response.status_code == 200
        body = response.json()
        assert body["is_valid"] is True
        assert body["complete"] is True
        assert body["issues"] == []

    def test_typo_suggestion(
        self, client: TestClient, square_with_typo: dict[str, float]
    ) -> None:
        response = client.post(
            "/api/v1/validate", json={"corners": 4, "measurements": square_with_typo}
        )
        body = response.json()
        assert body["is_valid"] is True
        (issue,) = body["issues"]
        assert issue["kind"] == "suspected_typo"
        assert issue["suspect_key"] == "AC"
        assert issue["suggested_correction_mm"] == pytest.approx(4243.0)

    def test_dismissed(self, client: TestClient, square_with_typo: dict[str, float]) -> None:
        response = client.post(
            "/api/v1/validate",
            json={
                "corners": 4,
                "measurements": square_with_typo,
                "dismissed_suggestions": {"AC": 424.0},
            },
        )
        assert response.json()["issues"] == []

    def test_geometry_error_is_not_http_error(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate",
            json={"corners": 3, "measurements": {"AB": 1000, "BC": 1000, "CA": 5000}},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["is_valid"] is False
        assert body["issues"][0]["kind"] == "triangle_inequality"
        assert body["issues"][0]["feasible_range_mm"] == [0.0, 2000.0]

    def test_unknown_keys_ignored(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate",
            json={"corners": 3, "measurements": {"AB": 3000, "XY": 1, "BC": 0}},
        )
        assert response.status_code == 200
        body = response.json()
        assert body["complete"] is False
        assert body["issues"][0]["involved_keys"] == ["BC", "AC"]

    def test_unsupported_corner_count(self, client: TestClient) -> None:
        response = client.post("/api/v1/validate", json={"corners": 9})
        assert response.status_code == 200
        assert response.json() == {"is_valid": False, "complete": False, "issues": []}

    def test_bad_tolerance_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/validate", json={"corners": 3, "relative_tolerance": 2}
        )
        assert response.status_code == 422


class TestDiagonalsEndpoint:
    """Tests for GET /api/v1/diagonals/{corner_count}."""

    @pytest.mark.parametrize(
        ("corners", "expected"),
        [(3, []), (4, ["AC", "BD"]), (7, [])],
    )
    def test_diagonals(self, client: TestClient, corners: int, expected: list[str]) -> None:
        response = client.get(f"/api/v1/diagonals/{corners}")
        assert response.status_code == 200
        assert response.json() == {"corners": corners, "diagonals": expected}

    def test_hexagon_has_nine(self, client: TestClient) -> None:
        assert len(client.get("/api/v1/diagonals/6").json()["diagonals"]) == 9


class TestCalculateEndpoint:
    """Tests for POST /api/v1/calculate."""

    def test_assessment(self, client: TestClient, config_data: dict[str, Any]) -> None:
        response = client.post("/api/v1/calculate", json={"config": config_data})
        assert response.status_code == 200
        body = response.json()
        assert body["is_valid"] is True
        assert body["calculations"]["area_m2"] == pytest.approx(9.0, abs=0.01)
        assert body["calculations"]["wire_thickness_mm"] == 4.0
        assert body["progress"]["ready_for_checkout"] is True
        assert body["record"]["diagonal_measurements"]["AC"] == '4243mm (167.03")'

    def test_rate_override_in_request(
        self, client: TestClient, config_data: dict[str, Any]
    ) -> None:
        config_data["shade"]["measurements"] = {"AB": 3000, "BC": 4000, "CA": 5000}
        config_data["shade"]["corners"] = 3
        config_data["rates"] = {"hardware_pack_prices": {"3": 0}}
        response = client.post("/api/v1/calculate", json={"config": config_data})
        assert response.json()["calculations"]["total_price_minor"] == 34200

    def test_schema_error_is_422(
        self, client: TestClient, config_data: dict[str, Any]
    ) -> None:
        config_data["shade"]["corners"] = 2
        response = client.post("/api/v1/calculate", json={"config": config_data})
        assert response.status_code == 422
        body = response.json()
        assert body["error_type"] == "validation"
        assert body["details"][0]["path"] == "shade.corners"
