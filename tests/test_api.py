"""
HTTP API Tests
==============

Endpoints return the engine results for their request bodies.
"""

import math

import pytest
from fastapi.testclient import TestClient

from camplan import main
from camplan.geometry import LayoutManager


@pytest.fixture
def client():
    return TestClient(main.app)


PANORAMIC = {"id": "pano", "x": 50, "y": 50, "field_of_view": 360, "range": 100}


class TestServiceEndpoints:
    """Tests for / and /health."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["service"] == "camplan"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"


class TestDORIEndpoint:
    """Tests for POST /dori."""

    def test_distances_and_zones(self, client):
        response = client.post("/dori", json={"resolution_height": 1080, "lens_mm": 4.0})

        assert response.status_code == 200
        body = response.json()
        assert body["distances"]["identification"] == 4.8
        assert [zone["level"] for zone in body["zones"]] == [
            "identification", "recognition", "observation", "detection",
        ]

    def test_invalid_optics(self, client):
        response = client.post("/dori", json={"resolution_height": 1080, "lens_mm": 0})
        assert response.status_code == 422


class TestCoverageEndpoints:
    """Tests for the coverage endpoints."""

    def test_stats(self, client):
        response = client.post("/coverage/stats", json={
            "cameras": [PANORAMIC],
            "canvas_width": 100,
            "canvas_height": 100,
        })

        assert response.status_code == 200
        body = response.json()
        assert body["total_coverage_percent"] == 100.0
        assert body["sample_count"] == 100

    def test_stats_with_wall(self, client):
        response = client.post("/coverage/stats", json={
            "cameras": [{"x": 5, "y": 50, "field_of_view": 360, "range": 100}],
            "canvas_width": 100,
            "canvas_height": 100,
            "walls": [{"type": "wall", "points": [50, 0, 50, 100]}],
        })

        assert response.json()["total_coverage_percent"] == 50.0

    def test_blind_spots(self, client):
        response = client.post("/coverage/blind-spots", json={
            "cameras": [],
            "canvas_width": 40,
            "canvas_height": 40,
        })

        assert response.status_code == 200
        assert len(response.json()) == 4

    def test_sample_budget(self, client, monkeypatch):
        monkeypatch.setattr(main.settings.coverage, "max_samples", 10)

        response = client.post("/coverage/stats", json={
            "cameras": [PANORAMIC],
            "canvas_width": 100,
            "canvas_height": 100,
            "sample_step_px": 10,
        })

        assert response.status_code == 422
        assert "too large" in response.json()["error"]

    def test_invalid_canvas(self, client):
        response = client.post("/coverage/stats", json={"canvas_width": 0, "canvas_height": 100})
        assert response.status_code == 422


class TestLayoutEndpoint:
    """Tests for GET /layout/coverage."""

    def test_no_layout(self, client, monkeypatch):
        monkeypatch.setattr(main, "_layout_manager", None)
        assert client.get("/layout/coverage").status_code == 503

    def test_loaded_layout(self, client, monkeypatch, sample_layout):
        monkeypatch.setattr(main, "_layout_manager", LayoutManager(sample_layout))

        response = client.get("/layout/coverage")

        assert response.status_code == 200
        body = response.json()
        assert body["site_id"] == "test_site"
        assert body["wall_length_m"] == 10.0
        assert body["camera_area_m2"]["cam-1"] == pytest.approx(math.pi * 100 ** 2, rel=0.01)


class TestSizingEndpoints:
    """Tests for the sizing endpoints."""

    def test_network(self, client):
        response = client.post("/sizing/network", json={
            "cameras": [{"resolution_mp": 4, "bitrate_kbps": 8192} for _ in range(10)],
        })

        body = response.json()
        assert body["total_bandwidth_mbps"] == 80.0
        assert body["peak_bandwidth_mbps"] == 88.0
        assert body["recommended_switch"] == "Gigabit Switch (1 Gbps)"

    def test_storage(self, client):
        response = client.post("/sizing/storage", json={
            "cameras": [{"bitrate_kbps": 2048, "recording_mode": "motion"}],
            "retention_days": 30,
        })

        body = response.json()
        assert body["total_daily_gb"] == 6.33
        assert body["total_storage_gb"] == 189.9

    def test_storage_default_retention(self, client):
        response = client.post("/sizing/storage", json={"cameras": [{"bitrate_kbps": 2048}]})
        assert response.json()["retention_days"] == main.settings.sizing.retention_days

    def test_poe(self, client):
        response = client.post("/sizing/poe", json={
            "cameras": [{"poe_standard": "PoE+", "power_watts": 25}],
        })

        body = response.json()
        assert body["total_power_watts"] == 25
        assert body["cameras_by_standard"]["poe_plus"] == 1

    def test_cabling(self, client):
        response = client.post("/sizing/cabling", json={
            "runs": [{"distance_to_switch_m": 30}, {"distance_to_switch_m": 60}],
        })

        body = response.json()
        assert body["cable_type_recommendation"] == "Cat6a"
        assert body["connector_count"] == 4

    def test_nvr(self, client):
        response = client.post("/sizing/nvr", json={"camera_count": 8, "total_storage_tb": 2.0})
        assert response.json()["estimated_cost_aud"] == 2800

    def test_engine_value_error_is_bad_request(self, client, monkeypatch):
        def _reject(camera_count, total_storage_tb):
            raise ValueError("unsupported configuration")

        monkeypatch.setattr(main, "recommend_nvr", _reject)

        response = client.post("/sizing/nvr", json={"camera_count": 8, "total_storage_tb": 2.0})

        assert response.status_code == 400
        assert response.json()["error"] == "unsupported configuration"
