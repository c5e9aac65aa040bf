"""Smoke tests for the assembled application."""
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.main import app


@pytest.mark.unit
class TestApp:
    def test_metadata(self):
        assert app.title == "DRRM Dashboard"
        assert app.version == "0.1.0"

    def test_routes_mounted(self):
        paths = set(app.openapi()["paths"])
        for path in (
            "/",
            "/api/health",
            "/api/page",
            "/api/query",
            "/api/map",
            "/api/map/layers/upload",
            "/api/drive/images",
            "/api/gallery/{view}",
            "/api/login",
            "/api/admin",
        ):
            assert path in paths

    def test_health_and_landing(self):
        client = TestClient(app)
        assert client.get("/api/health").json() == {"ok": True}
        resp = client.get("/")
        assert resp.status_code == 200
        assert "/api/map" in resp.text
