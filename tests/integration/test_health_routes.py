"""Integration tests for health endpoints."""

import shutil

from fastapi.testclient import TestClient

from view_subdirs import __version__
from view_subdirs.config import Settings
from view_subdirs.core.app_factory import create_app


def test_health_endpoint(test_client):
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "version": __version__}


def test_readiness_ok(test_client):
    response = test_client.get("/health/ready")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["checks"] == {"view_renderer": "ok", "views_dir": "ok"}


def test_readiness_checks_the_apps_own_views_dir(tmp_path):
    """Readiness looks at the views_dir the app was built with, not the global settings."""
    views_dir = tmp_path / "views"
    views_dir.mkdir()
    app = create_app(Settings(views_dir=views_dir, log_dir=tmp_path / "logs"))
    shutil.rmtree(views_dir)

    response = TestClient(app).get("/health/ready")

    assert response.status_code == 503
    data = response.json()
    assert data["status"] == "unhealthy"
    assert data["checks"]["views_dir"] == f"missing: {views_dir}"
