"""Pytest configuration and shared fixtures."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from view_subdirs.config import DEFAULT_VIEWS_DIR, Settings
from view_subdirs.core.app_factory import create_app


def make_request(path: str = "/") -> Request:
    """Build a bare Starlette request with its own scope."""
    return Request(
        {
            "type": "http",
            "method": "GET",
            "path": path,
            "headers": [],
            "query_string": b"",
        }
    )


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings using the bundled views and a temporary log directory."""
    return Settings(
        api_host="127.0.0.1",
        api_port=8000,
        views_dir=DEFAULT_VIEWS_DIR,
        template_extension="html",
        log_level="DEBUG",
        log_dir=tmp_path / "logs",
    )


@pytest.fixture
def app(test_settings: Settings):
    """Application built from test settings."""
    return create_app(test_settings)


@pytest.fixture
def test_client(app):
    """FastAPI test client with lifespan context."""
    with TestClient(app) as client:
        yield client


@pytest.fixture
def views_dir(tmp_path: Path) -> Path:
    """A small views tree laid out the way a site with view subdirectories is."""
    root = tmp_path / "views"
    (root / "users").mkdir(parents=True)
    (root / "lists").mkdir()
    (root / "profile.html").write_text("root profile", encoding="utf-8")
    (root / "users" / "profile.html").write_text("users profile {{ name }}", encoding="utf-8")
    (root / "lists" / "users.html").write_text("lists users", encoding="utf-8")
    (root / "users" / "lists").mkdir()
    (root / "users" / "lists" / "users.html").write_text("wrong list", encoding="utf-8")
    return root


@pytest.fixture
def request_factory():
    """Factory for bare requests, one scope per call."""
    return make_request
