"""Tests for the application entry point and factory."""

import importlib
import logging
import sys

import pytest
from fastapi.testclient import TestClient

from view_subdirs import config
from view_subdirs.config import Settings
from view_subdirs.core.app_factory import create_app
from view_subdirs.exceptions import ConfigurationException, ViewException
from view_subdirs.views.template_renderer import ViewRenderer


class TestAppFactory:
    """Tests for create_app."""

    def test_view_exception_handler_registered(self, app):
        assert ViewException in app.exception_handlers
        assert Exception in app.exception_handlers

    def test_renderer_on_app_state(self, app, test_settings):
        assert isinstance(app.state.view_renderer, ViewRenderer)
        assert app.state.settings is test_settings

    def test_missing_views_dir_fails_fast(self, tmp_path):
        with pytest.raises(ConfigurationException):
            create_app(Settings(views_dir=tmp_path / "missing", log_dir=tmp_path))

    def test_request_count_tracks_requests(self, test_client, app):
        test_client.get("/health")
        test_client.get("/")

        assert app.state.request_count == 2

    def test_lifespan_records_startup_time(self, test_client, app):
        assert app.state.startup_time > 0


class TestMainModule:
    """Tests for the module-level app in view_subdirs.main."""

    @pytest.fixture
    def main_module(self, tmp_path, monkeypatch):
        """Import view_subdirs.main with logs under tmp_path, then restore logging."""
        root = logging.getLogger()
        handlers, level = list(root.handlers), root.level

        monkeypatch.setenv("LOG_DIR", str(tmp_path / "logs"))
        monkeypatch.setattr(config, "_settings_instance", None)
        monkeypatch.delitem(sys.modules, "view_subdirs.main", raising=False)

        yield importlib.import_module("view_subdirs.main")

        for handler in root.handlers:
            handler.close()
        root.handlers[:] = handlers
        root.setLevel(level)

    def test_main_app_serves_pages(self, main_module):
        client = TestClient(main_module.app)
        response = client.get("/users/1")

        assert response.status_code == 200
        assert "Ada Lovelace" in response.text

    def test_main_logs_to_configured_dir(self, main_module, tmp_path):
        assert main_module.settings.log_dir == tmp_path / "logs"
        assert (tmp_path / "logs" / "view_subdirs.log").exists()

    def test_favicon(self, main_module):
        response = TestClient(main_module.app).get("/favicon.ico")

        assert response.status_code == 200
        assert response.content == b""
