"""Unit tests for configuration."""

from pathlib import Path
from unittest.mock import patch

import pytest
from pydantic import ValidationError

from view_subdirs import config
from view_subdirs.config import DEFAULT_VIEWS_DIR, Settings, get_settings


def test_settings_defaults():
    """Test Settings model has correct defaults."""
    with patch.dict("os.environ", {}, clear=True):
        settings = Settings()

    assert settings.api_host == "127.0.0.1"
    assert settings.api_port == 8000
    assert settings.views_dir == DEFAULT_VIEWS_DIR
    assert settings.template_extension == "html"
    assert settings.log_level == "INFO"


def test_default_views_dir_ships_templates():
    assert (DEFAULT_VIEWS_DIR / "index.html").is_file()
    assert (DEFAULT_VIEWS_DIR / "users" / "profile.html").is_file()


def test_settings_env_loading():
    """Test settings can load from environment."""
    with patch.dict(
        "os.environ",
        {
            "API_PORT": "9000",
            "VIEWS_DIR": "/srv/views",
            "TEMPLATE_EXTENSION": "jinja2",
            "LOG_LEVEL": "debug",
        },
        clear=True,
    ):
        settings = Settings()

    assert settings.api_port == 9000
    assert settings.views_dir == Path("/srv/views")
    assert settings.template_extension == "jinja2"
    assert settings.log_level == "DEBUG"


def test_template_extension_leading_dot_stripped():
    assert Settings(template_extension=".html").template_extension == "html"


@pytest.mark.parametrize("value", ["", ".", "   "])
def test_template_extension_rejects_empty(value):
    with pytest.raises(ValidationError):
        Settings(template_extension=value)


def test_log_level_rejects_unknown_name():
    with pytest.raises(ValidationError):
        Settings(log_level="LOUD")


def test_api_port_range_validated():
    with pytest.raises(ValidationError):
        Settings(api_port=70000)


def test_api_host_rejects_whitespace():
    with pytest.raises(ValidationError):
        Settings(api_host="   ")


def test_get_settings_is_singleton():
    """get_settings returns the same instance on every call."""
    with patch.object(config, "_settings_instance", None):
        first = get_settings()
        second = get_settings()

    assert first is second
