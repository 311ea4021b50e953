import logging
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

BASE_DIR = Path(__file__).resolve().parent.parent  # view-subdirs/
PACKAGE_DIR = Path(__file__).resolve().parent

DEFAULT_VIEWS_DIR = PACKAGE_DIR / "templates"


class Settings(BaseSettings):
    """Application settings with validation.

    Values come from the environment or a .env file at the project root.
    Nothing here is secret; every field has a usable default.
    """

    api_host: str = Field(default="127.0.0.1", min_length=1, description="API server host")
    api_port: int = Field(ge=1, le=65535, default=8000, description="API server port")

    # Views
    views_dir: Path = Field(default=DEFAULT_VIEWS_DIR, description="Root directory for view templates")
    template_extension: str = Field(default="html", description="Extension appended to resolved template names")

    # Logging
    log_level: str = Field(default="INFO", description="Root log level")
    log_dir: Path = Field(default=BASE_DIR / "logs", description="Directory for the JSON log file")

    model_config = SettingsConfigDict(
        env_file=Path(BASE_DIR / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        validate_default=True,
    )

    @field_validator("api_host", mode="after")
    @classmethod
    def validate_api_host(cls, v: str) -> str:
        """Ensure api_host is not empty or whitespace."""
        v = v.strip()
        if not v:
            raise ValueError("api_host cannot be empty")
        return v

    @field_validator("template_extension", mode="after")
    @classmethod
    def validate_template_extension(cls, v: str) -> str:
        """Strip a leading dot; 'html' and '.html' are the same extension."""
        v = v.strip().lstrip(".")
        if not v:
            raise ValueError("template_extension must not be empty")
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensure log_level names a standard logging level."""
        v = v.strip().upper()
        if v not in logging.getLevelNamesMapping():
            raise ValueError(f"log_level must be a logging level name, got {v!r}")
        return v


# Singleton settings instance (cached for performance)
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Get singleton Settings instance for dependency injection.

    Returns:
        Cached Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
