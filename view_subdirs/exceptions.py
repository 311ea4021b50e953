"""Custom exceptions for View Subdirs with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    VIEW_ERROR = "VIEW_ERROR"
    TEMPLATE_NOT_FOUND = "TEMPLATE_NOT_FOUND"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    CONFIG_ERROR = "CONFIG_ERROR"


class ViewException(Exception):
    """Base exception for view rendering errors with HTTP status code support.

    Handlers registered in middleware.error_handlers turn any subclass into a
    structured JSON error response.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.VIEW_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize view exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class TemplateNotFoundException(ViewException):
    """The resolved template path does not exist under the views root."""

    def __init__(self, template: str, resolved_path: str, details: dict[str, Any] | None = None):
        self.template = template
        self.resolved_path = resolved_path
        super().__init__(
            f"Template not found: {resolved_path}",
            code=ErrorCode.TEMPLATE_NOT_FOUND,
            status_code=404,
            details={"template": template, "resolved_path": resolved_path, **(details or {})},
        )


class ConfigurationException(ViewException):
    """Configuration errors."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.CONFIG_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code, details)
