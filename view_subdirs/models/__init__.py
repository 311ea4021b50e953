"""View Subdirs models"""

from view_subdirs.models.base_models import DetailedHealthResponse, ErrorResponse, HealthResponse

__all__ = [
    "DetailedHealthResponse",
    "ErrorResponse",
    "HealthResponse",
]
