"""API v1 schemas package"""

from app.api.v1.schemas.health import HealthCheckResponse, RootHealthStatus

__all__ = [
    "HealthCheckResponse",
    "RootHealthStatus",
]
