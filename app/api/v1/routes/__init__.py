"""API v1 routes package"""

from app.api.v1.routes import healthcheck

__all__ = [
    "healthcheck",
]
