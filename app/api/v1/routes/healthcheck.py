from datetime import datetime, timezone

from fastapi import APIRouter

from app.api.v1.schemas.health import HealthCheckResponse

router = APIRouter()


@router.get("/healthcheck", response_model=HealthCheckResponse, summary="API health check")
async def healthcheck() -> HealthCheckResponse:
    """Return the success token and the current UTC timestamp."""
    return HealthCheckResponse(status="OK", timestamp=datetime.now(timezone.utc))
