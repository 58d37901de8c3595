import time
from collections.abc import AsyncIterator, Awaitable, Callable
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from dotenv import load_dotenv
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

# Populate os.environ from .env before settings are read
load_dotenv()

from app.api.router import build_api_router
from app.api.v1.schemas.health import RootHealthStatus
from app.core.config import Settings, get_settings
from app.core.logging import configure_logging, get_logger, log_api_access

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    logger.info("Server started at %s", datetime.now(timezone.utc).isoformat())
    yield
    logger.info("Server stopped at %s", datetime.now(timezone.utc).isoformat())


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the ASGI application and mount the API routers."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next: Callable[[Request], Awaitable[Response]]) -> Response:
        start_time = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.perf_counter() - start_time
            log_api_access(request.method, request.url.path, 500, process_time, error=str(e))
            logger.error("%s %s failed: %s (%.3fs)", request.method, request.url.path, e, process_time)
            raise
        process_time = time.perf_counter() - start_time
        log_api_access(request.method, request.url.path, response.status_code, process_time)
        return response

    app.include_router(build_api_router(), prefix=settings.api_prefix)

    @app.get("/healthz", response_model=RootHealthStatus, tags=["health"])
    async def root_health_check() -> RootHealthStatus:
        """Basic readiness probe for infrastructure monitors."""
        return RootHealthStatus()

    logger.debug("Application created for env=%s with API prefix %r", settings.app_env, settings.api_prefix)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.app_env == "local",
        reload_dirs=["app"],
    )
