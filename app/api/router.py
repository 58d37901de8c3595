"""Top-level API router: one child router per API version."""
from collections.abc import Mapping

from fastapi import APIRouter

from app.api.v1.router import api_router as v1_router

API_VERSIONS: dict[str, APIRouter] = {
    "v1": v1_router,
}


def build_api_router(versions: Mapping[str, APIRouter] | None = None) -> APIRouter:
    """Compose the versioned routers under ``/<version>``.

    An empty version name ("" or "/") mounts the child at the root.
    """
    if versions is None:
        versions = API_VERSIONS

    router = APIRouter()
    for version, child in versions.items():
        name = version.strip("/")
        if name:
            router.include_router(child, prefix=f"/{name}")
        else:
            router.include_router(child)
    return router
