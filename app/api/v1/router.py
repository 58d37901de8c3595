"""API v1 router"""
from fastapi import APIRouter

from app.api.v1.routes import healthcheck

api_router = APIRouter()

# Liveness
api_router.include_router(healthcheck.router, tags=["health"])
