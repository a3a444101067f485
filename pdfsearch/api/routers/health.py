"""
Health check API endpoints.

Routes: GET /health, GET /health/vector-store

Dependencies: fastapi
System role: Health check HTTP API
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from pdfsearch.api.deps import ServiceCache, get_service_cache


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str
    message: str


router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check."""
    return HealthResponse(status="healthy", message="Server Healthy")


@router.get("/vector-store", response_model=HealthResponse)
async def health_check_vector_store(
    cache: ServiceCache = Depends(get_service_cache),
) -> HealthResponse:
    """Report which vector store adapter is configured."""
    return HealthResponse(
        status="healthy",
        message=f"Vector store '{cache.vector_store.name}' accessible",
    )
