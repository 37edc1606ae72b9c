"""Health check endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.api.dependencies import get_catalog_store
from src.config import Settings, get_settings
from src.core.catalog.store import CatalogStore

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "healthy"}


@router.get("/health/ready")
async def readiness_check(
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> dict:
    """Readiness check - verifies the catalog is loaded."""
    return {
        "status": "ready",
        "books": len(store),
        "async_delay_ms": settings.async_delay_ms,
    }


@router.get("/health/live")
async def liveness_check() -> dict:
    """Liveness check - verifies service is running."""
    return {"status": "alive"}
