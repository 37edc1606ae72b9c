"""Shared dependencies for catalog routes."""

from typing import Annotated, Optional

from fastapi import Depends, Query, Request

from src.config import Settings, get_settings
from src.core.catalog.query import QueryService
from src.core.catalog.store import CatalogStore


def get_catalog_store(request: Request) -> CatalogStore:
    """Get the catalog store built during application startup."""
    return request.app.state.catalog


def get_query_service(
    store: Annotated[CatalogStore, Depends(get_catalog_store)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> QueryService:
    """Get a query service bound to the startup catalog."""
    return QueryService(store, async_delay=settings.async_delay_seconds)


def resolve_ignore_case(
    settings: Annotated[Settings, Depends(get_settings)],
    ignore_case: Optional[bool] = Query(
        default=None,
        description="Match case-insensitively (defaults to the service setting)",
    ),
) -> bool:
    """Resolve the case-sensitivity of author and title matching."""
    if ignore_case is None:
        return settings.case_insensitive_match
    return ignore_case
