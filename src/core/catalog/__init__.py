"""Book catalog module."""

from src.core.catalog.query import QueryService
from src.core.catalog.store import CatalogStore, load_catalog

__all__ = ["CatalogStore", "QueryService", "load_catalog"]
