"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from src.api.dependencies import get_catalog_store
from src.api.schemas.books import Book
from src.config import Settings, get_settings
from src.core.catalog.store import CatalogStore
from src.main import app


def _fast_settings() -> Settings:
    return Settings(async_delay_ms=0)


@pytest.fixture
def client():
    """Create a test client backed by the seed catalog, without async delay."""
    app.dependency_overrides[get_settings] = _fast_settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def example_store():
    """Two-book catalog, one with a review."""
    return CatalogStore(
        {
            "1": Book(title="A", author="X"),
            "2": Book(title="B", author="Y", reviews={"bob": "great"}),
        }
    )


@pytest.fixture
def example_client(example_store):
    """Create a test client backed by ``example_store``."""
    app.dependency_overrides[get_settings] = _fast_settings
    app.dependency_overrides[get_catalog_store] = lambda: example_store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
