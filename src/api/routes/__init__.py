"""API routes."""

from src.api.routes.health import router as health_router
from src.api.routes.books import router as books_router
from src.api.routes.async_books import router as async_books_router

__all__ = ["health_router", "books_router", "async_books_router"]
