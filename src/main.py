"""FastAPI application entry point."""

from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_fastapi_instrumentator import Instrumentator

from src.api.errors import register_error_handlers
from src.api.routes import async_books_router, books_router, health_router
from src.config import get_settings
from src.core.auth import UserRegistry
from src.core.catalog.store import load_catalog
from src.utils.logging import setup_logging

logger = structlog.get_logger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup and shutdown."""
    setup_logging(debug=settings.debug, json_logs=settings.json_logs, log_level=settings.log_level)
    app.state.catalog = load_catalog(settings.catalog_file)
    app.state.users = UserRegistry()
    logger.info(
        "Service started",
        books=len(app.state.catalog),
        async_delay_ms=settings.async_delay_ms,
        case_insensitive_match=settings.case_insensitive_match,
    )
    yield
    logger.info("Service stopped")


app = FastAPI(
    title=settings.app_name,
    description="Book catalog lookups by ISBN, author and title, with delayed async variants",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Prometheus metrics
Instrumentator().instrument(app).expose(app, endpoint="/metrics")

register_error_handlers(app)

# Include routers
app.include_router(health_router)
app.include_router(books_router)
app.include_router(async_books_router)


@app.get("/api")
async def api_info():
    """API information endpoint."""
    return {
        "service": settings.app_name,
        "version": "1.0.0",
        "docs": "/docs",
        "openapi": "/openapi.json",
        "health": "/health",
        "books": "/",
        "async_books": "/async-books",
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        workers=settings.workers,
    )
