"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import psycopg
from fastapi import FastAPI, HTTPException, Request, status
from psycopg_pool import ConnectionPool

from src.adapters.repository import (
    InMemoryWaitlistRepository,
    PostgresWaitlistRepository,
    run_migrations,
)
from src.api.errors import register_exception_handlers
from src.api.routes import router as waitlist_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "waitlist",
        "description": "Join the waitlist and read the signup count",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates database connection pool and runs migrations on startup
      (or in-memory stores when STORAGE_BACKEND=memory)
    - Builds the repositories injected into routes
    - Closes connection pool on shutdown
    """
    settings = get_settings()

    logger.info("Starting application...")

    pool: ConnectionPool | None = None
    if settings.storage_backend == "memory":
        logger.warning("Using in-memory storage; registrations will not persist")
        app.state.waitlist_repository = InMemoryWaitlistRepository()
    else:
        logger.info("Connecting to database...")
        pool = ConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
            open=True,
        )

        logger.info("Running database migrations...")
        run_migrations(pool)

        app.state.waitlist_repository = PostgresWaitlistRepository(pool)

    app.state.pool = pool

    logger.info("Application startup complete")

    yield

    logger.info("Shutting down application...")
    if pool is not None:
        pool.close()
        logger.info("Database connection pool closed")


app = FastAPI(
    title="waitlist",
    description="Waitlist Registration API - Collects landing page signups",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

register_exception_handlers(app)
app.include_router(waitlist_router)


@app.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with database validation.

    Returns 200 OK if application and database are healthy.
    Returns 503 if the database cannot be reached.
    """
    pool = getattr(request.app.state, "pool", None)
    if pool is not None:
        try:
            with pool.connection() as conn:
                conn.execute("SELECT 1")
        except psycopg.Error:
            logger.exception("Health check failed: database unreachable")
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Database unavailable",
            ) from None

    return {"status": "healthy"}
