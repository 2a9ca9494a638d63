"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures middleware, exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import run_migrations
from src.api.dependencies import build_email_sender, build_repository, get_pool
from src.api.models import SERVER_ERROR_MESSAGE
from src.api.routes import router as registration_router
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

LIVENESS_TEXT = "Insight-X Backend is running and ready!"

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "registration",
        "description": "Event registration - Submit attendee details and receive a confirmation email",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Creates database connection pool and runs migrations (postgres backend)
    - Creates the shared HTTP client for the Brevo mail backend
    - Builds the repository and email sender stored on app.state
    - Closes pool and HTTP client on shutdown
    """
    settings = get_settings()
    logging.basicConfig(level=settings.log_level.upper())

    logger.info("Starting application...")

    pool = None
    if settings.storage_backend == "postgres":
        logger.info("Connecting to database...")
        pool = ConnectionPool(
            conninfo=settings.database_url,
            min_size=settings.pool_min_size,
            max_size=settings.pool_max_size,
            open=True,
        )
        logger.info("Running database migrations...")
        run_migrations(pool)

    http_client = None
    if settings.mail_backend == "brevo":
        http_client = httpx.Client(timeout=settings.mail_timeout_seconds)

    # Store adapters in app state for dependency injection
    app.state.pool = pool
    app.state.http_client = http_client
    app.state.repository = build_repository(settings, pool)
    app.state.email_sender = build_email_sender(settings, http_client)

    logger.info(
        "Application startup complete (storage=%s, mail=%s, block_on_email_failure=%s)",
        settings.storage_backend,
        settings.mail_backend,
        settings.block_on_email_failure,
    )

    yield

    # Shutdown
    logger.info("Shutting down application...")
    if http_client is not None:
        http_client.close()
    if pool is not None:
        pool.close()
        logger.info("Database connection pool closed")


app = FastAPI(
    title="insightx",
    description="Event Registration API - Registers attendees for Insight X and sends confirmation emails",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[get_settings().cors_origin],
    allow_methods=["GET", "POST"],
    allow_credentials=True,
)

app.include_router(registration_router, prefix="/api")


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Report any uncaught fault as a generic 500; details stay in the server log."""
    logger.error("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": SERVER_ERROR_MESSAGE},
    )


@app.get("/", response_class=PlainTextResponse)
async def liveness() -> str:
    """Liveness probe - no side effects."""
    return LIVENESS_TEXT


@app.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """
    Health check endpoint with database validation.

    Returns 200 OK if application and database are healthy.
    Raises exception if database connection fails.
    """
    pool = get_pool(request)
    if pool is not None:
        with pool.connection() as conn:
            conn.execute("SELECT 1")

    return {"status": "healthy"}


def run() -> None:
    """Serve the application with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
