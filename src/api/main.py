"""
FastAPI application factory and configuration.

This module creates the FastAPI application instance,
configures middleware, exception handlers, and lifespan events.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from psycopg_pool import ConnectionPool

from src.adapters.repository.postgres import PostgresUserRepository, run_migrations
from src.adapters.token.jwt_issuer import JwtTokenIssuer
from src.api.errors import register_exception_handlers
from src.api.models import HealthResponse
from src.api.users import router as users_router
from src.config.logging import configure_logging
from src.config.settings import get_settings

logger = logging.getLogger(__name__)

# OpenAPI tags for documentation grouping
tags_metadata = [
    {
        "name": "users",
        "description": "User registration - Create an account and receive a signed token",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    FastAPI lifespan context manager.

    Manages application startup and shutdown:
    - Fails fast if JWT_SECRET is not configured
    - Creates database connection pool and runs migrations on startup
    - Closes connection pool on shutdown
    """
    settings = get_settings()
    configure_logging(settings.log_level)

    logger.info("Starting application...")

    # Raises ConfigurationError before any connection is opened
    app.state.token_issuer = JwtTokenIssuer(
        settings.require_jwt_secret(), algorithm=settings.jwt_algorithm
    )

    logger.info("Connecting to database...")
    pool = ConnectionPool(
        conninfo=settings.database_url,
        min_size=settings.pool_min_size,
        max_size=settings.pool_max_size,
    )

    logger.info("Running database migrations...")
    run_migrations(pool)

    # Store pool in app state for dependency injection
    app.state.pool = pool

    logger.info(f"Application startup complete (environment: {settings.environment})")
    logger.info(f"CORS enabled for: {', '.join(settings.cors_allow_origins)}")

    yield

    # Shutdown
    logger.info("Shutting down application...")
    pool.close()
    logger.info("Database connection pool closed")


app = FastAPI(
    title="chava",
    description="User Registration API - Sign up and receive a signed token",
    version="0.1.0",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=get_settings().cors_allow_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "Accept"],
)

register_exception_handlers(app)

app.include_router(users_router, prefix="/users")


@app.get("/")
async def root() -> dict[str, str]:
    """API banner with the configured environment name."""
    return {"message": "API running", "environment": get_settings().environment}


@app.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """
    Liveness probe with database connectivity state.

    Always returns 200 while the process is up; the database field
    reports whether the store currently answers queries.
    """
    pool = getattr(request.app.state, "pool", None)
    connected = pool is not None and PostgresUserRepository(pool).ping()

    return HealthResponse(
        status="OK",
        timestamp=datetime.now(timezone.utc),
        database="Connected" if connected else "Disconnected",
    )
