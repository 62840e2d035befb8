"""
FastAPI Application Entry Point

This module builds the FastAPI application and configures:
- Database client (created once from validated settings)
- API routes
- Middleware (request logging)
- Application metadata

Startup order matters: configuration is validated before the database
client or the app exist, so a bad SQL_CLIENT never yields a half-started
service. Run with either:

    visit-logger
    uvicorn --factory visitlog.main:create_app
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from visitlog.api import endpoints
from visitlog.core.setting import Settings, get_service_config
from visitlog.db import DatabaseClient, create_database_client
from visitlog.middleware.logging import add_logging_middleware

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    client: Optional[DatabaseClient] = None
) -> FastAPI:
    """
    Create the application.

    Args:
        settings: Settings to use; loaded from the environment when omitted
        client: Database client to use instead of building one from settings

    Returns:
        Configured FastAPI application

    Raises:
        ConfigurationError: If SQL_CLIENT is not 'mysql' or 'pg'
    """
    settings = settings or Settings()
    config = get_service_config(settings)

    if client is None:
        client = create_database_client(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        yield
        # Release the database client on shutdown
        await client.close()

    app = FastAPI(
        title="Visit Logger Service",
        description="Records visits and lists the most recent ones",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.db_client = client

    add_logging_middleware(app)

    @app.get("/health", tags=["Health"])
    async def health_check():
        """
        Health check endpoint for monitoring.

        Does not touch the database.
        """
        return {"status": "healthy"}

    app.include_router(endpoints.router, tags=["Visits"])

    logger.info(f"Visit logger configured for SQL_CLIENT={config.client.value}")
    return app


def run() -> None:
    """
    Console entry point.

    A ConfigurationError propagates before uvicorn is started, so no
    listener is ever created for an invalid configuration.
    """
    settings = Settings()
    app = create_app(settings)
    uvicorn.run(
        app,
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    run()
