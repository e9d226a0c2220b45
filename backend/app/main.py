"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import Settings, get_settings
from app.infrastructure.database import Database
from app.infrastructure.logging.log_config import setup_logging
from app.presentation.api.error_handlers import register_exception_handlers
from app.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — open the database on startup, drain and close it on shutdown."""
    settings: Settings = app.state.settings
    database: Database = app.state.database
    setup_logging(settings)

    await database.connect(create_tables=settings.database_create_tables)
    logger.info("%s %s started (%s)", settings.app_title, settings.app_version, settings.app_env)

    try:
        yield
    finally:
        # uvicorn reaches this on SIGINT/SIGTERM after it stops accepting requests
        await database.close()
        logger.info("%s stopped", settings.app_title)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = Database(
        settings.database_url,
        echo=(settings.app_env == "development"),
        shutdown_timeout=settings.database_shutdown_timeout,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.api_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )
