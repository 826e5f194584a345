"""Filmoteca API — FastAPI application factory.

Invariants:
    - No module-level app or store client: create_app() builds both per process
    - The DatabaseSessionManager lives on app.state for exactly the lifespan of the app
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map FilmotecaError → structured JSON responses

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Settings stored on app.state: dependencies and error handlers read the
      instance the app was built with, so tests can pass their own

Run with:
    uvicorn filmoteca.main:create_app --factory --port 3000
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from filmoteca import __version__
from filmoteca.api.error_handlers import register_error_handlers
from filmoteca.api.routes import genres, health, languages, movies
from filmoteca.config import Settings, get_settings
from filmoteca.infrastructure.database import DatabaseSessionManager
from filmoteca.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle; owns the store client."""
    settings: Settings = app.state.settings
    setup_logging(settings.log_level, settings.log_format)
    db_manager = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    if settings.database_auto_create:
        await db_manager.create_all()
    app.state.db_manager = db_manager
    logger.info("Filmoteca API started")
    try:
        yield
    finally:
        logger.info("Filmoteca API shutting down")
        app.state.db_manager = None
        await db_manager.close()


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application for the given settings."""
    settings = settings or get_settings()
    app = FastAPI(
        title="Filmoteca API", version=__version__, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.db_manager = None

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(movies.router)
    app.include_router(genres.router)
    app.include_router(languages.router)

    register_error_handlers(app)
    return app
