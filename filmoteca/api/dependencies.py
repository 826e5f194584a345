"""API Dependencies — per-request wiring of settings, locale and catalog services.

Invariants:
    - Settings live on app.state (set by create_app); nothing here reads module globals
    - Each catalog service receives the request's AsyncSession from get_db

Usage in routers:
    @router.get("/example")
    async def example(catalog: MovieCatalog = Depends(get_movie_catalog)):
        ...
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from filmoteca.config import Settings
from filmoteca.core.domain_types import Locale
from filmoteca.infrastructure.database import get_db
from filmoteca.services.genre_catalog import GenreCatalog
from filmoteca.services.movie_catalog import MovieCatalog


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_locale(settings: Settings = Depends(get_app_settings)) -> Locale:
    return settings.locale


def get_movie_catalog(db: AsyncSession = Depends(get_db)) -> MovieCatalog:
    return MovieCatalog(db)


def get_genre_catalog(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings),
) -> GenreCatalog:
    return GenreCatalog(db, duplicate_status=settings.genre_duplicate_status)
