"""Root conftest — shared fixtures: in-memory store, app factory, HTTP client, seed rows.

Invariants:
    - Every test gets a fresh in-memory SQLite database (StaticPool, FKs enforced)
    - The app is built by create_app(); the transport does not run the lifespan,
      so the fixture places the session manager on app.state itself
    - Assertions about stored rows use a fresh session (no stale identity map)

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (PostgreSQL-specific behavior is not exercised here)
"""

import os
from datetime import date

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import select

from filmoteca.config import Settings
from filmoteca.infrastructure.database import DatabaseSessionManager
from filmoteca.main import create_app
from filmoteca.models.genre import Genre
from filmoteca.models.language import Language
from filmoteca.models.movie import Movie

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

# Ensure tests never reach a real database through get_settings()
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        database_url=TEST_DATABASE_URL,
        database_auto_create=False,
        log_format="text",
    )


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager(TEST_DATABASE_URL)
    await manager.create_all()
    yield manager
    await manager.close()


@pytest.fixture
async def test_db(db_manager):
    async with db_manager.session() as session:
        yield session


@pytest.fixture
def app(settings, db_manager):
    application = create_app(settings)
    application.state.db_manager = db_manager
    return application


@pytest.fixture
async def client(app):
    """FastAPI test client bound to the in-memory store."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c


@pytest.fixture
async def seed_catalog(db_manager):
    """Two genres, two languages and one movie.

    Returns plain ids so tests never hold ORM objects from the seeding session.
    """
    async with db_manager.session() as db:
        drama = Genre(name="Drama")
        comedy = Genre(name="Comedy")
        portuguese = Language(name="Portuguese")
        english = Language(name="English")
        db.add_all([drama, comedy, portuguese, english])
        await db.flush()
        movie = Movie(
            title="Central do Brasil",
            genre_id=drama.id,
            language_id=portuguese.id,
            oscar_count=0,
            release_date=date(1998, 4, 3),
        )
        db.add(movie)
        await db.commit()
        return {
            "drama": drama.id,
            "comedy": comedy.id,
            "portuguese": portuguese.id,
            "english": english.id,
            "movie": movie.id,
        }


@pytest.fixture
def fetch_all(db_manager):
    """Read every row of a model through a fresh session."""
    async def _fetch(model):
        async with db_manager.session() as db:
            result = await db.execute(select(model))
            return list(result.scalars().all())
    return _fetch
