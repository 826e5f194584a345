"""Movie Catalog — list, filter by genre, create, partially update and delete movies.

Invariants:
    - Titles are compared case-insensitively (lower(title) = lower(:title))
    - Listings are ordered by title ascending and carry genre + language
    - A failed uniqueness pre-check leaves the store untouched
    - Partial update applies exactly the dict it is given; absent fields never change

Design Decisions:
    - Uniqueness checked in the application AND by the store's unique index:
      the pre-check gives the 409, the index catches concurrent duplicates (500)
    - FK violations are left to the store and surface as DatabaseError
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from filmoteca.core.domain_types import MovieId, ResourceType
from filmoteca.core.errors import DuplicateResourceError, ResourceNotFoundError
from filmoteca.infrastructure.database import guard_store
from filmoteca.models.genre import Genre
from filmoteca.models.movie import Movie
from filmoteca.schemas.movie import MovieCreate

logger = logging.getLogger(__name__)


class MovieCatalog:
    """Store operations for the movies resource."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_movies(self) -> list[Movie]:
        async with guard_store(self.db, "list movies"):
            result = await self.db.execute(
                select(Movie).order_by(Movie.title.asc()),
            )
            return list(result.scalars().all())

    async def list_by_genre_name(self, genre_name: str) -> list[Movie]:
        """Movies whose genre name matches exactly, ignoring case. May be empty."""
        async with guard_store(self.db, "filter movies by genre"):
            result = await self.db.execute(
                select(Movie)
                .join(Movie.genre)
                .where(func.lower(Genre.name) == func.lower(genre_name))
                .order_by(Movie.title.asc()),
            )
            return list(result.scalars().all())

    async def create(self, data: MovieCreate) -> Movie:
        async with guard_store(self.db, "create movie"):
            if await self._find_by_title(data.title) is not None:
                raise DuplicateResourceError(
                    ResourceType.MOVIE, "title", data.title,
                )
            movie = Movie(**data.model_dump())
            self.db.add(movie)
            await self.db.commit()
        logger.info(
            f"Movie created: {movie.title}",
            extra={"resource_type": "movie", "resource_id": movie.id},
        )
        return movie

    async def update(self, movie_id: MovieId, changes: dict) -> Movie:
        """Merge changes over the stored movie.

        A new title that another movie already holds (ignoring case) is a
        conflict; re-casing the movie's own title is allowed.
        """
        async with guard_store(self.db, "update movie"):
            movie = await self._get_or_404(movie_id)
            title = changes.get("title")
            if title is not None:
                existing = await self._find_by_title(title)
                if existing is not None and existing.id != movie.id:
                    raise DuplicateResourceError(
                        ResourceType.MOVIE, "title", title,
                    )
            for field_name, value in changes.items():
                setattr(movie, field_name, value)
            await self.db.commit()
        logger.info(
            f"Movie updated: fields={sorted(changes)}",
            extra={"resource_type": "movie", "resource_id": movie_id},
        )
        return movie

    async def delete(self, movie_id: MovieId) -> None:
        async with guard_store(self.db, "delete movie"):
            movie = await self._get_or_404(movie_id)
            await self.db.delete(movie)
            await self.db.commit()
        logger.info(
            "Movie deleted",
            extra={"resource_type": "movie", "resource_id": movie_id},
        )

    async def _get_or_404(self, movie_id: MovieId) -> Movie:
        movie = await self.db.get(Movie, movie_id)
        if movie is None:
            raise ResourceNotFoundError(ResourceType.MOVIE, movie_id)
        return movie

    async def _find_by_title(self, title: str) -> Movie | None:
        result = await self.db.execute(
            select(Movie).where(func.lower(Movie.title) == func.lower(title)),
        )
        return result.scalars().first()
