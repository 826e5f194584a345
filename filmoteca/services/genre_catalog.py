"""Genre Catalog — list, create, rename and delete genres.

Invariants:
    - name is required for create and update (RequiredFieldError otherwise)
    - Names are compared case-insensitively; a genre may re-case its own name
    - Create reports duplicates with the configured status (409, or 408 legacy);
      update always reports 409

Design Decisions:
    - duplicate_status injected from Settings: the legacy status is a deployment
      choice, not a code path
    - Deleting a genre still referenced by movies is left to the store's FK check
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from filmoteca.core.domain_types import GenreId, ResourceType
from filmoteca.core.errors import (
    DuplicateResourceError, RequiredFieldError, ResourceNotFoundError,
)
from filmoteca.infrastructure.database import guard_store
from filmoteca.models.genre import Genre

logger = logging.getLogger(__name__)


class GenreCatalog:
    """Store operations for the genres resource."""

    def __init__(self, db: AsyncSession, duplicate_status: int = 409):
        self.db = db
        self.duplicate_status = duplicate_status

    async def list_genres(self) -> list[Genre]:
        async with guard_store(self.db, "list genres"):
            result = await self.db.execute(
                select(Genre).order_by(Genre.name.asc()),
            )
            return list(result.scalars().all())

    async def create(self, name: str | None) -> Genre:
        if not name:
            raise RequiredFieldError("name")
        async with guard_store(self.db, "create genre"):
            if await self._find_by_name(name) is not None:
                raise DuplicateResourceError(
                    ResourceType.GENRE, "name", name,
                    http_status=self.duplicate_status,
                )
            genre = Genre(name=name)
            self.db.add(genre)
            await self.db.commit()
        logger.info(
            f"Genre created: {genre.name}",
            extra={"resource_type": "genre", "resource_id": genre.id},
        )
        return genre

    async def update(self, genre_id: GenreId, name: str | None) -> Genre:
        if not name:
            raise RequiredFieldError("name")
        async with guard_store(self.db, "update genre"):
            genre = await self._get_or_404(genre_id)
            existing = await self._find_by_name(name)
            if existing is not None and existing.id != genre.id:
                raise DuplicateResourceError(ResourceType.GENRE, "name", name)
            genre.name = name
            await self.db.commit()
        logger.info(
            f"Genre renamed: {name}",
            extra={"resource_type": "genre", "resource_id": genre_id},
        )
        return genre

    async def delete(self, genre_id: GenreId) -> None:
        async with guard_store(self.db, "delete genre"):
            genre = await self._get_or_404(genre_id)
            await self.db.delete(genre)
            await self.db.commit()
        logger.info(
            "Genre deleted",
            extra={"resource_type": "genre", "resource_id": genre_id},
        )

    async def _get_or_404(self, genre_id: GenreId) -> Genre:
        genre = await self.db.get(Genre, genre_id)
        if genre is None:
            raise ResourceNotFoundError(ResourceType.GENRE, genre_id)
        return genre

    async def _find_by_name(self, name: str) -> Genre | None:
        result = await self.db.execute(
            select(Genre).where(func.lower(Genre.name) == func.lower(name)),
        )
        return result.scalars().first()
