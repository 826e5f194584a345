"""Genre Routes — /genres listing, create, rename, delete.

Invariants:
    - Create answers 201 with the new record; update answers 200 with the record
    - Delete answers 200 with a localized confirmation message
"""

import logging

from fastapi import APIRouter, Depends, status

from filmoteca.api.dependencies import get_genre_catalog, get_locale
from filmoteca.core.domain_types import GenreId, Locale
from filmoteca.core.language_strings import render
from filmoteca.schemas.genre import GenreResponse, GenreWrite, MessageResponse
from filmoteca.services.genre_catalog import GenreCatalog

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/genres", tags=["genres"])


@router.get("", response_model=list[GenreResponse])
async def list_genres(catalog: GenreCatalog = Depends(get_genre_catalog)):
    """All genres ordered by name."""
    return await catalog.list_genres()


@router.post(
    "", response_model=GenreResponse, status_code=status.HTTP_201_CREATED,
)
async def create_genre(
    body: GenreWrite, catalog: GenreCatalog = Depends(get_genre_catalog),
):
    return await catalog.create(body.name)


@router.put("/{genre_id}", response_model=GenreResponse)
async def update_genre(
    genre_id: int,
    body: GenreWrite,
    catalog: GenreCatalog = Depends(get_genre_catalog),
):
    return await catalog.update(GenreId(genre_id), body.name)


@router.delete("/{genre_id}", response_model=MessageResponse)
async def delete_genre(
    genre_id: int,
    catalog: GenreCatalog = Depends(get_genre_catalog),
    locale: Locale = Depends(get_locale),
):
    await catalog.delete(GenreId(genre_id))
    return MessageResponse(message=render(locale, "genre_deleted"))
