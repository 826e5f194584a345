"""Movie Routes — /movies listing, genre filter, create, partial update, delete.

Invariants:
    - GET /movies/{genre_name} is a filter: no matching genre means 200 []
    - Mutations answer with an empty body (201 create, 200 update/delete)
    - Errors raised by MovieCatalog are rendered by the global error handlers
"""

import logging

from fastapi import APIRouter, Depends, Response, status

from filmoteca.api.dependencies import get_movie_catalog
from filmoteca.core.domain_types import MovieId
from filmoteca.schemas.movie import MovieCreate, MovieResponse, MovieUpdate
from filmoteca.services.movie_catalog import MovieCatalog

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=list[MovieResponse])
async def list_movies(catalog: MovieCatalog = Depends(get_movie_catalog)):
    """All movies ordered by title, with genre and language."""
    return await catalog.list_movies()


@router.get("/{genre_name}", response_model=list[MovieResponse])
async def list_movies_by_genre(
    genre_name: str, catalog: MovieCatalog = Depends(get_movie_catalog),
):
    """Movies of one genre, matched by name ignoring case."""
    return await catalog.list_by_genre_name(genre_name)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_movie(
    body: MovieCreate, catalog: MovieCatalog = Depends(get_movie_catalog),
):
    await catalog.create(body)
    return Response(status_code=status.HTTP_201_CREATED)


@router.put("/{movie_id}")
async def update_movie(
    movie_id: int,
    body: MovieUpdate,
    catalog: MovieCatalog = Depends(get_movie_catalog),
):
    """Partial update: only fields present in the body change."""
    await catalog.update(MovieId(movie_id), body.changes())
    return Response(status_code=status.HTTP_200_OK)


@router.delete("/{movie_id}")
async def delete_movie(
    movie_id: int, catalog: MovieCatalog = Depends(get_movie_catalog),
):
    await catalog.delete(MovieId(movie_id))
    return Response(status_code=status.HTTP_200_OK)
