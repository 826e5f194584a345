"""Movie Schemas — create body, partial update body, and embedded response.

Invariants:
    - MovieCreate requires every column; release_date parsed from an ISO date string
    - MovieUpdate fields are all optional; only supplied, non-null fields are applied
    - MovieResponse embeds the genre and language records

Design Decisions:
    - changes() over passing the model around: the service receives a plain dict of
      exactly the fields to merge, so an absent release_date can never null the column
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator

from filmoteca.schemas.genre import GenreResponse
from filmoteca.schemas.language import LanguageResponse


def _strip_title(v: str | None) -> str | None:
    if v is None:
        return v
    v = v.strip()
    if not v:
        raise ValueError("title cannot be empty or whitespace")
    return v


class MovieCreate(BaseModel):
    """Body for POST /movies."""
    title: str = Field(max_length=255)
    genre_id: int
    language_id: int
    oscar_count: int = Field(ge=0)
    release_date: date

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str) -> str:
        return _strip_title(v)


class MovieUpdate(BaseModel):
    """Body for PUT /movies/{id} (partial update)."""
    title: str | None = Field(None, max_length=255)
    genre_id: int | None = None
    language_id: int | None = None
    oscar_count: int | None = Field(None, ge=0)
    release_date: date | None = None

    @field_validator("title")
    @classmethod
    def strip_title(cls, v: str | None) -> str | None:
        return _strip_title(v)

    def changes(self) -> dict:
        """Fields to merge over the stored movie."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class MovieResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    genre_id: int
    language_id: int
    oscar_count: int
    release_date: date
    genre: GenreResponse
    language: LanguageResponse
