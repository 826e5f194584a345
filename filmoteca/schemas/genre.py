"""Genre Schemas — name is trimmed; presence is checked by the genre catalog.

Invariants:
    - GenreWrite.name is at most 100 chars; whitespace-only collapses to None
    - A missing name is not a schema error: GenreCatalog raises RequiredFieldError,
      which keeps the localized "field is required" message for this case

Design Decisions:
    - Optional name over required Field: one error path (RequiredFieldError) for
      absent, null and blank names
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GenreWrite(BaseModel):
    """Body for POST /genres and PUT /genres/{id}."""
    name: str | None = Field(None, max_length=100)

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str | None) -> str | None:
        if v is None:
            return v
        return v.strip() or None


class GenreResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class MessageResponse(BaseModel):
    message: str
