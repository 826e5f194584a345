"""Domain Types — identity types and enums shared across the catalog.

Invariants:
    - MovieId, GenreId, LanguageId wrap int primary keys
    - Locale values match the LOCALE setting values

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

MovieId = NewType("MovieId", int)
GenreId = NewType("GenreId", int)
LanguageId = NewType("LanguageId", int)


# ─── Enums ───────────────────────────────────────────────────────

class Locale(str, Enum):
    """Locales available for user-facing messages."""
    EN = "en"
    PT_BR = "pt-BR"


class ResourceType(str, Enum):
    """Catalog resources exposed over HTTP."""
    MOVIE = "movie"
    GENRE = "genre"
    LANGUAGE = "language"
