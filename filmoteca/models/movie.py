"""Movie ORM — catalog movies with their genre and language.

Invariants:
    - title is unique ignoring case (functional unique index on lower(title))
    - genre_id and language_id always reference existing rows (store-enforced FKs)
    - genre and language load eagerly with the movie (selectin): list
      responses embed both without lazy IO in async context

Design Decisions:
    - No cascade from Genre/Language: the application never deletes dependents
"""

from datetime import date

from sqlalchemy import String, Integer, Date, ForeignKey, Index, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from filmoteca.db.base import Base


class Movie(Base):
    """Movie entity."""
    __tablename__ = "movies"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    genre_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("genres.id"), nullable=False,
    )
    language_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("languages.id"), nullable=False,
    )
    oscar_count: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0,
    )
    release_date: Mapped[date] = mapped_column(Date, nullable=False)

    genre: Mapped["Genre"] = relationship("Genre", lazy="selectin")
    language: Mapped["Language"] = relationship("Language", lazy="selectin")


Index("uq_movies_title_lower", func.lower(Movie.title), unique=True)
