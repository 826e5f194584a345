"""Genre ORM — catalog genres referenced by movies.

Invariants:
    - name is unique ignoring case (functional unique index on lower(name))
    - Deleting a genre is not guarded here; FK enforcement belongs to the store
"""

from sqlalchemy import String, Integer, Index, func
from sqlalchemy.orm import Mapped, mapped_column

from filmoteca.db.base import Base


class Genre(Base):
    """Genre entity."""
    __tablename__ = "genres"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)


Index("uq_genres_name_lower", func.lower(Genre.name), unique=True)
