"""Language ORM — read-only lookup table for movie languages."""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from filmoteca.db.base import Base


class Language(Base):
    """Language entity. Rows are provisioned outside the API."""
    __tablename__ = "languages"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
