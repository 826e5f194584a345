"""ORM Models — SQLAlchemy declarative models for the catalog entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Movie references Genre and Language by integer FK

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from filmoteca.models.genre import Genre  # noqa: F401
from filmoteca.models.language import Language  # noqa: F401
from filmoteca.models.movie import Movie  # noqa: F401
