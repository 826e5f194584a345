"""Database Infrastructure — SQLAlchemy declarative Base.

Invariants:
    - All ORM models inherit from db.base.Base
    - Engines and sessions live in infrastructure/database.py, not here
"""
