"""Database Session Manager — async engine, sessions with automatic rollback, health checks.

Invariants:
    - One DatabaseSessionManager per application, owned by app.state (no module global)
    - Every session auto-rolls-back on exception (no partial commits leak)
    - SQLite connections run with PRAGMA foreign_keys=ON so FK integrity matches PostgreSQL
    - SQLite lower() is Unicode-aware (built-in folds ASCII only), so lower(name)
      checks and indexes treat "AÇÃO" and "ação" as equal, as PostgreSQL does
    - All SQLAlchemy exceptions escaping a session are mapped to DatabaseError (core/errors.py)

Design Decisions:
    - Manager built in the FastAPI lifespan and disposed on shutdown: lifecycle tied
      to process start/stop, handlers reach it through get_db()
    - expire_on_commit=False: prevents lazy-load issues in async context
    - Pool sizing only for server databases; in-memory SQLite uses StaticPool so
      every session sees the same database
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy import event, text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool

from filmoteca.core.errors import DatabaseError
from filmoteca.db.base import Base

logger = logging.getLogger(__name__)


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def _configure_sqlite_connection(dbapi_connection, connection_record) -> None:
    dbapi_connection.create_function(
        "lower", 1, _unicode_lower, deterministic=True,
    )
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 20,
        max_overflow: int = 10,
        echo: bool = False,
    ):
        is_sqlite = database_url.startswith("sqlite")
        engine_kwargs: dict = {"echo": echo}
        if is_sqlite:
            if ":memory:" in database_url:
                engine_kwargs["poolclass"] = StaticPool
                engine_kwargs["connect_args"] = {"check_same_thread": False}
        else:
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_pre_ping=True,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        if is_sqlite:
            event.listen(
                self.engine.sync_engine, "connect", _configure_sqlite_connection,
            )
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(f"DB integrity error: {e}")
            raise DatabaseError("commit") from e
        except OperationalError as e:
            await session.rollback()
            logger.error(f"DB operational error: {e}")
            raise DatabaseError("execute") from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(f"DB driver error: {e}")
            raise DatabaseError("query") from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise DatabaseError("unknown") from e
        finally:
            await session.close()

    async def create_all(self) -> None:
        """Create any missing tables from the ORM metadata."""
        import filmoteca.models  # noqa: F401  (registers every table on Base.metadata)

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def close(self) -> None:
        await self.engine.dispose()


def get_db_manager(request: Request) -> DatabaseSessionManager:
    """The manager the lifespan placed on app.state."""
    manager = getattr(request.app.state, "db_manager", None)
    if manager is None:
        raise RuntimeError("Database not initialized")
    return manager


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with get_db_manager(request).session() as session:
        yield session


@asynccontextmanager
async def guard_store(db: AsyncSession, operation: str) -> AsyncGenerator[None, None]:
    """Roll back and raise DatabaseError for any store failure inside the block.

    Services wrap each store round trip with this so the caller sees a
    FilmotecaError (500, generic message) and never a raw SQLAlchemy exception.
    """
    try:
        yield
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Store failure during {operation}: {e}", exc_info=True)
        raise DatabaseError(operation) from e
