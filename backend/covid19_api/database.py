"""
COVID-19 India API — Storage Handle
=====================================

What:  The storage handle (async SQLAlchemy engine + session factory) and the
       FastAPI dependency that hands a session to each request.
Why:   Centralizes all database connection logic in one place.
How:   `Storage` is constructed once by the application factory and stored on
       `app.state`. Handlers reach it only through `get_db_session`, never
       through a module-level engine.
Who:   Built by main.create_app(); used by route handlers via Depends().
When:  Verified once at startup (lifespan); sessions are created per-request.

Connection Strategy:
    pool_size=1, max_overflow=0:  exactly one live connection for the process
    pool_timeout=None:            requests queue for the connection, no timeout

    SQLite serializes writers on its own; funnelling every request through a
    single aiosqlite connection means concurrent requests wait in the pool
    instead of failing with "database is locked".
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, AsyncIterator

from fastapi import Request
from sqlalchemy import text
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import AsyncAdaptedQueuePool

from covid19_api.exceptions import StorageUnavailableError

logger = logging.getLogger(__name__)


# ── Base Model ────────────────────────────────────────────────────────────
class Base(DeclarativeBase):
    """
    Base class for all SQLAlchemy ORM models.

    The running service never calls `Base.metadata.create_all()`: the store
    file is provisioned externally. Tests use the metadata to build a
    throwaway store with the same layout.
    """
    pass


class Storage:
    """
    Owns the single connection to the case data store.

    Lifecycle:
        1. Constructed at composition time (no I/O happens here)
        2. open() verifies the store during application startup
        3. session() is entered once per request
        4. dispose() closes the connection on shutdown
    """

    def __init__(self, database_url: str, echo: bool = False):
        self.database_url = database_url
        self.engine = create_async_engine(
            database_url,
            poolclass=AsyncAdaptedQueuePool,
            pool_size=1,
            max_overflow=0,
            pool_timeout=None,
            echo=echo,
        )
        # expire_on_commit=False: rows stay readable after the write commits
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    def _store_path(self) -> Path | None:
        """Filesystem path of the store file, or None for in-memory URLs."""
        url = make_url(self.database_url)
        database = url.database
        if not database or database == ":memory:" or database.startswith("file:"):
            return None
        return Path(database)

    async def open(self) -> None:
        """
        Verify that the store exists and is a readable SQLite database.

        SQLite creates an empty file when asked to open a missing one, so the
        file's existence is checked before connecting. The probe query then
        fails for files that are not databases.

        Raises:
            StorageUnavailableError: the store cannot be used
        """
        path = self._store_path()
        if path is not None and not path.is_file():
            raise StorageUnavailableError(
                message=f"Store file not found: {path}",
                context={"database": str(path)},
            )

        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT count(*) FROM sqlite_master"))
        except SQLAlchemyError as e:
            raise StorageUnavailableError(
                message=f"Store could not be opened: {e.__cause__ or e}",
                context={"database": self.database_url, "error_type": type(e).__name__},
            ) from e

        logger.info("Storage opened: %s", path or self.database_url)

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Provide a session that commits on success and rolls back on error.

        The session always closes, returning the single connection to the
        pool for the next waiting request.
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise
            finally:
                await session.close()

    async def ping(self) -> None:
        """Runs SELECT 1; raises whatever the driver raises."""
        async with self.engine.connect() as conn:
            await conn.execute(text("SELECT 1"))

    async def dispose(self) -> None:
        """Closes the pooled connection."""
        await self.engine.dispose()


# ── Session Dependency ────────────────────────────────────────────────────
def get_storage(request: Request) -> Storage:
    """The storage handle the application was composed with."""
    return request.app.state.storage


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency that provides a database session per request.

    Example usage in a route:
        @router.get("/states/")
        async def list_states(db: AsyncSession = Depends(get_db_session)):
            return await state_service.list_states(db)

    Raises:
        Any database exceptions are propagated to the global error handler.
    """
    async with get_storage(request).session() as session:
        yield session
