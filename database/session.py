"""
Async SQLAlchemy engine and session handle.

A ``Database`` is created once at startup, stored on ``app.state`` and
disposed at shutdown; request handlers get a session through the
``get_db_session`` dependency.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, AsyncIterator

from fastapi import Request
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from auth.errors import StorageUnavailable
from database.models import Base

logger = logging.getLogger(__name__)


class Database:
    """Owns the engine and session factory for one process."""

    def __init__(self, url: str, *, echo: bool = False) -> None:
        engine_kwargs = {"echo": echo, "pool_pre_ping": True}
        if not url.startswith("sqlite"):
            engine_kwargs.update(pool_size=10, max_overflow=20, pool_recycle=3600)
        self.engine = create_async_engine(url, **engine_kwargs)
        self.session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    async def create_schema(self) -> None:
        """Create missing tables; existing ones are left untouched."""
        try:
            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
        except (SQLAlchemyError, OSError) as exc:
            logger.error("Could not connect to the database: %s", exc)
            raise StorageUnavailable() from exc
        logger.info("Database connected and tables ready.")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """Transactional scope: commit on success, rollback on error."""
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    async def dispose(self) -> None:
        await self.engine.dispose()
        logger.info("Database connections closed.")


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Dependency function — use in FastAPI `Depends(get_db_session)`."""
    database: Database = request.app.state.database
    async with database.session() as session:
        yield session
