"""Engine and session plumbing for the player store.

Nothing connects at import time; the engine is built on first use from
``DATABASE_URL`` so tests can point it elsewhere.
"""

import os
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import declarative_base
from sqlalchemy.pool import StaticPool

Base = declarative_base()

_engine: Optional[AsyncEngine] = None
_session_factory: Optional[async_sessionmaker] = None


def database_url() -> str:
    """Return ``DATABASE_URL`` with plain Postgres URLs routed to asyncpg."""

    url = os.getenv("DATABASE_URL")
    if not url:
        raise RuntimeError("DATABASE_URL environment variable is required")
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def get_engine() -> AsyncEngine:
    global _engine, _session_factory

    if _engine is None:
        url = database_url()
        if url.startswith("sqlite") and ":memory:" in url:
            # Every session has to see the same in-memory database.
            _engine = create_async_engine(url, poolclass=StaticPool)
        else:
            _engine = create_async_engine(url, pool_pre_ping=True)
        _session_factory = async_sessionmaker(_engine, expire_on_commit=False)
    return _engine


async def dispose_engine() -> None:
    """Close pooled connections and forget the engine."""

    global _engine, _session_factory

    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None


async def create_schema(*, drop_existing: bool = False) -> None:
    """Create the player table, optionally dropping it first."""

    from . import models  # noqa: F401  registers PlayerRow on Base

    async with get_engine().begin() as conn:
        if drop_existing:
            await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)


@asynccontextmanager
async def session_scope() -> AsyncIterator[AsyncSession]:
    """Open a session on the shared engine and close it afterwards."""

    get_engine()
    assert _session_factory is not None  # for type checkers
    async with _session_factory() as session:
        yield session
