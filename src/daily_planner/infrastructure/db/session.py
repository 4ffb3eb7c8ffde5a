"""Async SQLAlchemy engine and session factory helpers."""

from __future__ import annotations

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

# Drivers raise socket errors (refused/lost connections) and bind-time overflow
# errors without wrapping them in SQLAlchemyError.
STORE_FAILURES: tuple[type[Exception], ...] = (SQLAlchemyError, OSError, OverflowError)


def create_database_engine(database_url: str) -> AsyncEngine:
    """Create the async engine for the provided database URL."""

    return create_async_engine(database_url)


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create a reusable async session factory bound to an existing engine."""

    return async_sessionmaker(engine, expire_on_commit=False)


def create_session_factory(database_url: str) -> async_sessionmaker[AsyncSession]:
    """Create a reusable async session factory for the provided database URL."""

    return build_session_factory(create_database_engine(database_url))
