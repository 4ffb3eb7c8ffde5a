"""SQLAlchemy adapter for user registration and lookup queries."""

from __future__ import annotations

from typing import cast

import sqlalchemy as sa
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from daily_planner.application.errors import StoreError
from daily_planner.application.ports.user_repository_port import (
    UserCreateInput,
    UserRecord,
    UserRepositoryPort,
)
from daily_planner.infrastructure.db.metadata import users
from daily_planner.infrastructure.db.session import STORE_FAILURES


class SqlAlchemyUserRepository(UserRepositoryPort):
    """User repository backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def count_by_username(self, *, username: str) -> int:
        """Return how many users carry exactly this username."""

        statement = (
            sa.select(sa.func.count()).select_from(users).where(users.c.username == username)
        )

        try:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                count = result.scalar_one()
        except STORE_FAILURES as exc:
            raise StoreError(operation="count_users_by_username") from exc

        return int(count)

    async def create_user(self, payload: UserCreateInput) -> UserRecord | None:
        """Insert one user row, returning None when the unique username constraint fires."""

        statement = (
            sa.insert(users)
            .values(username=payload.username, password_hash=payload.password_hash)
            .returning(users.c.id)
        )

        try:
            async with self._session_factory() as session:
                try:
                    result = await session.execute(statement)
                    user_id = result.scalar_one()
                    await session.commit()
                except IntegrityError:
                    await session.rollback()
                    return None
        except STORE_FAILURES as exc:
            raise StoreError(operation="insert_user") from exc

        return UserRecord(
            user_id=int(user_id),
            username=payload.username,
            password_hash=payload.password_hash,
        )

    async def get_by_username(self, *, username: str) -> UserRecord | None:
        """Return user by exact username match or None."""

        statement = (
            sa.select(users.c.id, users.c.username, users.c.password_hash)
            .where(users.c.username == username)
            .limit(1)
        )

        try:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                row = result.mappings().first()
        except STORE_FAILURES as exc:
            raise StoreError(operation="select_user_by_username") from exc

        if row is None:
            return None
        return _to_user_record(row)


def _to_user_record(row: sa.RowMapping) -> UserRecord:
    return UserRecord(
        user_id=int(row["id"]),
        username=cast(str, row["username"]),
        password_hash=cast(str, row["password_hash"]),
    )
