"""SQLAlchemy adapter for owner-scoped task persistence."""

from __future__ import annotations

from datetime import datetime
from typing import cast

import sqlalchemy as sa
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from daily_planner.application.errors import StoreError
from daily_planner.application.ports.task_repository_port import (
    TaskCreateInput,
    TaskRecord,
    TaskRepositoryPort,
)
from daily_planner.infrastructure.db.metadata import tasks
from daily_planner.infrastructure.db.session import STORE_FAILURES


class SqlAlchemyTaskRepository(TaskRepositoryPort):
    """Task repository backed by SQLAlchemy async sessions."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def create_task(self, payload: TaskCreateInput) -> TaskRecord:
        """Insert one task row with `is_completed = false` and return it."""

        statement = (
            sa.insert(tasks)
            .values(
                user_id=payload.user_id,
                title=payload.title,
                description=payload.description,
                due_date=payload.due_date,
                is_completed=False,
            )
            .returning(tasks.c.id)
        )

        try:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                task_id = result.scalar_one()
                await session.commit()
        except STORE_FAILURES as exc:
            raise StoreError(operation="insert_task") from exc

        return TaskRecord(
            task_id=int(task_id),
            user_id=payload.user_id,
            title=payload.title,
            description=payload.description,
            due_date=payload.due_date,
            is_completed=False,
        )

    async def delete_task(self, *, user_id: int, task_id: int) -> int:
        """Delete the task matching both ids and return affected row count."""

        statement = sa.delete(tasks).where(
            tasks.c.id == task_id,
            tasks.c.user_id == user_id,
        )

        try:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                await session.commit()
        except STORE_FAILURES as exc:
            raise StoreError(operation="delete_task") from exc

        return int(result.rowcount or 0)

    async def list_tasks(self, *, user_id: int) -> list[TaskRecord]:
        """Return every task owned by user, ordered by task id."""

        statement = (
            sa.select(
                tasks.c.id,
                tasks.c.user_id,
                tasks.c.title,
                tasks.c.description,
                tasks.c.due_date,
                tasks.c.is_completed,
            )
            .where(tasks.c.user_id == user_id)
            .order_by(tasks.c.id)
        )

        try:
            async with self._session_factory() as session:
                result = await session.execute(statement)
                rows = result.mappings().all()
        except STORE_FAILURES as exc:
            raise StoreError(operation="select_tasks_by_owner") from exc

        return [_to_task_record(row) for row in rows]


def _to_task_record(row: sa.RowMapping) -> TaskRecord:
    return TaskRecord(
        task_id=int(row["id"]),
        user_id=int(row["user_id"]),
        title=cast(str, row["title"]),
        description=cast(str, row["description"]),
        due_date=cast(datetime, row["due_date"]),
        is_completed=bool(row["is_completed"]),
    )
