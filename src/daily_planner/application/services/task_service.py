"""Application service for owner-scoped task operations."""

from __future__ import annotations

import logging
from datetime import datetime

from daily_planner.application.ports.task_repository_port import (
    TaskCreateInput,
    TaskRecord,
    TaskRepositoryPort,
)

logger = logging.getLogger(__name__)


class TaskService:
    """Add, delete and list tasks for an explicitly passed owner id."""

    def __init__(self, *, tasks: TaskRepositoryPort) -> None:
        self._tasks = tasks

    async def add_task(
        self,
        *,
        owner_id: int,
        title: str,
        description: str,
        due_date: datetime,
    ) -> TaskRecord:
        """Persist one new task for the owner; new tasks are never completed."""

        task = await self._tasks.create_task(
            TaskCreateInput(
                user_id=owner_id,
                title=title,
                description=description,
                due_date=due_date,
            )
        )
        logger.info("task_added owner_id=%s task_id=%s", owner_id, task.task_id)
        return task

    async def delete_task(self, *, owner_id: int, task_id: int) -> int:
        """Delete the owner's task; unknown or foreign ids are a silent no-op."""

        deleted = await self._tasks.delete_task(user_id=owner_id, task_id=task_id)
        logger.info("task_deleted owner_id=%s task_id=%s rows=%s", owner_id, task_id, deleted)
        return deleted

    async def list_tasks(self, *, owner_id: int) -> list[TaskRecord]:
        """Return all tasks owned by the owner (possibly empty)."""

        return await self._tasks.list_tasks(user_id=owner_id)
