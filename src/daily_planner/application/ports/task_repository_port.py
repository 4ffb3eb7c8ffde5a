"""Port for owner-scoped task persistence."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Protocol


@dataclass(frozen=True)
class TaskRecord:
    """Task persistence model."""

    task_id: int
    user_id: int
    title: str
    description: str
    due_date: datetime
    is_completed: bool


@dataclass(frozen=True)
class TaskCreateInput:
    """Input payload for creating one task row."""

    user_id: int
    title: str
    description: str
    due_date: datetime


class TaskRepositoryPort(Protocol):
    """Task repository contract; every operation is scoped to one owner."""

    async def create_task(self, payload: TaskCreateInput) -> TaskRecord:
        """Insert one not-yet-completed task and return persisted row."""

    async def delete_task(self, *, user_id: int, task_id: int) -> int:
        """Delete the task when owned by user and return affected row count."""

    async def list_tasks(self, *, user_id: int) -> list[TaskRecord]:
        """Return every task owned by user."""
