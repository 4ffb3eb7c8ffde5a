"""Interactive text menu driving account and task services."""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime
from typing import Protocol, TypeVar

from daily_planner.application.errors import StoreError
from daily_planner.application.ports.task_repository_port import TaskRecord
from daily_planner.application.ports.user_repository_port import UserRecord
from daily_planner.domain.input_parsers import InputParseError, parse_due_date, parse_task_id
from daily_planner.domain.session_state import SessionState, assert_transition

logger = logging.getLogger(__name__)

T = TypeVar("T")

WELCOME_BANNER = "Welcome to the daily planner!"
ANONYMOUS_MENU = ("1. Register", "2. Log in", "3. Exit")
AUTHENTICATED_MENU = ("4. Add task", "5. Delete task", "6. List tasks", "7. Log out")
INVALID_CHOICE = "Invalid choice. Please pick an action from the list."


class ConsolePort(Protocol):
    """Line-oriented console contract used by the menu."""

    def read_line(self, prompt: str) -> str | None:
        """Show prompt and return one input line, or None at end of input."""

    def write_line(self, text: str) -> None:
        """Write one output line."""


class AccountServicePort(Protocol):
    """Account operations required by the menu."""

    async def register(self, *, username: str, password: str) -> bool:
        """Create a user, returning False when the username is taken."""

    async def authenticate(self, *, username: str, password: str) -> UserRecord | None:
        """Return user for valid credentials or None."""


class TaskServicePort(Protocol):
    """Task operations required by the menu."""

    async def add_task(
        self,
        *,
        owner_id: int,
        title: str,
        description: str,
        due_date: datetime,
    ) -> TaskRecord:
        """Persist one task for the owner."""

    async def delete_task(self, *, owner_id: int, task_id: int) -> int:
        """Delete one owned task, silently ignoring unknown ids."""

    async def list_tasks(self, *, owner_id: int) -> list[TaskRecord]:
        """Return tasks owned by the owner."""


class StdioConsole:
    """Console adapter over process stdin/stdout."""

    def read_line(self, prompt: str) -> str | None:
        try:
            return input(f"{prompt}\n")
        except EOFError:
            return None

    def write_line(self, text: str) -> None:
        print(text, flush=True)


class _ConsoleClosedError(Exception):
    """Raised internally when the console reaches end of input."""


class PlannerMenu:
    """Run the anonymous/authenticated menu loop until the user exits."""

    def __init__(
        self,
        *,
        console: ConsolePort,
        accounts: AccountServicePort,
        tasks: TaskServicePort,
    ) -> None:
        self._console = console
        self._accounts = accounts
        self._tasks = tasks
        self._state = SessionState.ANONYMOUS
        self._current_user: UserRecord | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    async def run(self) -> None:
        """Process menu commands one at a time until exit or end of input."""

        self._console.write_line(WELCOME_BANNER)
        while self._state is not SessionState.EXITED:
            try:
                if self._current_user is None:
                    await self._anonymous_step()
                else:
                    await self._authenticated_step(self._current_user)
            except _ConsoleClosedError:
                self._transition(SessionState.EXITED)
            except StoreError as exc:
                logger.exception("menu_action_failed operation=%s", exc.operation)
                self._console.write_line(
                    "The operation failed due to a database error. Please try again."
                )

    async def _anonymous_step(self) -> None:
        for line in ANONYMOUS_MENU:
            self._console.write_line(line)
        choice = self._prompt("Choose an action:").strip()

        if choice == "1":
            await self._register()
        elif choice == "2":
            await self._log_in()
        elif choice == "3":
            self._transition(SessionState.EXITED)
        else:
            self._console.write_line(INVALID_CHOICE)

    async def _authenticated_step(self, user: UserRecord) -> None:
        self._console.write_line(f"Welcome, {user.username}!")
        for line in AUTHENTICATED_MENU:
            self._console.write_line(line)
        choice = self._prompt("Choose an action:").strip()

        if choice == "4":
            await self._add_task(user)
        elif choice == "5":
            await self._delete_task(user)
        elif choice == "6":
            await self._list_tasks(user)
        elif choice == "7":
            self._current_user = None
            self._transition(SessionState.ANONYMOUS)
        else:
            self._console.write_line(INVALID_CHOICE)

    async def _register(self) -> None:
        username = self._prompt("Enter username:")
        password = self._prompt("Enter password:")

        if await self._accounts.register(username=username, password=password):
            self._console.write_line("Registration successful.")
        else:
            self._console.write_line("A user with that username already exists.")
        self._transition(SessionState.ANONYMOUS)

    async def _log_in(self) -> None:
        username = self._prompt("Enter username:")
        password = self._prompt("Enter password:")

        user = await self._accounts.authenticate(username=username, password=password)
        if user is None:
            self._console.write_line("Invalid username or password.")
            return
        self._transition(SessionState.AUTHENTICATED)
        self._current_user = user

    async def _add_task(self, user: UserRecord) -> None:
        title = self._prompt("Enter task title:")
        description = self._prompt("Enter task description:")
        due_date = self._prompt_parsed(
            "Enter due date (YYYY-MM-DD):",
            "Invalid date format, try again (YYYY-MM-DD):",
            parse_due_date,
        )

        await self._tasks.add_task(
            owner_id=user.user_id,
            title=title,
            description=description,
            due_date=due_date,
        )
        self._console.write_line("Task added.")

    async def _delete_task(self, user: UserRecord) -> None:
        task_id = self._prompt_parsed(
            "Enter the ID of the task to delete:",
            "Invalid ID format, try again:",
            parse_task_id,
        )

        await self._tasks.delete_task(owner_id=user.user_id, task_id=task_id)
        self._console.write_line("Task deleted.")

    async def _list_tasks(self, user: UserRecord) -> None:
        tasks = await self._tasks.list_tasks(owner_id=user.user_id)
        if not tasks:
            self._console.write_line("You have no tasks.")
            return
        for task in tasks:
            self._console.write_line(format_task_line(task))

    def _prompt(self, prompt: str) -> str:
        line = self._console.read_line(prompt)
        if line is None:
            raise _ConsoleClosedError()
        return line

    def _prompt_parsed(self, prompt: str, retry_prompt: str, parse: Callable[[str], T]) -> T:
        raw = self._prompt(prompt)
        while True:
            try:
                return parse(raw)
            except InputParseError as exc:
                logger.debug("console_input_rejected reason=%s", exc.reason)
                raw = self._prompt(retry_prompt)

    def _transition(self, to_state: SessionState) -> None:
        assert_transition(self._state, to_state)
        self._state = to_state


def format_task_line(task: TaskRecord) -> str:
    """Render one task as a single console line."""

    completed = "yes" if task.is_completed else "no"
    return (
        f"ID: {task.task_id}, Title: {task.title}, Description: {task.description}, "
        f"Due: {task.due_date.date().isoformat()}, Completed: {completed}"
    )
