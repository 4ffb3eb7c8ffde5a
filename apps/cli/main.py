"""planner CLI entrypoint."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from daily_planner.application.services.account_service import AccountService
from daily_planner.application.services.task_service import TaskService
from daily_planner.config.settings import Settings, load_settings
from daily_planner.infrastructure.console.menu import ConsolePort, PlannerMenu, StdioConsole
from daily_planner.infrastructure.db.session import (
    build_session_factory,
    create_database_engine,
    create_session_factory,
)
from daily_planner.infrastructure.db.task_repository import SqlAlchemyTaskRepository
from daily_planner.infrastructure.db.user_repository import SqlAlchemyUserRepository
from daily_planner.infrastructure.logging import configure_logging
from daily_planner.infrastructure.security.password_hasher import build_password_hasher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlannerServices:
    """Composed application services used by the menu."""

    accounts: AccountService
    tasks: TaskService


def build_services(
    *,
    settings: Settings,
    session_factory: async_sessionmaker[AsyncSession],
) -> PlannerServices:
    """Compose account and task services with SQLAlchemy repositories."""

    return PlannerServices(
        accounts=AccountService(
            users=SqlAlchemyUserRepository(session_factory),
            password_hasher=build_password_hasher(settings.password_hash_scheme),
        ),
        tasks=TaskService(tasks=SqlAlchemyTaskRepository(session_factory)),
    )


def build_menu(
    *,
    settings: Settings,
    session_factory: async_sessionmaker[AsyncSession] | None = None,
    console: ConsolePort | None = None,
) -> PlannerMenu:
    """Build the interactive menu bound to composed services."""

    services = build_services(
        settings=settings,
        session_factory=session_factory or create_session_factory(settings.database_url),
    )
    return PlannerMenu(
        console=console or StdioConsole(),
        accounts=services.accounts,
        tasks=services.tasks,
    )


async def run_cli(*, settings: Settings, console: ConsolePort | None = None) -> None:
    """Run the menu on a dedicated engine and dispose the engine on every exit path."""

    engine = create_database_engine(settings.database_url)
    menu = build_menu(
        settings=settings,
        session_factory=build_session_factory(engine),
        console=console,
    )
    try:
        await menu.run()
    finally:
        await engine.dispose()


async def _run_cli() -> None:
    settings = load_settings()
    configure_logging(level=settings.log_level)
    logger.info("planner_starting hash_scheme=%s", settings.password_hash_scheme)

    await run_cli(settings=settings)
    logger.info("planner_stopped")


def main() -> None:
    """Run the interactive planner menu until the user exits."""

    asyncio.run(_run_cli())


if __name__ == "__main__":
    main()
