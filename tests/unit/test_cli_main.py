from __future__ import annotations

from pathlib import Path

import pytest

from sqlalchemy.ext.asyncio import AsyncEngine

from apps.cli.main import build_menu, build_services, run_cli
from daily_planner.application.services.account_service import AccountService
from daily_planner.application.services.task_service import TaskService
from daily_planner.config.settings import Settings
from daily_planner.infrastructure.console.menu import PlannerMenu
from daily_planner.infrastructure.db.session import create_session_factory
from daily_planner.infrastructure.security.password_hasher import (
    BcryptPasswordHasher,
    Sha256PasswordHasher,
)


def _settings(monkeypatch: pytest.MonkeyPatch, tmp_path: Path, *, scheme: str) -> Settings:
    monkeypatch.setenv("DATABASE_URL", f"sqlite+aiosqlite:///{tmp_path / 'cli.db'}")
    monkeypatch.setenv("PASSWORD_HASH_SCHEME", scheme)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    return Settings(_env_file=None)


def test_build_services_uses_configured_hash_scheme(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    sha_settings = _settings(monkeypatch, tmp_path, scheme="sha256")
    services = build_services(
        settings=sha_settings,
        session_factory=create_session_factory(sha_settings.database_url),
    )
    assert isinstance(services.accounts, AccountService)
    assert isinstance(services.tasks, TaskService)
    assert isinstance(services.accounts._password_hasher, Sha256PasswordHasher)

    bcrypt_settings = _settings(monkeypatch, tmp_path, scheme="bcrypt")
    services = build_services(
        settings=bcrypt_settings,
        session_factory=create_session_factory(bcrypt_settings.database_url),
    )
    assert isinstance(services.accounts._password_hasher, BcryptPasswordHasher)


def test_build_menu_starts_anonymous(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    settings = _settings(monkeypatch, tmp_path, scheme="sha256")

    menu = build_menu(settings=settings)

    assert isinstance(menu, PlannerMenu)
    assert menu.state == "anonymous"


class _ClosedConsole:
    def read_line(self, prompt: str) -> str | None:
        _ = prompt
        return None

    def write_line(self, text: str) -> None:
        _ = text


class _BrokenConsole(_ClosedConsole):
    def read_line(self, prompt: str) -> str | None:
        _ = prompt
        raise RuntimeError("terminal gone")


def _record_dispose(monkeypatch: pytest.MonkeyPatch) -> list[AsyncEngine]:
    disposed: list[AsyncEngine] = []

    async def fake_dispose(self: AsyncEngine, close: bool = True) -> None:
        _ = close
        disposed.append(self)

    monkeypatch.setattr(AsyncEngine, "dispose", fake_dispose)
    return disposed


@pytest.mark.asyncio
async def test_run_cli_disposes_engine_after_menu_exits(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    settings = _settings(monkeypatch, tmp_path, scheme="sha256")
    disposed = _record_dispose(monkeypatch)

    await run_cli(settings=settings, console=_ClosedConsole())

    assert len(disposed) == 1


@pytest.mark.asyncio
async def test_run_cli_disposes_engine_when_menu_raises(
    monkeypatch: pytest.MonkeyPatch,
    tmp_path: Path,
) -> None:
    settings = _settings(monkeypatch, tmp_path, scheme="sha256")
    disposed = _record_dispose(monkeypatch)

    with pytest.raises(RuntimeError, match="terminal gone"):
        await run_cli(settings=settings, console=_BrokenConsole())

    assert len(disposed) == 1
