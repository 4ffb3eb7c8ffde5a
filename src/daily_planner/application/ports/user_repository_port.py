"""Port for user registration and lookup operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class UserRecord:
    """User persistence model."""

    user_id: int
    username: str
    password_hash: str


@dataclass(frozen=True)
class UserCreateInput:
    """Input payload for creating one user row."""

    username: str
    password_hash: str


class UserRepositoryPort(Protocol):
    """User repository contract."""

    async def count_by_username(self, *, username: str) -> int:
        """Return how many users carry exactly this username."""

    async def create_user(self, payload: UserCreateInput) -> UserRecord | None:
        """Insert one user and return it, or None when the username is already taken."""

    async def get_by_username(self, *, username: str) -> UserRecord | None:
        """Return user by exact username match or None."""
