"""Application service for user registration and credential verification."""

from __future__ import annotations

import logging

from daily_planner.application.ports.password_hasher_port import PasswordHasherPort
from daily_planner.application.ports.user_repository_port import (
    UserCreateInput,
    UserRecord,
    UserRepositoryPort,
)

logger = logging.getLogger(__name__)


class AccountService:
    """Register new users and authenticate existing ones."""

    def __init__(
        self,
        *,
        users: UserRepositoryPort,
        password_hasher: PasswordHasherPort,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    async def register(self, *, username: str, password: str) -> bool:
        """Create one user, returning False when the username is already taken.

        The count query is advisory only: two concurrent registrations can both
        pass it, and the store unique constraint then rejects the second insert,
        which the repository reports the same way as a taken username.
        """

        if await self._users.count_by_username(username=username) > 0:
            logger.info("username_taken username=%s", username)
            return False

        created = await self._users.create_user(
            UserCreateInput(
                username=username,
                password_hash=self._password_hasher.hash_password(password),
            )
        )
        if created is None:
            logger.info("username_taken_on_insert username=%s", username)
            return False

        logger.info("user_registered user_id=%s", created.user_id)
        return True

    async def authenticate(self, *, username: str, password: str) -> UserRecord | None:
        """Return the user for valid credentials, else None for any failure cause."""

        user = await self._users.get_by_username(username=username)
        if user is None:
            logger.info("login_failed reason=unknown_user")
            return None

        is_valid = self._password_hasher.verify_password(
            password=password,
            password_hash=user.password_hash,
        )
        if not is_valid:
            logger.info("login_failed reason=invalid_password user_id=%s", user.user_id)
            return None

        logger.info("login_success user_id=%s", user.user_id)
        return user
