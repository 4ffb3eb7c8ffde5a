"""Password hasher adapters."""

from __future__ import annotations

import base64
import hashlib

import bcrypt

from daily_planner.application.ports.password_hasher_port import PasswordHasherPort


class Sha256PasswordHasher(PasswordHasherPort):
    """Unsalted SHA-256 hex digest, compatible with hashes stored by earlier releases.

    Known weakness: no salt and no work factor. Use `BcryptPasswordHasher` for
    deployments that do not need to read existing digests.
    """

    def hash_password(self, password: str) -> str:
        return hashlib.sha256(password.encode("utf-8")).hexdigest()

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        return self.hash_password(password) == password_hash


class BcryptPasswordHasher(PasswordHasherPort):
    """Password hashing adapter using bcrypt.

    bcrypt accepts at most 72 bytes, so passwords are pre-hashed to a 44-byte
    base64 SHA-256 digest.
    """

    def hash_password(self, password: str) -> str:
        return bcrypt.hashpw(_prehash(password), bcrypt.gensalt()).decode("utf-8")

    def verify_password(self, *, password: str, password_hash: str) -> bool:
        try:
            return bcrypt.checkpw(_prehash(password), password_hash.encode("utf-8"))
        except ValueError:
            return False


def _prehash(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def build_password_hasher(scheme: str) -> PasswordHasherPort:
    """Return the hasher adapter for a configured scheme name."""

    if scheme == "sha256":
        return Sha256PasswordHasher()
    if scheme == "bcrypt":
        return BcryptPasswordHasher()
    raise ValueError(f"unsupported password hash scheme: {scheme}")
