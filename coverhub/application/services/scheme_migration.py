# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from uuid import UUID, uuid4

from coverhub.domain.exceptions import SchemeMigrationError
from coverhub.domain.users.entities import SchemeStatus
from coverhub.domain.users.repositories import CredentialStore, PasswordHasher
from coverhub.shared.logging import logger


class SchemeMigrator:
    """Re-hashes an already verified password under the default scheme."""

    def __init__(
        self,
        *,
        users: CredentialStore,
        password_hasher: PasswordHasher,
        salt_factory: Callable[[], UUID] = uuid4,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher
        self._salt_factory = salt_factory

    def migrate_if_outdated(self, status: SchemeStatus, user_id: int, password: str) -> bool:
        """Return ``True`` when a new hash was written.

        Must only be called once ``password`` has been verified. Hashing and
        store failures are raised as :class:`SchemeMigrationError`.
        """
        if status is SchemeStatus.CURRENT:
            return False

        try:
            new_salt = self._salt_factory()
            new_hash = self._password_hasher.hash(password, new_salt)
            self._users.update_password(user_id, new_hash, new_salt)
        except Exception as exc:
            raise SchemeMigrationError(user_id) from exc

        logger.info(f"auth.migrate: password hash upgraded user_id={user_id}")
        return True


__all__ = ["SchemeMigrator"]
