# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from coverhub.application.services.scheme_migration import SchemeMigrator
from coverhub.domain.exceptions import (
    MalformedHashError,
    PasswordMismatchError,
    SchemeMigrationError,
)
from coverhub.domain.users.exceptions import (
    CorruptCredentialError,
    LoginPasswordIncorrectError,
    LoginUserHasNoPasswordError,
    LoginUsernameNotFoundError,
)
from coverhub.domain.users.repositories import CredentialStore, PasswordHasher, TokenIssuer
from coverhub.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: CredentialStore,
        tokens: TokenIssuer,
        password_hasher: PasswordHasher,
        migrator: SchemeMigrator,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher
        self._migrator = migrator

    def execute(self, username: str, password: str) -> str:
        user = self._users.find_by_username(username)
        if user is None:
            raise LoginUsernameNotFoundError()

        if user.password_hash is None or user.password_salt is None:
            raise LoginUserHasNoPasswordError(user_id=user.id)

        try:
            status = self._password_hasher.verify(
                password, user.password_salt, user.password_hash
            )
        except PasswordMismatchError as exc:
            raise LoginPasswordIncorrectError(user_id=user.id) from exc
        except MalformedHashError as exc:
            logger.critical(f"auth.login: corrupt password hash user_id={user.id}: {exc}")
            raise CorruptCredentialError(user_id=user.id) from exc

        try:
            self._migrator.migrate_if_outdated(status, user.id, password)
        except SchemeMigrationError as exc:
            logger.opt(exception=exc).warning(
                f"auth.login: scheme upgrade skipped user_id={user.id}"
            )

        return self._tokens.issue(user.username, user.token_salt)
