# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol
from uuid import UUID

from .entities import SchemeStatus, SessionClaims, UserCredential


class CredentialStore(Protocol):
    def find_by_username(self, username: str) -> UserCredential | None: ...
    def update_password(self, user_id: int, new_hash: str, new_salt: UUID) -> None: ...
    def add(
        self,
        username: str,
        password_hash: str | None = None,
        password_salt: UUID | None = None,
    ) -> UserCredential: ...


class PasswordHasher(Protocol):
    def hash(self, password: str, salt: UUID) -> str: ...
    def verify(self, password: str, salt: UUID, hashed: str) -> SchemeStatus: ...


class TokenIssuer(Protocol):
    def issue(self, username: str, token_salt: UUID) -> str: ...
    def validate(self, token: str) -> SessionClaims: ...
