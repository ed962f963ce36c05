# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus
from uuid import UUID, uuid4

from coverhub.domain.users.entities import UserCredential
from coverhub.domain.users.repositories import CredentialStore
from coverhub.infrastructure.db.models import User
from coverhub.infrastructure.db.session import session_scope
from coverhub.shared.errors.base import InfrastructureError


def _to_domain(row: User) -> UserCredential:
    return UserCredential(
        id=row.id,
        username=row.username,
        password_hash=row.password_hash,
        password_salt=row.password_salt,
        token_salt=row.token_salt,
    )


class SqlAlchemyUserRepository(CredentialStore):
    def find_by_username(self, username: str) -> UserCredential | None:
        with session_scope() as session:
            row = session.query(User).filter(User.username == username).first()
            if not row:
                return None
            return _to_domain(row)

    def update_password(self, user_id: int, new_hash: str, new_salt: UUID) -> None:
        with session_scope() as session:
            updated = (
                session.query(User)
                .filter(User.id == user_id)
                .update(
                    {User.password_hash: new_hash, User.password_salt: new_salt},
                    synchronize_session=False,
                )
            )
            if not updated:
                raise InfrastructureError(
                    "user_not_found",
                    status=HTTPStatus.NOT_FOUND,
                    context={"user_id": user_id},
                )

    def add(
        self,
        username: str,
        password_hash: str | None = None,
        password_salt: UUID | None = None,
    ) -> UserCredential:
        with session_scope() as session:
            row = User(
                username=username,
                password_hash=password_hash,
                password_salt=password_salt or uuid4(),
                token_salt=uuid4(),
            )
            session.add(row)
            session.flush()
            session.refresh(row)
            return _to_domain(row)


__all__ = ["SqlAlchemyUserRepository"]
