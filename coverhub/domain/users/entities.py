# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from uuid import UUID

from coverhub.domain.exceptions import InvariantViolation


class SchemeStatus(Enum):
    CURRENT = "current"
    OUTDATED = "outdated"


@dataclass(slots=True, frozen=True)
class UserCredential:
    """Login view of a user row. ``password_hash`` is ``None`` when no password is set."""

    id: int
    username: str
    password_hash: str | None
    password_salt: UUID | None
    token_salt: UUID

    def __post_init__(self) -> None:
        if self.password_hash is not None and self.password_salt is None:
            raise InvariantViolation(
                "a password hash cannot be verified without its salt",
                field="password_salt",
            )


@dataclass(slots=True, frozen=True)
class SessionClaims:
    """Verified contents of a session cookie.

    ``token_salt`` must still equal the user's current token salt for the
    session to be honoured.
    """

    username: str
    token_salt: UUID

    def belongs_to(self, user: UserCredential) -> bool:
        return user.username == self.username and user.token_salt == self.token_salt
