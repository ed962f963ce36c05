# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations


class DomainError(Exception):
    pass


class InvariantViolationError(DomainError):
    def __init__(self, message: str, *, field: str | None = None):
        super().__init__(message)
        self.field = field

    def __str__(self) -> str:
        if self.field:
            return f"{self.field}: {super().__str__()}"
        return super().__str__()


InvariantViolation = InvariantViolationError


class PasswordError(DomainError):
    """Raised by password verification; never crosses the HTTP boundary."""


class PasswordMismatchError(PasswordError):
    def __init__(self) -> None:
        super().__init__("password does not match the stored hash")


class MalformedHashError(PasswordError):
    def __init__(self, reason: str) -> None:
        super().__init__(f"stored password hash is malformed: {reason}")
        self.reason = reason


class SchemeMigrationError(DomainError):
    def __init__(self, user_id: int) -> None:
        super().__init__(f"could not persist upgraded password hash for user {user_id}")
        self.user_id = user_id
