# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .exceptions import (
    DomainError,
    InvariantViolation,
    MalformedHashError,
    PasswordError,
    PasswordMismatchError,
    SchemeMigrationError,
)
from .users.entities import SchemeStatus, SessionClaims, UserCredential

__all__ = [
    "DomainError",
    "InvariantViolation",
    "MalformedHashError",
    "PasswordError",
    "PasswordMismatchError",
    "SchemeMigrationError",
    "SchemeStatus",
    "SessionClaims",
    "UserCredential",
]
