# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from coverhub.shared.errors.base import DomainError


class LoginFailedError(DomainError):
    """Any password login failure.

    Subclasses carry the internal ``reason`` for logs; clients only ever see
    ``login_fail`` so unknown users and bad passwords look the same.
    """

    code = "login_fail"
    status = HTTPStatus.FORBIDDEN
    reason = "login_fail"

    def __init__(self, *, user_id: int | None = None) -> None:
        super().__init__()
        self.user_id = user_id


class LoginUsernameNotFoundError(LoginFailedError):
    reason = "username_not_found"


class LoginUserHasNoPasswordError(LoginFailedError):
    reason = "user_has_no_pwd"


class LoginPasswordIncorrectError(LoginFailedError):
    reason = "pwd_not_matching"


class CorruptCredentialError(DomainError):
    code = "service_error"
    status = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, *, user_id: int) -> None:
        super().__init__()
        self.user_id = user_id


class TokenIssuanceError(DomainError):
    code = "service_error"
    status = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(self, detail: str) -> None:
        super().__init__()
        self.detail = detail


class TokenError(DomainError):
    code = "unauthorized"
    status = HTTPStatus.UNAUTHORIZED

    def __init__(self, detail: str = "") -> None:
        super().__init__()
        self.detail = detail


class TokenParseError(TokenError):
    pass


class TokenSignatureError(TokenError):
    pass


class TokenExpiredError(TokenError):
    pass


class TokenUnknownIdentError(TokenError):
    pass
