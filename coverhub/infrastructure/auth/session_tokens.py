# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Signed, time-limited session tokens.

Tokens are ``itsdangerous`` URL-safe timed payloads carrying the username and
the user's token salt. Rotating a user's token salt invalidates every token
issued to them.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from datetime import UTC, datetime
from typing import Any
from uuid import UUID

from itsdangerous import BadData, SignatureExpired, TimestampSigner, URLSafeTimedSerializer

from coverhub.domain.users.entities import SessionClaims
from coverhub.domain.users.exceptions import (
    TokenExpiredError,
    TokenIssuanceError,
    TokenParseError,
    TokenSignatureError,
)
from coverhub.domain.users.repositories import TokenIssuer
from coverhub.shared.logging import logger

MIN_KEY_LENGTH = 32
SESSION_SALT = "coverhub.session.v1"


def _utc_now() -> datetime:
    return datetime.now(UTC)


class _ClockedSigner(TimestampSigner):
    def __init__(self, *args: Any, clock: Callable[[], datetime], **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self._clock = clock

    def get_timestamp(self) -> int:
        return int(self._clock().timestamp())


class SessionTokenIssuer(TokenIssuer):
    def __init__(
        self,
        *,
        key: str,
        duration_sec: int,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._key = key
        self._duration_sec = duration_sec
        self._clock = clock

    def _serializer(self) -> URLSafeTimedSerializer:
        if len(self._key) < MIN_KEY_LENGTH:
            raise TokenIssuanceError(f"token key must be at least {MIN_KEY_LENGTH} characters")
        return URLSafeTimedSerializer(
            secret_key=self._key,
            salt=SESSION_SALT,
            signer=_ClockedSigner,
            signer_kwargs={"digest_method": hashlib.sha512, "clock": self._clock},
        )

    def issue(self, username: str, token_salt: UUID) -> str:
        return self._serializer().dumps({"u": username, "ts": str(token_salt)})

    def validate(self, token: str) -> SessionClaims:
        serializer = self._serializer()
        try:
            data = serializer.loads(token, max_age=self._duration_sec)
        except SignatureExpired as exc:
            logger.debug("auth.token: expired session token")
            raise TokenExpiredError("token expired") from exc
        except BadData as exc:
            raise TokenSignatureError("signature mismatch") from exc

        if not isinstance(data, dict) or not isinstance(data.get("u"), str):
            raise TokenParseError("unexpected token payload")
        try:
            token_salt = UUID(str(data.get("ts")))
        except ValueError as exc:
            raise TokenParseError("token salt is not a UUID") from exc
        return SessionClaims(username=data["u"], token_salt=token_salt)


__all__ = ["SessionTokenIssuer"]
