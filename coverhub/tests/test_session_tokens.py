from __future__ import annotations

from datetime import timedelta
from uuid import uuid4

import pytest

from coverhub.domain.users.entities import SessionClaims, UserCredential
from coverhub.domain.users.exceptions import (
    TokenExpiredError,
    TokenIssuanceError,
    TokenSignatureError,
)
from coverhub.infrastructure.auth.session_tokens import SessionTokenIssuer
from coverhub.shared.config.settings import DEV_TOKEN_KEY

from conftest import FIXED_NOW


def test_issued_token_validates(issuer: SessionTokenIssuer) -> None:
    salt = uuid4()
    token = issuer.issue("alice", salt)

    assert issuer.validate(token) == SessionClaims(username="alice", token_salt=salt)


def test_claims_do_not_match_rotated_salt(issuer: SessionTokenIssuer) -> None:
    token = issuer.issue("alice", uuid4())
    rotated = UserCredential(
        id=1, username="alice", password_hash=None, password_salt=None, token_salt=uuid4()
    )

    assert not issuer.validate(token).belongs_to(rotated)


def test_tampered_token_is_rejected(issuer: SessionTokenIssuer) -> None:
    token = issuer.issue("alice", uuid4())
    _, timestamp, signature = token.rsplit(".", 2)
    forged = issuer.issue("mallory", uuid4()).rsplit(".", 2)[0]

    with pytest.raises(TokenSignatureError):
        issuer.validate(f"{forged}.{timestamp}.{signature}")


def test_token_signed_with_other_key_is_rejected(issuer: SessionTokenIssuer) -> None:
    other = SessionTokenIssuer(key="x" * 64, duration_sec=1800, clock=lambda: FIXED_NOW)

    with pytest.raises(TokenSignatureError):
        issuer.validate(other.issue("alice", uuid4()))


def test_token_valid_until_duration_elapses() -> None:
    now = [FIXED_NOW]
    issuer = SessionTokenIssuer(key=DEV_TOKEN_KEY, duration_sec=60, clock=lambda: now[0])
    token = issuer.issue("alice", uuid4())

    now[0] = FIXED_NOW + timedelta(seconds=60)
    assert issuer.validate(token).username == "alice"

    now[0] = FIXED_NOW + timedelta(seconds=61)
    with pytest.raises(TokenExpiredError):
        issuer.validate(token)


@pytest.mark.parametrize("raw", ["", "abc", "a.b", "a..c", "!!!.@@@.sig"])
def test_garbage_tokens_are_rejected(issuer: SessionTokenIssuer, raw: str) -> None:
    with pytest.raises(TokenSignatureError):
        issuer.validate(raw)


@pytest.mark.parametrize("key", ["", "short", "a" * 31])
def test_unusable_key_fails_issuance(key: str) -> None:
    issuer = SessionTokenIssuer(key=key, duration_sec=60, clock=lambda: FIXED_NOW)

    with pytest.raises(TokenIssuanceError):
        issuer.issue("alice", uuid4())
