# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Resolves the auth cookie into ``g.user_id`` and keeps the session sliding."""

from __future__ import annotations

from flask import Flask, Response, g, request

from coverhub.domain.users.exceptions import (
    TokenError,
    TokenSignatureError,
    TokenUnknownIdentError,
)
from coverhub.domain.users.repositories import CredentialStore, TokenIssuer
from coverhub.shared.logging import logger

from .cookies import (
    AUTH_TOKEN_COOKIE,
    remove_token_cookie,
    response_sets_token_cookie,
    set_token_cookie,
)


def resolve_session(
    raw_token: str, *, users: CredentialStore, tokens: TokenIssuer
) -> tuple[int, str]:
    """Return the user id and a freshly issued token for a valid cookie value."""
    claims = tokens.validate(raw_token)
    user = users.find_by_username(claims.username)
    if user is None:
        raise TokenUnknownIdentError("token ident has no user")
    if not claims.belongs_to(user):
        raise TokenSignatureError("token salt was rotated")
    return user.id, tokens.issue(user.username, user.token_salt)


def configure_session_resolution(
    app: Flask, *, users: CredentialStore, tokens: TokenIssuer
) -> None:
    @app.before_request
    def _resolve_session() -> None:
        g.user_id = None
        raw = request.cookies.get(AUTH_TOKEN_COOKIE)
        if not raw:
            return
        try:
            g.user_id, g.renewed_token = resolve_session(raw, users=users, tokens=tokens)
        except TokenError as exc:
            logger.info(f"auth.session: dropping cookie ({type(exc).__name__}: {exc.detail})")
            g.drop_token_cookie = True

    @app.after_request
    def _refresh_cookie(response: Response) -> Response:
        # login and logout manage the cookie themselves
        if g.pop("session_cookie_handled", False) or response_sets_token_cookie(response):
            return response
        if g.pop("drop_token_cookie", False):
            remove_token_cookie(response)
            return response
        renewed = g.pop("renewed_token", None)
        if renewed is not None:
            set_token_cookie(response, renewed)
        return response


__all__ = ["configure_session_resolution", "resolve_session"]
