# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Response, g

from coverhub.shared.config import load_config

AUTH_TOKEN_COOKIE = "auth-token"


def set_token_cookie(response: Response, token: str) -> None:
    config = load_config()
    response.set_cookie(
        AUTH_TOKEN_COOKIE,
        token,
        path="/",
        httponly=True,
        samesite=config.security.cookie_samesite,
        secure=config.security.cookie_secure,
    )


def remove_token_cookie(response: Response) -> None:
    config = load_config()
    response.delete_cookie(
        AUTH_TOKEN_COOKIE,
        path="/",
        httponly=True,
        samesite=config.security.cookie_samesite,
        secure=config.security.cookie_secure,
    )


def mark_session_cookie_handled() -> None:
    """Keep the session middleware from renewing or dropping the cookie on this response."""
    g.session_cookie_handled = True


def response_sets_token_cookie(response: Response) -> bool:
    prefix = f"{AUTH_TOKEN_COOKIE}="
    return any(header.startswith(prefix) for header in response.headers.getlist("Set-Cookie"))


__all__ = [
    "AUTH_TOKEN_COOKIE",
    "mark_session_cookie_handled",
    "remove_token_cookie",
    "response_sets_token_cookie",
    "set_token_cookie",
]
