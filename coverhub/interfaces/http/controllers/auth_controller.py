# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from coverhub.application.use_cases.users.login_user import LoginUserUseCase
from coverhub.application.use_cases.users.logout_user import LogoutUserUseCase
from coverhub.domain.users.exceptions import LoginFailedError
from coverhub.interfaces.http.cookies import (
    mark_session_cookie_handled,
    remove_token_cookie,
    set_token_cookie,
)
from coverhub.interfaces.http.dto.auth import (
    AuthSuccessDTO,
    LoginRequestDTO,
    LogoutRequestDTO,
    LogoutResultDTO,
    RegisterRequestDTO,
)
from coverhub.shared.errors.validation import raise_validation_error
from coverhub.shared.logging import logger
from coverhub.shared.middleware.rate_limit import rate_limit


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


class AuthController:
    def __init__(
        self,
        *,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
    ) -> None:
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case

    @rate_limit(limit=10, window_seconds=60.0)
    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            token = self._login_use_case.execute(dto.username, dto.password)
        except LoginFailedError as exc:
            logger.warning(
                f"auth.login: failed username={dto.username} reason={exc.reason} "
                f"user_id={exc.user_id} ip={_get_client_ip()}"
            )
            raise

        response = jsonify(AuthSuccessDTO().model_dump())
        set_token_cookie(response, token)
        logger.info(f"auth.login: ok username={dto.username}")
        return response, 200

    def logout(self) -> tuple[Response, int]:
        try:
            dto = LogoutRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        result = self._logout_use_case.execute(dto.logout)
        mark_session_cookie_handled()

        response = jsonify(LogoutResultDTO(logged_out=result.did_logout).model_dump())
        if result.did_logout:
            remove_token_cookie(response)
        logger.info(f"auth.logout: logged_out={result.did_logout}")
        return response, 200

    @rate_limit(limit=5, window_seconds=60.0)
    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        # applications are validated only; there is no applicant store
        logger.info(f"auth.register: accepted application region={dto.region}")
        return jsonify(AuthSuccessDTO().model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("auth", __name__, url_prefix="/api")
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/logout", view_func=self.logout, methods=["POST"])
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        return bp
