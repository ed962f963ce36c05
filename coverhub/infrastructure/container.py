# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from coverhub.application.services.password_hashing import (
    Argon2idScheme,
    HmacSha512Scheme,
    MultiSchemePasswordHasher,
)
from coverhub.application.services.scheme_migration import SchemeMigrator
from coverhub.application.use_cases.users.login_user import LoginUserUseCase
from coverhub.application.use_cases.users.logout_user import LogoutUserUseCase
from coverhub.infrastructure.auth.session_tokens import SessionTokenIssuer
from coverhub.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from coverhub.interfaces.http.controllers.auth_controller import AuthController
from coverhub.interfaces.http.controllers.misc_controller import MiscController
from coverhub.interfaces.http.controllers.products_controller import ProductsController
from coverhub.shared.config import AppConfig, load_config
from coverhub.shared.utils.b64 import b64u_decode

CURRENT_PASSWORD_SCHEME = Argon2idScheme.tag


class Container:
    def __init__(self, config: AppConfig | None = None) -> None:
        self._config = config

    @cached_property
    def config(self) -> AppConfig:
        return self._config or load_config()

    @cached_property
    def password_hasher(self) -> MultiSchemePasswordHasher:
        return MultiSchemePasswordHasher(
            [
                HmacSha512Scheme(b64u_decode(self.config.auth.pwd_key)),
                Argon2idScheme(),
            ],
            default_tag=CURRENT_PASSWORD_SCHEME,
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository()

    @cached_property
    def token_issuer(self) -> SessionTokenIssuer:
        return SessionTokenIssuer(
            key=self.config.auth.token_key,
            duration_sec=self.config.auth.token_duration_sec,
        )

    @cached_property
    def scheme_migrator(self) -> SchemeMigrator:
        return SchemeMigrator(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_issuer,
            password_hasher=self.password_hasher,
            migrator=self.scheme_migrator,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase()

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
        )

    @cached_property
    def products_controller(self) -> ProductsController:
        return ProductsController()

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController()


container = Container()
