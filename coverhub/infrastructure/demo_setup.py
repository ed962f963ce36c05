# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from uuid import uuid4

from coverhub.domain.users.repositories import CredentialStore, PasswordHasher
from coverhub.shared.config import load_config
from coverhub.shared.logging import logger

DEMO_USERNAME = "demo1"
DEMO_PASSWORD = "welcome"


class DemoSetupError(Exception):
    pass


class DemoSetup:
    @staticmethod
    def setup_demo_user(users: CredentialStore, password_hasher: PasswordHasher) -> None:
        config = load_config()

        if not config.seed_demo_user:
            logger.info("demo_setup: SEED_DEMO_USER disabled, skipping demo user")
            return

        try:
            if users.find_by_username(DEMO_USERNAME):
                logger.info(f"demo_setup: user '{DEMO_USERNAME}' already present")
                return

            salt = uuid4()
            user = users.add(
                DEMO_USERNAME,
                password_hash=password_hasher.hash(DEMO_PASSWORD, salt),
                password_salt=salt,
            )
            logger.info(f"demo_setup: created user '{DEMO_USERNAME}' id={user.id}")
        except Exception as e:
            logger.error(f"demo_setup: failed to seed demo user: {e}")
            raise DemoSetupError(f"Failed to seed demo user: {e}") from e


def setup_demo_user(users: CredentialStore, password_hasher: PasswordHasher) -> None:
    DemoSetup.setup_demo_user(users, password_hasher)


__all__ = [
    "DEMO_PASSWORD",
    "DEMO_USERNAME",
    "DemoSetup",
    "DemoSetupError",
    "setup_demo_user",
]
