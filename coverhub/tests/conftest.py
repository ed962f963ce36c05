from __future__ import annotations

import os
import tempfile
from datetime import UTC, datetime
from uuid import UUID, uuid4

# Must run before anything imports coverhub: settings and the engine are module level.
_TMP_DIR = tempfile.mkdtemp(prefix="coverhub-tests-")
os.environ.setdefault("DATABASE_URL", f"sqlite:///{os.path.join(_TMP_DIR, 'test.db')}")
os.environ.setdefault("LOG_FILE", os.path.join(_TMP_DIR, "app.log"))
os.environ.setdefault("ENABLE_RATE_LIMIT", "false")
os.environ.setdefault("SEED_DEMO_USER", "false")
os.environ.setdefault("APP_ENV", "test")

import pytest  # noqa: E402

from coverhub.application.services.password_hashing import (  # noqa: E402
    Argon2idScheme,
    HmacSha512Scheme,
    MultiSchemePasswordHasher,
)
from coverhub.domain.users.entities import UserCredential  # noqa: E402
from coverhub.infrastructure.auth.session_tokens import SessionTokenIssuer  # noqa: E402
from coverhub.shared.config.settings import DEV_PWD_KEY, DEV_TOKEN_KEY  # noqa: E402
from coverhub.shared.utils.b64 import b64u_decode  # noqa: E402

FIXED_NOW = datetime(2025, 3, 1, 12, 0, tzinfo=UTC)


class InMemoryCredentialStore:
    def __init__(self) -> None:
        self._users: dict[str, UserCredential] = {}
        self._seq = 1
        self.updates: list[tuple[int, str, UUID]] = []
        self.fail_updates = False

    def find_by_username(self, username: str) -> UserCredential | None:
        return self._users.get(username)

    def update_password(self, user_id: int, new_hash: str, new_salt: UUID) -> None:
        if self.fail_updates:
            raise RuntimeError("database is read-only")
        self.updates.append((user_id, new_hash, new_salt))
        for name, user in self._users.items():
            if user.id == user_id:
                self._users[name] = UserCredential(
                    id=user.id,
                    username=user.username,
                    password_hash=new_hash,
                    password_salt=new_salt,
                    token_salt=user.token_salt,
                )

    def add(
        self,
        username: str,
        password_hash: str | None = None,
        password_salt: UUID | None = None,
    ) -> UserCredential:
        user = UserCredential(
            id=self._seq,
            username=username,
            password_hash=password_hash,
            password_salt=password_salt or uuid4(),
            token_salt=uuid4(),
        )
        self._seq += 1
        self._users[username] = user
        return user


def make_hasher() -> MultiSchemePasswordHasher:
    return MultiSchemePasswordHasher(
        [
            HmacSha512Scheme(b64u_decode(DEV_PWD_KEY)),
            Argon2idScheme(time_cost=1, memory_cost=1024),
        ],
        default_tag="02",
    )


@pytest.fixture()
def hasher() -> MultiSchemePasswordHasher:
    return make_hasher()


@pytest.fixture()
def store() -> InMemoryCredentialStore:
    return InMemoryCredentialStore()


@pytest.fixture()
def issuer() -> SessionTokenIssuer:
    return SessionTokenIssuer(key=DEV_TOKEN_KEY, duration_sec=1800, clock=lambda: FIXED_NOW)
