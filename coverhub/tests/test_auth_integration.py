from __future__ import annotations

from uuid import uuid4

import pytest

from coverhub.app import create_app
from coverhub.infrastructure.container import container
from coverhub.infrastructure.db import ENGINE, Base


@pytest.fixture()
def app():
    app = create_app()
    Base.metadata.drop_all(bind=ENGINE)
    Base.metadata.create_all(bind=ENGINE)
    app.config.update(TESTING=True)
    return app


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


@pytest.fixture()
def legacy_user():
    salt = uuid4()
    hashed = container.password_hasher.hash("correct-horse", salt, tag="01")
    return container.user_repository.add("alice", password_hash=hashed, password_salt=salt)


def test_login_upgrades_legacy_hash_and_sets_cookie(client, legacy_user) -> None:
    response = client.post("/api/login", json={"username": "alice", "pwd": "correct-horse"})

    assert response.status_code == 200
    assert response.get_json() == {"success": True}
    assert client.get_cookie("auth-token") is not None

    stored = container.user_repository.find_by_username("alice")
    assert stored is not None
    assert stored.password_hash.startswith("#02#")
    assert stored.password_salt != legacy_user.password_salt

    again = client.post("/api/login", json={"username": "alice", "pwd": "correct-horse"})
    assert again.status_code == 200


def test_session_cookie_is_renewed_and_cleared(client, legacy_user) -> None:
    client.post("/api/login", json={"username": "alice", "pwd": "correct-horse"})

    health = client.get("/api/health")
    assert health.status_code == 200
    assert health.get_json() == {"success": True, "database": "ok"}
    assert any(h.startswith("auth-token=") for h in health.headers.getlist("Set-Cookie"))

    logout = client.post("/api/logout", json={"logout": True})
    assert logout.get_json() == {"success": True, "logged_out": True}
    assert client.get_cookie("auth-token") is None


def test_logout_false_keeps_session_cookie_untouched(client, legacy_user) -> None:
    client.post("/api/login", json={"username": "alice", "pwd": "correct-horse"})
    before = client.get_cookie("auth-token").value

    response = client.post("/api/logout", json={"logout": False})

    assert response.get_json() == {"success": True, "logged_out": False}
    assert response.headers.getlist("Set-Cookie") == []
    assert client.get_cookie("auth-token").value == before


def test_unknown_user_and_bad_password_share_response(client, legacy_user) -> None:
    ghost = client.post("/api/login", json={"username": "ghost", "pwd": "whatever"})
    wrong = client.post("/api/login", json={"username": "alice", "pwd": "wrong-pass"})

    assert ghost.status_code == wrong.status_code == 403
    assert ghost.get_json() == wrong.get_json() == {"error": "login_fail"}

    stored = container.user_repository.find_by_username("alice")
    assert stored is not None
    assert stored.password_hash == legacy_user.password_hash


def test_tampered_cookie_is_dropped(client, legacy_user) -> None:
    client.set_cookie("auth-token", "bm90.YSB0b2tlbg.c2ln")

    response = client.get("/api/health")

    assert response.status_code == 200
    assert client.get_cookie("auth-token") is None


def test_security_headers_present(client) -> None:
    response = client.get("/api/health")

    assert response.headers["X-Frame-Options"] == "DENY"
    assert response.headers["X-Content-Type-Options"] == "nosniff"
