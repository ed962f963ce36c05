from __future__ import annotations

from uuid import uuid4

import pytest

from coverhub.application.services.password_hashing import (
    Argon2idScheme,
    HmacSha512Scheme,
    MultiSchemePasswordHasher,
)
from coverhub.domain.exceptions import MalformedHashError, PasswordMismatchError
from coverhub.domain.users.entities import SchemeStatus


def test_default_scheme_hash_verifies_as_current(hasher: MultiSchemePasswordHasher) -> None:
    salt = uuid4()
    hashed = hasher.hash("correct-horse", salt)

    assert hashed.startswith("#02#$argon2id$")
    assert hasher.verify("correct-horse", salt, hashed) is SchemeStatus.CURRENT


def test_legacy_scheme_hash_verifies_as_outdated(hasher: MultiSchemePasswordHasher) -> None:
    salt = uuid4()
    hashed = hasher.hash("correct-horse", salt, tag="01")

    assert hashed.startswith("#01#")
    assert hasher.verify("correct-horse", salt, hashed) is SchemeStatus.OUTDATED


@pytest.mark.parametrize("tag", ["01", "02"])
def test_wrong_password_is_a_mismatch(hasher: MultiSchemePasswordHasher, tag: str) -> None:
    salt = uuid4()
    hashed = hasher.hash("correct-horse", salt, tag=tag)

    with pytest.raises(PasswordMismatchError):
        hasher.verify("battery-staple", salt, hashed)


@pytest.mark.parametrize("tag", ["01", "02"])
def test_wrong_salt_is_a_mismatch(hasher: MultiSchemePasswordHasher, tag: str) -> None:
    hashed = hasher.hash("correct-horse", uuid4(), tag=tag)

    with pytest.raises(PasswordMismatchError):
        hasher.verify("correct-horse", uuid4(), hashed)


def test_same_input_hashes_deterministically(hasher: MultiSchemePasswordHasher) -> None:
    salt = uuid4()
    assert hasher.hash("pw", salt) == hasher.hash("pw", salt)
    assert hasher.hash("pw", salt) != hasher.hash("pw", uuid4())


@pytest.mark.parametrize(
    "stored",
    [
        "",
        "plain-text",
        "#01",
        "#99#c29tZXRoaW5n",
        "#02#not-an-argon2-string",
        "#02#$argon2i$v=19$m=1024,t=1,p=1$c2FsdHNhbHRzYWx0c2FsdA$aGFzaGhhc2hoYXNoaGFzaA",
    ],
)
def test_unreadable_hashes_are_malformed(hasher: MultiSchemePasswordHasher, stored: str) -> None:
    with pytest.raises(MalformedHashError):
        hasher.verify("whatever", uuid4(), stored)


def test_hmac_scheme_depends_on_key() -> None:
    salt = uuid4()
    one = HmacSha512Scheme(b"k" * 32)
    two = HmacSha512Scheme(b"q" * 32)
    first = MultiSchemePasswordHasher([one], default_tag="01")
    second = MultiSchemePasswordHasher([two], default_tag="01")

    with pytest.raises(PasswordMismatchError):
        second.verify("pw", salt, first.hash("pw", salt))


def test_registry_rejects_duplicate_and_unknown_default() -> None:
    with pytest.raises(ValueError):
        MultiSchemePasswordHasher(
            [Argon2idScheme(), Argon2idScheme()], default_tag="02"
        )
    with pytest.raises(ValueError):
        MultiSchemePasswordHasher([Argon2idScheme()], default_tag="01")


def test_hmac_scheme_requires_key() -> None:
    with pytest.raises(ValueError):
        HmacSha512Scheme(b"")


def test_changing_default_marks_previous_scheme_outdated() -> None:
    salt = uuid4()
    schemes = [HmacSha512Scheme(b"k" * 32), Argon2idScheme(time_cost=1, memory_cost=1024)]
    old = MultiSchemePasswordHasher(schemes, default_tag="02")
    new = MultiSchemePasswordHasher(schemes, default_tag="01")

    hashed = old.hash("pw", salt)

    assert old.verify("pw", salt, hashed) is SchemeStatus.CURRENT
    assert new.verify("pw", salt, hashed) is SchemeStatus.OUTDATED
