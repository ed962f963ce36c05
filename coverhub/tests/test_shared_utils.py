from __future__ import annotations

import pytest

from coverhub.shared.logging import sanitize_message
from coverhub.shared.middleware.rate_limit import InMemoryRateLimiter
from coverhub.shared.utils.b64 import b64u_decode, b64u_encode


def test_sanitize_masks_password_and_hash() -> None:
    message = "login pwd=hunter2-secret stored=#02#$argon2id$v=19$m=19456,t=2,p=1$c2FsdHNhbHQ"

    sanitized = sanitize_message(message)

    assert "hunter2-secret" not in sanitized
    assert "argon2id" not in sanitized


def test_sanitize_masks_email() -> None:
    assert sanitize_message("applicant alice@example.com") == "applicant ***@example.com"


def test_sanitize_leaves_plain_text() -> None:
    assert sanitize_message("products.list: rows=8") == "products.list: rows=8"


def test_rate_limiter_window() -> None:
    limiter = InMemoryRateLimiter(limit=2, window_seconds=10)

    assert limiter.allow("ip", now=0.0)
    assert limiter.allow("ip", now=1.0)
    assert not limiter.allow("ip", now=2.0)
    assert limiter.allow("other", now=2.0)
    assert limiter.allow("ip", now=11.5)


def test_b64u_has_no_padding() -> None:
    encoded = b64u_encode("ab")

    assert "=" not in encoded
    assert b64u_decode(encoded) == b"ab"


@pytest.mark.parametrize("value", ["!!!", "a", "ab+c"])
def test_b64u_rejects_invalid_input(value: str) -> None:
    with pytest.raises(ValueError):
        b64u_decode(value)


def test_rate_limiter_forgets_idle_clients() -> None:
    limiter = InMemoryRateLimiter(limit=5, window_seconds=10)
    for i in range(3):
        limiter.allow(f"ip-{i}", now=0.0)

    assert limiter.tracked_keys() == 3

    limiter.allow("late", now=20.0)

    assert limiter.tracked_keys() == 1
