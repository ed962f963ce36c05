from __future__ import annotations

import pytest

from coverhub.shared.config import AppConfig, SecurityConfig


def test_production_refuses_development_keys(monkeypatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.delenv("SERVICE_PWD_KEY", raising=False)
    monkeypatch.delenv("SERVICE_TOKEN_KEY", raising=False)

    with pytest.raises(SystemExit):
        AppConfig()


def test_production_with_real_keys_only_warns(monkeypatch, capsys) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("SERVICE_PWD_KEY", "A" * 64)
    monkeypatch.setenv("SERVICE_TOKEN_KEY", "B" * 64)

    config = AppConfig()

    assert config.is_production()
    assert "Cookie Secure flag is DISABLED" in capsys.readouterr().err


def test_allowed_origins_comma_separated(monkeypatch) -> None:
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")

    config = SecurityConfig()

    assert config.allowed_origins == ["https://a.example", "https://b.example"]


def test_token_duration_default(monkeypatch) -> None:
    monkeypatch.delenv("SERVICE_TOKEN_DURATION_SEC", raising=False)

    assert AppConfig().auth.token_duration_sec == 1800
