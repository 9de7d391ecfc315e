"""Testes das settings (base, credenciais e Slack)."""

from __future__ import annotations

import pytest

from config.settings import (
    BaseSettings,
    CredentialSettings,
    SlackSettings,
    get_base_settings,
    get_credential_settings,
    get_slack_settings,
    parse_seed_tokens,
)


@pytest.fixture(autouse=True)
def _clear_cache():
    for getter in (get_base_settings, get_credential_settings, get_slack_settings):
        getter.cache_clear()
    yield
    for getter in (get_base_settings, get_credential_settings, get_slack_settings):
        getter.cache_clear()


def test_parse_seed_tokens() -> None:
    assert parse_seed_tokens("T1:xoxb-1, T2:xoxb-2") == {"T1": "xoxb-1", "T2": "xoxb-2"}
    assert parse_seed_tokens("") == {}
    assert parse_seed_tokens("broken,:x,T3:") == {}


def test_slack_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLACK_SIGNING_SECRET", "secret")
    monkeypatch.setenv("SLACK_REQUEST_MAX_AGE_SECONDS", "120")
    monkeypatch.setenv("SLACK_APP_MODULE", "my_app.slack:app")

    settings = get_slack_settings()

    assert settings.signing_secret == "secret"
    assert settings.request_max_age_seconds == 120
    assert settings.app_module == "my_app.slack:app"
    assert settings.validate() == []


def test_base_settings_rejects_unknown_environment() -> None:
    errors = BaseSettings(environment="qa").validate()  # type: ignore[arg-type]

    assert errors == ["ENVIRONMENT inválido: qa"]
    assert get_slack_settings() is settings


def test_slack_settings_validation() -> None:
    errors = SlackSettings(
        request_max_age_seconds=0, max_retries=-1, app_module="no_colon"
    ).validate()

    assert any("SLACK_SIGNING_SECRET" in e for e in errors)
    assert any("SLACK_REQUEST_MAX_AGE_SECONDS" in e for e in errors)
    assert any("SLACK_MAX_RETRIES" in e for e in errors)
    assert any("SLACK_APP_MODULE" in e for e in errors)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("prod", "production"), (" Stage ", "staging"), ("qa", "development")],
)
def test_base_settings_environment_aliases(
    monkeypatch: pytest.MonkeyPatch, raw: str, expected: str
) -> None:
    monkeypatch.setenv("ENVIRONMENT", raw)
    monkeypatch.setenv("REDIS_URL", "redis://cache:6379/0")

    settings = get_base_settings()

    assert settings.environment == expected
    assert settings.is_development is (expected == "development")
    assert settings.redis_url == "redis://cache:6379/0"
    assert settings.validate() == []


def test_credential_settings_validation() -> None:
    dev = BaseSettings()
    prod = BaseSettings(environment="production")

    assert CredentialSettings().validate(dev) == []
    assert any("proibido" in e for e in CredentialSettings().validate(prod))
    assert any(
        "REDIS_URL" in e for e in CredentialSettings(backend="redis").validate(prod)
    )
    assert CredentialSettings(backend="redis").validate(
        BaseSettings(environment="production", redis_url="redis://localhost")
    ) == []


def test_credential_settings_from_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("SLACK_CREDENTIAL_BACKEND", "REDIS")
    monkeypatch.setenv("SLACK_BOT_TOKENS", "T1:xoxb-1")

    settings = get_credential_settings()

    assert settings.backend == "redis"
    assert settings.seed_tokens == {"T1": "xoxb-1"}
