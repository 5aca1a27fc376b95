"""Tests for application settings."""

import pytest

from app.core.config import Settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    settings.init_post_load()

    assert settings.base_currency == "USD"
    assert settings.exchange_api_base_url == "https://api.exchangerate-api.com/v4/latest"
    assert settings.default_currencies == "AED, ARS, AUD"
    assert settings.default_packages["starter"] == 99


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("EXCHANGE_RATE_PROVIDER", "static")
    monkeypatch.setenv("DEFAULT_CURRENCIES", "EUR, GBP")
    monkeypatch.setenv("EXCHANGE_API_BASE_URL", "https://rates.example.test/latest/")

    settings = Settings(_env_file=None)
    settings.init_post_load()

    assert settings.exchange_rate_provider == "static"
    assert settings.default_currencies == "EUR, GBP"
    assert settings.exchange_api_base_url == "https://rates.example.test/latest"


def test_unknown_provider_rejected() -> None:
    settings = Settings(_env_file=None, exchange_rate_provider="nope")

    with pytest.raises(ValueError):
        settings.init_post_load()
