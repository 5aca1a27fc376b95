from typing import Dict, Optional

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app
from app.services.rates.base import RateProvider


class FakeRateProvider(RateProvider):
    """Provider returning a canned table (or raising) and counting calls."""

    def __init__(
        self,
        rates: Optional[Dict[str, float]] = None,
        error: Optional[Exception] = None,
    ):
        self.rates = {"EUR": 0.9, "AED": 3.6725, "GBP": 0.8} if rates is None else rates
        self.error = error
        self.calls = 0

    def fetch_rates(self):  # type: ignore[override]
        self.calls += 1
        if self.error is not None:
            raise self.error
        return dict(self.rates)


@pytest.fixture
def fake_provider_cls():
    return FakeRateProvider


@pytest.fixture
def settings() -> Settings:
    s = Settings(_env_file=None, exchange_rate_provider="static")
    s.init_post_load()
    return s


@pytest.fixture
def provider() -> FakeRateProvider:
    return FakeRateProvider()


@pytest.fixture
def app(settings, provider):
    return create_app(settings_override=settings, rate_provider=provider)


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)
