from __future__ import annotations

"""Concrete rate providers and factory.

'exchangerate-api' hits the public exchangerate-api.com v4 endpoint (free, no
key required). 'static' serves a fixed table for offline demos and tests.
"""
import logging
import math
from typing import Any, Dict, Mapping, Optional, TYPE_CHECKING

from app.core.errors import RateFetchError
from app.services.http_client import get_json, HttpError
from .base import RateProvider, RateTable

if TYPE_CHECKING:  # pragma: no cover
    from app.core.config import Settings

logger = logging.getLogger("app.rates")

# Rough USD-based figures; only meant to keep the form usable without network.
_STATIC_RATES: Dict[str, float] = {
    "USD": 1.0,
    "AED": 3.6725,
    "ARS": 970.5,
    "AUD": 1.51,
    "EUR": 0.92,
    "GBP": 0.79,
    "INR": 83.2,
    "JPY": 149.8,
}


def extract_rates(payload: Any) -> RateTable:
    """Pull the ``rates`` object out of an API payload.

    Entries that are not positive finite numbers are dropped. A payload without
    a ``rates`` object is malformed and raises RateFetchError.
    """
    if not isinstance(payload, Mapping):
        raise RateFetchError("Failed to fetch exchange rates: malformed response")
    raw = payload.get("rates")
    if not isinstance(raw, Mapping):
        raise RateFetchError("Failed to fetch exchange rates: response has no rates")
    rates: RateTable = {}
    for code, value in raw.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            continue
        if not math.isfinite(value) or value <= 0:
            continue
        rates[str(code).upper()] = float(value)
    return rates


class StaticRateProvider(RateProvider):
    def __init__(self, rates: Optional[Mapping[str, float]] = None):
        self._rates = dict(_STATIC_RATES if rates is None else rates)

    def fetch_rates(self) -> RateTable:  # type: ignore[override]
        return dict(self._rates)


class ExchangeRateApiProvider(RateProvider):
    """Single GET of ``{base_url}/{base_currency}`` per call, no retries."""

    def __init__(
        self,
        base_url: str = "https://api.exchangerate-api.com/v4/latest",
        *,
        base_currency: str = "USD",
        timeout: float = 10.0,
    ):
        self.base_url = base_url.rstrip("/")
        self.base_currency = base_currency.upper()
        self.timeout = timeout

    @property
    def url(self) -> str:
        return f"{self.base_url}/{self.base_currency}"

    def fetch_rates(self) -> RateTable:  # type: ignore[override]
        try:
            payload = get_json(self.url, timeout=self.timeout)
        except HttpError as e:
            logger.warning("rate fetch failed", extra={"url": self.url, "error": str(e)})
            raise RateFetchError() from e
        rates = extract_rates(payload)
        logger.info("fetched %d rates", len(rates), extra={"url": self.url})
        return rates


_PROVIDER_REGISTRY = {
    "exchangerate-api": ExchangeRateApiProvider,
    "static": StaticRateProvider,
}


def make_rate_provider(kind: str, settings: "Settings | None" = None) -> RateProvider:
    cls = _PROVIDER_REGISTRY.get(kind)
    if not cls:
        raise ValueError(f"Unknown rate provider kind '{kind}'")
    if cls is ExchangeRateApiProvider and settings is not None:
        return ExchangeRateApiProvider(
            settings.exchange_api_base_url,
            base_currency=settings.base_currency,
            timeout=settings.http_timeout_seconds,
        )
    return cls()
