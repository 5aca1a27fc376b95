from __future__ import annotations

"""Rate provider abstraction.

A provider returns a fresh snapshot of quote-currency rates per one unit of
``base_currency``. Snapshots are not cached: each conversion asks again.
"""
from abc import ABC, abstractmethod
from typing import Dict

RateTable = Dict[str, float]


class RateProvider(ABC):
    base_currency: str = "USD"

    @abstractmethod
    def fetch_rates(self) -> RateTable:
        """Return quote currency -> units per 1 base currency.

        Raises RateFetchError on any failure.
        """
        raise NotImplementedError
