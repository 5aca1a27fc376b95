from __future__ import annotations

"""Pricing converter controller.

Owns the single in-memory state of one running tool instance (catalog, form
inputs, last result, error, busy flag) and drives the conversion cycle:

    idle -> converting -> success | failed -> (next trigger) converting ...

Catalog edits stay available while a conversion is in flight; the conversion
works on a snapshot taken when it was triggered. Only one conversion runs at a
time: a trigger while busy returns a pending outcome instead of starting a
second fetch.

A failed conversion keeps the previous successful result on display; only a
new success replaces it.
"""
import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from starlette.concurrency import run_in_threadpool
from starlette.requests import Request

from app.core.errors import (
    GENERIC_CONVERSION_ERROR,
    EmptyCurrencyListError,
    PricingError,
)
from app.services import catalog as catalog_ops
from app.services.catalog import PriceCatalog
from app.services.conversion import ConversionResult, convert_prices
from app.services.currency_parser import parse_currency_list
from app.services.rates.base import RateProvider
from app.services.rates.providers import make_rate_provider

logger = logging.getLogger("app.converter")

DEFAULT_CURRENCY_TEXT = "AED, ARS, AUD"


class ConversionStatus(str, enum.Enum):
    IDLE = "idle"
    CONVERTING = "converting"
    SUCCESS = "success"
    FAILED = "failed"


@dataclass
class ConverterState:
    catalog: PriceCatalog = field(default_factory=catalog_ops.new_catalog)
    currency_text: str = DEFAULT_CURRENCY_TEXT
    round_numbers: bool = False
    status: ConversionStatus = ConversionStatus.IDLE
    result: Optional[ConversionResult] = None
    error: Optional[str] = None
    busy: bool = False

    @property
    def currencies(self) -> List[str]:
        return parse_currency_list(self.currency_text)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "catalog": dict(self.catalog),
            "currency_text": self.currency_text,
            "currencies": self.currencies,
            "round_numbers": self.round_numbers,
            "status": self.status.value,
            "result": self.result,
            "error": self.error,
            "busy": self.busy,
        }


@dataclass(frozen=True)
class ConversionOutcome:
    """Result of one convert() call: pending, success or failure."""

    status: ConversionStatus
    result: Optional[ConversionResult] = None
    error: Optional[str] = None
    cause: Optional[BaseException] = None

    @classmethod
    def pending(cls) -> "ConversionOutcome":
        return cls(status=ConversionStatus.CONVERTING)

    @classmethod
    def success(cls, result: ConversionResult) -> "ConversionOutcome":
        return cls(status=ConversionStatus.SUCCESS, result=result)

    @classmethod
    def failure(cls, message: str, cause: BaseException | None = None) -> "ConversionOutcome":
        return cls(status=ConversionStatus.FAILED, error=message, cause=cause)

    @property
    def is_pending(self) -> bool:
        return self.status is ConversionStatus.CONVERTING

    @property
    def ok(self) -> bool:
        return self.status is ConversionStatus.SUCCESS


class PricingConverter:
    def __init__(
        self,
        provider: RateProvider,
        *,
        packages: Mapping[str, Any] | None = None,
        currency_text: str = DEFAULT_CURRENCY_TEXT,
        base_currency: str = "USD",
    ):
        self._provider = provider
        self._base_currency = base_currency
        self._default_packages = dict(
            catalog_ops.DEFAULT_PACKAGES if packages is None else packages
        )
        self.state = ConverterState(
            catalog=catalog_ops.new_catalog(self._default_packages),
            currency_text=currency_text,
        )

    # Catalog / form edits -------------------------------------
    def set_price(self, name: str, raw: Any) -> PriceCatalog:
        self.state.catalog = catalog_ops.set_price(self.state.catalog, name, raw)
        return self.state.catalog

    def add_entry(self, name: str | None) -> PriceCatalog:
        self.state.catalog = catalog_ops.add_entry(self.state.catalog, name)
        return self.state.catalog

    def remove_entry(self, name: str) -> PriceCatalog:
        self.state.catalog = catalog_ops.remove_entry(self.state.catalog, name)
        return self.state.catalog

    def reset_catalog(self) -> PriceCatalog:
        self.state.catalog = catalog_ops.new_catalog(self._default_packages)
        return self.state.catalog

    def set_currency_text(self, text: str | None) -> List[str]:
        self.state.currency_text = text or ""
        return self.state.currencies

    def set_round_numbers(self, enabled: bool) -> None:
        self.state.round_numbers = bool(enabled)

    # Conversion -----------------------------------------------
    async def convert(self) -> ConversionOutcome:
        if self.state.busy:
            logger.info("conversion already in progress; ignoring trigger")
            return ConversionOutcome.pending()

        self.state.busy = True
        self.state.status = ConversionStatus.CONVERTING
        self.state.error = None
        catalog = dict(self.state.catalog)
        currencies = self.state.currencies
        round_numbers = self.state.round_numbers
        try:
            if not currencies:
                raise EmptyCurrencyListError()
            logger.info(
                "conversion started",
                extra={"currencies": currencies, "round_numbers": round_numbers},
            )
            rates = await run_in_threadpool(self._provider.fetch_rates)
            result = convert_prices(
                catalog,
                currencies,
                rates,
                round_numbers,
                base_currency=self._base_currency,
            )
        except PricingError as e:
            logger.warning("conversion failed", extra={"error": e.message})
            return self._fail(e.message, e)
        except Exception as e:
            logger.exception("unexpected conversion error")
            return self._fail(str(e) or GENERIC_CONVERSION_ERROR, e)
        finally:
            self.state.busy = False

        self.state.result = result
        self.state.error = None
        self.state.status = ConversionStatus.SUCCESS
        logger.info("conversion finished", extra={"currencies": list(result)})
        return ConversionOutcome.success(result)

    def _fail(self, message: str, cause: BaseException) -> ConversionOutcome:
        self.state.error = message
        self.state.status = ConversionStatus.FAILED
        return ConversionOutcome.failure(message, cause)


def build_converter(settings, provider: RateProvider | None = None) -> PricingConverter:
    """Factory wiring a converter from application settings."""
    if provider is None:
        provider = make_rate_provider(settings.exchange_rate_provider, settings)
    return PricingConverter(
        provider,
        packages=settings.default_packages,
        currency_text=settings.default_currencies,
        base_currency=settings.base_currency,
    )


def get_converter(request: Request) -> PricingConverter:
    """FastAPI dependency returning the converter owned by the running app."""
    return request.app.state.converter
