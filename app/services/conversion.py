from __future__ import annotations

"""Price conversion engine.

Turns a USD price catalog into one catalog per requested currency. Pure and
synchronous: all I/O (rate lookup) happens before this is called.

Rules:
    - The base currency entry is always a verbatim copy of the catalog.
    - Codes missing from the rate table (or with a zero rate) are skipped.
    - Rounding is applied exactly once, here: whole units when
      ``round_numbers`` else hundredths.
"""
from typing import Dict, Iterable, Mapping

from app.services.money import round2, round_whole

ConversionResult = Dict[str, Dict[str, float]]


def convert_price(price: float, rate: float, round_numbers: bool = False) -> float:
    converted = price * rate
    if round_numbers:
        return round_whole(converted)
    return round2(converted)


def convert_prices(
    catalog: Mapping[str, float],
    currencies: Iterable[str],
    rates: Mapping[str, float],
    round_numbers: bool = False,
    *,
    base_currency: str = "USD",
) -> ConversionResult:
    result: ConversionResult = {base_currency: dict(catalog)}
    for code in currencies:
        if code == base_currency:
            continue
        rate = rates.get(code)
        if not rate:
            continue
        result[code] = {
            name: convert_price(price, rate, round_numbers)
            for name, price in catalog.items()
        }
    return result
