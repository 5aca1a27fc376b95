from __future__ import annotations

"""Price catalog operations.

A catalog is an ordered mapping of package name -> USD price. Every operation
here is pure: it returns a new mapping and never mutates its input, so the
controller can swap state atomically and a conversion in flight keeps the
snapshot it started with.

Coercion rule: anything that is not a finite number (None, "", "abc",
"12abc", "nan") becomes the default of 0. Negative prices are clamped to 0.
"""
import math
from typing import Any, Dict, Mapping

PriceCatalog = Dict[str, float]

DEFAULT_PRICE = 0.0

DEFAULT_PACKAGES: Mapping[str, float] = {
    "starter": 99,
    "pro": 199,
    "business": 299,
    "enterprise": 499,
    "hosting1Month": 15,
    "hosting3Month": 12,
    "hosting6Month": 9,
    "hosting12Month": 6,
}


def parse_price(raw: Any, default: float = DEFAULT_PRICE) -> float:
    """Parse user input into a price, falling back to ``default``."""
    if raw is None or isinstance(raw, bool):
        return default
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip()
        if not text:
            return default
        try:
            value = float(text)
        except ValueError:
            return default
    if not math.isfinite(value):
        return default
    return max(value, 0.0)


def new_catalog(entries: Mapping[str, Any] | None = None) -> PriceCatalog:
    source = DEFAULT_PACKAGES if entries is None else entries
    return {str(name): parse_price(price) for name, price in source.items()}


def set_price(catalog: Mapping[str, float], name: str, raw: Any) -> PriceCatalog:
    """Update an existing entry. Unknown names are a no-op; use add_entry."""
    updated = dict(catalog)
    if name in updated:
        updated[name] = parse_price(raw)
    return updated


def add_entry(catalog: Mapping[str, float], name: str | None) -> PriceCatalog:
    """Append ``name`` at price 0. Empty or existing names are a no-op."""
    candidate = (name or "").strip()
    updated = dict(catalog)
    if not candidate or candidate in updated:
        return updated
    updated[candidate] = DEFAULT_PRICE
    return updated


def remove_entry(catalog: Mapping[str, float], name: str) -> PriceCatalog:
    updated = dict(catalog)
    updated.pop(name, None)
    return updated


__all__ = [
    "PriceCatalog",
    "DEFAULT_PACKAGES",
    "DEFAULT_PRICE",
    "parse_price",
    "new_catalog",
    "set_price",
    "add_entry",
    "remove_entry",
]
