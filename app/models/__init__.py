"""Pydantic request/response models for the pricing converter API."""

from .pricing import (
    PackageIn,
    PriceIn,
    CatalogOut,
    CurrencyListOut,
    ConvertIn,
    ConversionOut,
    ConverterStateOut,
    ExportOut,
)

__all__ = [
    "PackageIn",
    "PriceIn",
    "CatalogOut",
    "CurrencyListOut",
    "ConvertIn",
    "ConversionOut",
    "ConverterStateOut",
    "ExportOut",
]
