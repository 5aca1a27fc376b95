from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query

from app.models.pricing import CatalogOut, CurrencyListOut, PackageIn, PriceIn
from app.services.converter import PricingConverter, get_converter
from app.services.currency_parser import parse_currency_list

"""Catalog router: edit the USD package prices held by the converter.

Adding an existing or blank name and removing an unknown one are no-ops, and
a non-numeric price becomes 0. Setting the price of an unknown package is a
404: packages only come into existence through POST /catalog/.
Each call returns the full catalog after the edit.
"""

router = APIRouter(prefix="/catalog", tags=["catalog"])
currencies_router = APIRouter(prefix="/currencies", tags=["currencies"])


@router.get("/", response_model=CatalogOut, summary="Current package prices (USD)")
async def get_catalog(svc: PricingConverter = Depends(get_converter)):
    return CatalogOut(packages=svc.state.catalog)


@router.post("/", response_model=CatalogOut, summary="Add a package at price 0")
async def add_package(
    payload: PackageIn, svc: PricingConverter = Depends(get_converter)
):
    return CatalogOut(packages=svc.add_entry(payload.name))


@router.post("/reset", response_model=CatalogOut, summary="Restore default packages")
async def reset_catalog(svc: PricingConverter = Depends(get_converter)):
    return CatalogOut(packages=svc.reset_catalog())


@router.put("/{name}", response_model=CatalogOut, summary="Set a package price")
async def set_price(
    name: str, payload: PriceIn, svc: PricingConverter = Depends(get_converter)
):
    if name not in svc.state.catalog:
        raise HTTPException(status_code=404, detail=f"package '{name}' not found")
    return CatalogOut(packages=svc.set_price(name, payload.value))


@router.delete("/{name}", response_model=CatalogOut, summary="Remove a package")
async def remove_package(name: str, svc: PricingConverter = Depends(get_converter)):
    return CatalogOut(packages=svc.remove_entry(name))


@currencies_router.get(
    "/parse", response_model=CurrencyListOut, summary="Normalize a currency list"
)
async def parse_currencies(text: str = Query("", description="Comma separated codes")):
    return CurrencyListOut(text=text, currencies=parse_currency_list(text))
