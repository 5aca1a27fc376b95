from __future__ import annotations

from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field, field_validator

# Whole-unit rounding yields ints; keep them ints in responses
Number = Union[int, float]


class PackageIn(BaseModel):
    name: str = Field(..., description="Package name (new key, price starts at 0)")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        return v.strip()


class PriceIn(BaseModel):
    # Raw user input; unparseable text degrades to 0 rather than failing validation
    value: Union[float, str, None] = Field(None, description="USD price as number or text")


class CatalogOut(BaseModel):
    packages: Dict[str, float]


class CurrencyListOut(BaseModel):
    text: str
    currencies: List[str]


class ConvertIn(BaseModel):
    currencies: Optional[str] = Field(
        None, description="Comma separated codes; omitted keeps the current form value"
    )
    round_numbers: Optional[bool] = Field(
        None, description="Round to whole units; omitted keeps the current form value"
    )


class ConversionOut(BaseModel):
    status: str
    result: Dict[str, Dict[str, Number]]
    text: str


class ConverterStateOut(BaseModel):
    catalog: Dict[str, float]
    currency_text: str
    currencies: List[str]
    round_numbers: bool
    status: str
    result: Optional[Dict[str, Dict[str, Number]]] = None
    error: Optional[str] = None
    busy: bool


class ExportOut(BaseModel):
    text: str
    message: str
