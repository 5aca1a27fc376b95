from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse

from app.core.errors import ConversionBusyError, EmptyCurrencyListError, RateFetchError
from app.models.pricing import ConversionOut, ConverterStateOut, ConvertIn, ExportOut
from app.services.converter import PricingConverter, get_converter
from app.services.presenter import clipboard_payload, render_result

"""Conversions router.

Endpoints:
    - GET  /conversions/state           -> full converter state
    - POST /conversions/                -> run a conversion (optionally updating inputs)
    - GET  /conversions/latest          -> last successful result
    - GET  /conversions/latest/export   -> pretty JSON text for the clipboard

Failure mapping: empty currency list 400, busy 409, rate fetch 502, anything
else 500. A failure never clears the last successful result.
"""

router = APIRouter(prefix="/conversions", tags=["conversions"])


def _require_result(svc: PricingConverter):
    if svc.state.result is None:
        raise HTTPException(status_code=404, detail="No conversion result to export")
    return svc.state.result


@router.get("/state", response_model=ConverterStateOut, summary="Converter state")
async def get_state(svc: PricingConverter = Depends(get_converter)):
    return ConverterStateOut(**svc.state.to_dict())


@router.post("/", response_model=ConversionOut, summary="Convert catalog prices")
async def convert(
    payload: ConvertIn | None = None,
    svc: PricingConverter = Depends(get_converter),
):
    if payload is not None:
        if payload.currencies is not None:
            svc.set_currency_text(payload.currencies)
        if payload.round_numbers is not None:
            svc.set_round_numbers(payload.round_numbers)

    outcome = await svc.convert()
    if outcome.is_pending:
        raise HTTPException(status_code=409, detail=ConversionBusyError().message)
    if not outcome.ok:
        if isinstance(outcome.cause, EmptyCurrencyListError):
            status_code = 400
        elif isinstance(outcome.cause, RateFetchError):
            status_code = 502
        else:
            status_code = 500
        raise HTTPException(status_code=status_code, detail=outcome.error)
    return ConversionOut(
        status=outcome.status.value,
        result=outcome.result,
        text=render_result(outcome.result),
    )


@router.get("/latest", summary="Last successful conversion result")
async def latest(svc: PricingConverter = Depends(get_converter)):
    return _require_result(svc)


@router.get(
    "/latest/export",
    response_class=PlainTextResponse,
    summary="Pretty-printed result for clipboard export",
)
async def export_text(svc: PricingConverter = Depends(get_converter)):
    return PlainTextResponse(render_result(_require_result(svc)))


@router.get(
    "/latest/clipboard",
    response_model=ExportOut,
    summary="Clipboard payload with confirmation message",
)
async def export_clipboard(svc: PricingConverter = Depends(get_converter)):
    return ExportOut(**clipboard_payload(_require_result(svc)))
