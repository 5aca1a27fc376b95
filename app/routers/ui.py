from typing import Any, Dict

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from app.services.converter import PricingConverter, get_converter
from app.services.presenter import COPY_CONFIRMATION, render_result

router = APIRouter(tags=["ui"])

PRICE_FIELD_PREFIX = "price__"


def _apply_form(svc: PricingConverter, form) -> None:
    """Push every edit carried by the posted form into the converter.

    All buttons submit the same form, so prices, currency text and the
    rounding toggle are saved whichever action was clicked.
    """
    for key, value in form.multi_items():
        if key.startswith(PRICE_FIELD_PREFIX):
            name = key[len(PRICE_FIELD_PREFIX):]
            if name in svc.state.catalog:
                svc.set_price(name, value)
    if "currencies" in form:
        svc.set_currency_text(form.get("currencies"))
    svc.set_round_numbers(form.get("round_numbers") in ("on", "true", "1"))


def _back_to_form() -> RedirectResponse:
    return RedirectResponse(url="/ui", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/", include_in_schema=False)
async def root():
    return _back_to_form()


@router.get("/ui", response_class=HTMLResponse)
async def ui_home(request: Request, svc: PricingConverter = Depends(get_converter)):
    settings = request.app.state.settings
    state = svc.state
    context: Dict[str, Any] = {
        "app_name": settings.app_name,
        "version": settings.version,
        "base_currency": settings.base_currency,
        "state": state,
        "price_prefix": PRICE_FIELD_PREFIX,
        "result_text": render_result(state.result) if state.result is not None else None,
        "copy_confirmation": COPY_CONFIRMATION,
    }
    return request.app.state.templates.TemplateResponse(request, "converter.html", context)


@router.post("/ui/save", response_class=RedirectResponse)
async def ui_save(request: Request, svc: PricingConverter = Depends(get_converter)):
    _apply_form(svc, await request.form())
    return _back_to_form()


@router.post("/ui/packages/add", response_class=RedirectResponse)
async def ui_add_package(
    request: Request, svc: PricingConverter = Depends(get_converter)
):
    form = await request.form()
    _apply_form(svc, form)
    svc.add_entry(form.get("new_package"))
    return _back_to_form()


@router.post("/ui/packages/remove", response_class=RedirectResponse)
async def ui_remove_package(
    request: Request, svc: PricingConverter = Depends(get_converter)
):
    form = await request.form()
    _apply_form(svc, form)
    name = form.get("remove")
    if name:
        svc.remove_entry(name)
    return _back_to_form()


@router.post("/ui/convert", response_class=RedirectResponse)
async def ui_convert(request: Request, svc: PricingConverter = Depends(get_converter)):
    _apply_form(svc, await request.form())
    # Outcome (including errors) is recorded on the converter state and
    # rendered by the redirected GET.
    await svc.convert()
    return _back_to_form()
