from fastapi import Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from starlette import status
from starlette.exceptions import HTTPException as StarletteHTTPException
import logging

logger = logging.getLogger("app.errors")

GENERIC_CONVERSION_ERROR = "An error occurred during conversion"


class PricingError(Exception):
    """Base class for conversion failures surfaced to the user as a message."""

    default_message = GENERIC_CONVERSION_ERROR

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class EmptyCurrencyListError(PricingError):
    default_message = "Please enter at least one target currency"


class RateFetchError(PricingError):
    default_message = "Failed to fetch exchange rates"


class ConversionBusyError(PricingError):
    default_message = "A conversion is already in progress"


def http_error_handler(request: Request, exc: StarletteHTTPException):  # type: ignore
    if exc.status_code == status.HTTP_404_NOT_FOUND and exc.detail == "Not Found":
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "error": "not_found",
                "detail": f"No route for {request.method} {request.url.path}",
            },
        )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": _error_code(exc.status_code), "detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


def validation_error_handler(request: Request, exc: RequestValidationError):  # type: ignore
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "error": "validation_error",
            "detail": jsonable_encoder(exc.errors()),
        },
    )


def server_error_handler(request: Request, exc: Exception):  # type: ignore
    logger.exception("unhandled exception")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": "internal_error",
            "detail": "An unexpected error occurred.",
        },
    )


_ERROR_CODES = {
    400: "bad_request",
    404: "not_found",
    409: "conflict",
    500: "internal_error",
    502: "bad_gateway",
}


def _error_code(status_code: int) -> str:
    return _ERROR_CODES.get(status_code, "error")
