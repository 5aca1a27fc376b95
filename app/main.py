from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.templating import Jinja2Templates
from starlette.exceptions import HTTPException as StarletteHTTPException
from .core.config import get_settings, Settings
from .core.logging import init_logging, request_context_middleware
from .core import errors
from .routers import health, catalog, conversions, ui
from .services.converter import build_converter
from .services.rates.base import RateProvider


def create_app(
    settings_override: Settings | None = None,
    rate_provider: RateProvider | None = None,
) -> FastAPI:
    """Application factory.

    settings_override: pass an already constructed Settings instance for tests
    to isolate environment. Falls back to cached get_settings().
    rate_provider: inject a provider (e.g. a fake in tests) instead of the one
    named by settings.exchange_rate_provider.
    """
    settings = settings_override or get_settings()
    # Initialize logging early
    init_logging(debug=settings.debug)

    app = FastAPI(
        title=settings.app_name, debug=settings.debug, version=settings.version
    )

    # One converter per running instance; all state is in memory
    app.state.settings = settings
    app.state.converter = build_converter(settings, provider=rate_provider)
    app.state.templates = Jinja2Templates(directory=str(settings.templates_dir))

    # Middleware (request id / structured logging)
    app.middleware("http")(request_context_middleware)

    # Error handlers
    app.add_exception_handler(StarletteHTTPException, errors.http_error_handler)
    app.add_exception_handler(RequestValidationError, errors.validation_error_handler)
    app.add_exception_handler(Exception, errors.server_error_handler)

    # Routers
    app.include_router(health.router)
    app.include_router(catalog.router)
    app.include_router(catalog.currencies_router)
    app.include_router(conversions.router)
    app.include_router(ui.router)

    return app


app = create_app()
