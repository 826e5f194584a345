"""Error Handlers — global exception handlers for the Filmoteca API.

Invariants:
    - FilmotecaError → its http_status + structured JSON (code, message, severity)
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details
    - Messages rendered in the locale configured on app.state.settings

Design Decisions:
    - Three-layer handler: domain (FilmotecaError), validation (Pydantic), catch-all (Exception)
    - 4xx domain errors logged at WARNING, store failures at ERROR
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from filmoteca.core.domain_types import Locale
from filmoteca.core.errors import FilmotecaError, ErrorSeverity
from filmoteca.core.language_strings import render

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_filmoteca_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _request_locale(request: Request) -> Locale:
    settings = getattr(request.app.state, "settings", None)
    return settings.locale if settings else Locale.EN


def _register_filmoteca_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(FilmotecaError)
    async def filmoteca_error_handler(request: Request, exc: FilmotecaError):
        """Handle all Filmoteca domain/infrastructure errors."""
        log = logger.error if exc.http_status >= 500 else logger.warning
        log(
            f"FilmotecaError: {exc.message}",
            extra={
                "error_code": exc.code,
                "path": request.url.path,
                "method": request.method,
            },
        )
        return JSONResponse(
            status_code=exc.http_status,
            content=exc.to_response(_request_locale(request)),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(
                exc, _request_locale(request),
            ),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": render(_request_locale(request), "internal_error"),
                    "category": "internal",
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )


def _build_validation_error_response(
    exc: RequestValidationError, locale: Locale,
) -> dict:
    """Build structured validation error response."""
    return {
        "error": {
            "code": "VALIDATION_ERROR",
            "message": render(locale, "validation_error"),
            "category": "validation",
            "severity": ErrorSeverity.ERROR.value,
            "details": [
                {
                    "field": ".".join(str(loc) for loc in e["loc"]),
                    "message": e["msg"],
                    "type": e["type"],
                }
                for e in exc.errors()
            ],
        },
    }
