"""Translate domain errors into JSON or redirect responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from sneakervault.api.guard import (
    apply_no_cache_headers,
    apply_security_headers,
    clear_session_cookie,
)
from sneakervault.exceptions import (
    DuplicateFieldError,
    InvalidCredentialsError,
    NotAuthenticatedError,
    NotFoundError,
    RedirectRequired,
    UpstreamServiceError,
    ValidationFailed,
)
from sneakervault.schemas.validation import field_errors

logger = logging.getLogger(__name__)


def _error(status_code: int, message: str, **extra) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message, **extra})


async def request_validation_handler(request: Request, exc: RequestValidationError):
    return _error(
        status.HTTP_400_BAD_REQUEST, "Validation failed", details=field_errors(exc.errors())
    )


async def validation_failed_handler(request: Request, exc: ValidationFailed):
    return _error(status.HTTP_400_BAD_REQUEST, "Validation failed", details=exc.errors)


async def duplicate_field_handler(request: Request, exc: DuplicateFieldError):
    return _error(status.HTTP_409_CONFLICT, str(exc), field=exc.field)


async def not_authenticated_handler(request: Request, exc: NotAuthenticatedError):
    response = _error(status.HTTP_401_UNAUTHORIZED, "Not authenticated")
    if exc.clear_cookie:
        clear_session_cookie(response)
    return response


async def invalid_credentials_handler(request: Request, exc: InvalidCredentialsError):
    extra = {"field": exc.field} if exc.field else {}
    return _error(status.HTTP_401_UNAUTHORIZED, str(exc), **extra)


async def not_found_handler(request: Request, exc: NotFoundError):
    return _error(status.HTTP_404_NOT_FOUND, str(exc) or "Not found")


async def upstream_handler(request: Request, exc: UpstreamServiceError):
    return _error(status.HTTP_502_BAD_GATEWAY, str(exc))


async def redirect_handler(request: Request, exc: RedirectRequired):
    response = RedirectResponse(url=exc.location, status_code=status.HTTP_303_SEE_OTHER)
    if exc.clear_cookie:
        clear_session_cookie(response)
    return apply_no_cache_headers(response)


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    # Runs outside NoCacheMiddleware, so the headers are added here
    response = _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Internal server error")
    apply_no_cache_headers(response)
    return apply_security_headers(response)


def register_exception_handlers(app: FastAPI) -> None:
    """Install all handlers on ``app``."""
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(ValidationFailed, validation_failed_handler)
    app.add_exception_handler(DuplicateFieldError, duplicate_field_handler)
    app.add_exception_handler(NotAuthenticatedError, not_authenticated_handler)
    app.add_exception_handler(InvalidCredentialsError, invalid_credentials_handler)
    app.add_exception_handler(NotFoundError, not_found_handler)
    app.add_exception_handler(UpstreamServiceError, upstream_handler)
    app.add_exception_handler(RedirectRequired, redirect_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
