"""Route guard: page access by session state, cookie policy and no-cache headers.

Every page path falls in exactly one class:

- PROTECTED pages need a valid session; anonymous visitors go to /login.
- AUTH_ONLY pages (login, signup) need the absence of one; signed-in users go
  to /profile.
- PUBLIC pages are served to everyone.

The two redirecting classes are disjoint, so no request can bounce between
/login and /profile.
"""

from enum import Enum
from typing import Annotated, Any

from fastapi import Depends, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

from sneakervault.api.dependencies import get_session_manager, session_token
from sneakervault.config import get_settings
from sneakervault.exceptions import RedirectRequired
from sneakervault.models.user import User
from sneakervault.services.sessions import SessionManager

settings = get_settings()

LOGIN_ROUTE = "/login"
LANDING_ROUTE = "/profile"

# Path prefixes; "/profile" covers "/profile" and "/profile/..." but not "/profiles"
PROTECTED_PREFIXES = ("/profile", "/search")
AUTH_ONLY_PATHS = frozenset({"/login", "/signup"})

NO_CACHE_HEADERS = {
    "Cache-Control": "no-store, no-cache, must-revalidate, proxy-revalidate",
    "Pragma": "no-cache",
    "Expires": "0",
}

SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
}


class RouteClass(str, Enum):
    """Access class of a page route."""

    PROTECTED = "protected"
    AUTH_ONLY = "auth_only"
    PUBLIC = "public"


def _matches_prefix(path: str, prefix: str) -> bool:
    return path == prefix or path.startswith(prefix + "/")


def classify(path: str) -> RouteClass:
    """Classify a request path. Total: every path gets exactly one class."""
    normalized = path.rstrip("/") or "/"
    if any(_matches_prefix(normalized, prefix) for prefix in PROTECTED_PREFIXES):
        return RouteClass.PROTECTED
    if normalized in AUTH_ONLY_PATHS:
        return RouteClass.AUTH_ONLY
    return RouteClass.PUBLIC


def apply_no_cache_headers(response: Response) -> Response:
    for name, value in NO_CACHE_HEADERS.items():
        response.headers[name] = value
    return response


def apply_security_headers(response: Response) -> Response:
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    if settings.is_production:
        response.headers.setdefault(
            "Strict-Transport-Security", "max-age=63072000; includeSubDomains"
        )
    return response


def set_session_cookie(response: Response, token: str) -> None:
    """Attach the session cookie. Max-Age mirrors the server-side TTL."""
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=int(settings.session_ttl.total_seconds()),
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


def clear_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )


def guard_page(
    request: Request,
    manager: Annotated[SessionManager, Depends(get_session_manager)],
) -> User | None:
    """Page dependency enforcing the route class of the requested path.

    Returns the signed-in user, or None on public and auth-only pages.
    """
    route_class = classify(request.url.path)
    resolution = manager.resolve_state(session_token(request))

    if route_class == RouteClass.PROTECTED and not resolution.is_valid:
        raise RedirectRequired(LOGIN_ROUTE, clear_cookie=resolution.had_cookie)
    if route_class == RouteClass.AUTH_ONLY and resolution.is_valid:
        raise RedirectRequired(LANDING_ROUTE)
    return resolution.user


class NoCacheMiddleware(BaseHTTPMiddleware):
    """Mark every response uncacheable and add baseline security headers."""

    async def dispatch(self, request: Request, call_next: Any) -> Response:
        response = await call_next(request)
        apply_no_cache_headers(response)
        apply_security_headers(response)
        return response  # type: ignore[no-any-return]
