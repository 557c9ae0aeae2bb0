"""Locale-prefix routing for public pages.

Requests without a ``/th`` or ``/en`` prefix are redirected to the prefixed
path, picking the locale from the first ``Accept-Language`` entry.
"""

from typing import Iterable, Optional
from urllib.parse import quote

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse

from sofaclean.config import settings

EXCLUDED_PREFIXES = ("/admin", "/api")


def get_locale(
    accept_language: Optional[str],
    locales: Iterable[str] | None = None,
    default: str | None = None,
) -> str:
    locales = tuple(locales or settings.SUPPORTED_LOCALES)
    default = default or settings.DEFAULT_LOCALE
    if not accept_language or not isinstance(accept_language, str):
        return default
    first = accept_language.split(",")[0].split(";")[0].strip()
    preferred = first.split("-")[0].split("_")[0].strip().lower()
    return preferred if preferred in locales else default


def has_locale_prefix(path: str, locales: Iterable[str]) -> bool:
    return any(path == f"/{locale}" or path.startswith(f"/{locale}/") for locale in locales)


def resolve_locale_redirect(
    path: str,
    accept_language: Optional[str],
    locales: Iterable[str] | None = None,
    default: str | None = None,
) -> Optional[str]:
    """Return the locale-prefixed path to redirect to, or ``None`` to pass through."""
    locales = tuple(locales or settings.SUPPORTED_LOCALES)
    path = path or "/"
    if path.startswith(EXCLUDED_PREFIXES) or "." in path:
        return None
    if has_locale_prefix(path, locales):
        return None
    locale = get_locale(accept_language, locales, default)
    if path == "/":
        return f"/{locale}"
    return f"/{locale}{path}"


class LocaleRedirectMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        target = resolve_locale_redirect(request.url.path, request.headers.get("accept-language"))
        if target is None:
            return await call_next(request)
        return RedirectResponse(url=str(request.url.replace(path=quote(target))), status_code=307)
