"""About-section JSON API — Starlette routes mounted on the Reflex backend."""

import logging

from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from folio.content.about import get_about
from folio.i18n import DEFAULT_LOCALE, SUPPORTED_LOCALES, Locale, coerce_locale, is_supported
from folio.i18n.routing import locale_from_path, to_localized_path

_log = logging.getLogger(__name__)

_JSON_UTF8 = "application/json; charset=utf-8"


def _ambient_locale(request: Request) -> Locale:
    """Locale implied by the request path prefix (``/gr/api/...``)."""
    return locale_from_path(request.url.path) or DEFAULT_LOCALE


def _section_response(locale: Locale) -> JSONResponse:
    about = get_about(locale)
    payload = {
        "lang": locale,
        "title": about.title,
        "highlight": about.highlight,
        "paragraphs": list(about.paragraphs),
    }
    return JSONResponse(
        payload,
        status_code=200,
        media_type=_JSON_UTF8,
        headers={"Cache-Control": "no-store"},
    )


async def about_section(request: Request) -> JSONResponse:
    return _section_response(_ambient_locale(request))


async def about_section_by_lang(request: Request) -> JSONResponse:
    requested = (request.query_params.get("lang") or "").strip().lower()
    if is_supported(requested):
        return _section_response(coerce_locale(requested))
    if requested:
        _log.debug("Ignoring unsupported lang query parameter %r", requested)
    return _section_response(_ambient_locale(request))


def _localized_routes(path: str, endpoint) -> list[Route]:
    return [
        Route(to_localized_path(path, locale), endpoint, methods=["GET"])
        for locale in SUPPORTED_LOCALES
    ]


api_routes = [
    *_localized_routes("/api/section2", about_section),
    *_localized_routes("/api/section2/lang", about_section_by_lang),
]
