"""Locale-prefixed URL paths.

The default locale lives at the bare routes (``/about``); every other
locale is served under a leading path segment (``/gr/about``).
"""

import re
from typing import TYPE_CHECKING

from folio.i18n import DEFAULT_LOCALE, SUPPORTED_LOCALES, Locale, coerce_locale

if TYPE_CHECKING:
    from folio.i18n.store import LocaleStore

PREFIXED_LOCALES: tuple[Locale, ...] = tuple(
    loc for loc in SUPPORTED_LOCALES if loc != DEFAULT_LOCALE
)

_TRAILING_SLASHES = re.compile(r"/+$")


def _ensure_leading_slash(path: str) -> str:
    return path if path.startswith("/") else f"/{path}"


def locale_prefix(locale: str) -> str:
    """``""`` for the default locale, ``/<locale>`` otherwise."""
    locale = coerce_locale(locale)
    return "" if locale == DEFAULT_LOCALE else f"/{locale}"


def locale_from_path(path: str) -> Locale | None:
    """Return the non-default locale whose segment starts ``path``, if any."""
    first = _ensure_leading_slash(path).split("/", 2)[1]
    return first if first in PREFIXED_LOCALES else None


def to_localized_path(
    path: str,
    locale: str | None = None,
    store: "LocaleStore | None" = None,
) -> str:
    """Build the absolute path of ``path`` under ``locale``.

    When ``locale`` is omitted the store's current locale is used, or the
    default locale when no store is given.
    """
    if locale is None:
        locale = store.locale if store is not None else DEFAULT_LOCALE
    target = coerce_locale(locale)
    normalized = _ensure_leading_slash(path)

    if target == DEFAULT_LOCALE:
        return normalized
    if normalized == "/":
        return f"/{target}"
    return f"/{target}{normalized}"


def strip_locale_prefix(path: str) -> str:
    """Remove a leading ``/<locale>`` segment, e.g. ``/gr/about`` -> ``/about``."""
    normalized = _ensure_leading_slash(path)
    locale = locale_from_path(normalized)
    if locale is None:
        return normalized
    return normalized[len(locale) + 1 :] or "/"


def normalize_path(path: str) -> str:
    """Base route for comparisons: no locale prefix, no trailing slashes."""
    base = strip_locale_prefix(path)
    if base == "/":
        return "/"
    return _TRAILING_SLASHES.sub("", base) or "/"
