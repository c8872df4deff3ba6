"""i18n message catalog with English fallback."""

import json
from pathlib import Path
from typing import Literal

Locale = Literal["en", "gr"]

SUPPORTED_LOCALES: tuple[Locale, ...] = ("en", "gr")
DEFAULT_LOCALE: Locale = "en"

# Each language named in itself, for the language switcher
LOCALE_NAMES: dict[Locale, str] = {"en": "English", "gr": "Ελληνικά"}

_cache: dict[str, dict] = {}
_dir = Path(__file__).parent


def is_supported(value: object) -> bool:
    return isinstance(value, str) and value in SUPPORTED_LOCALES


def coerce_locale(value: str | None) -> Locale:
    """Map any input onto the closed locale set; unknown values become the default."""
    if isinstance(value, str):
        candidate = value.strip().lower()
        if candidate in SUPPORTED_LOCALES:
            return candidate
    return DEFAULT_LOCALE


def load_all() -> None:
    """Load all JSON catalog files into the module cache."""
    for locale in SUPPORTED_LOCALES:
        path = _dir / f"{locale}.json"
        with open(path, encoding="utf-8") as f:
            _cache[locale] = json.load(f)


def _catalog(locale: str) -> dict:
    if not _cache:
        load_all()
    return _cache.get(locale, {})


def _flatten(tree: dict, prefix: str = "") -> dict[str, str]:
    flat: dict[str, str] = {}
    for key, value in tree.items():
        path = f"{prefix}{key}"
        if isinstance(value, dict):
            flat.update(_flatten(value, f"{path}."))
        else:
            flat[path] = value
    return flat


def get_translations(locale: str) -> dict[str, str]:
    """Return flattened translations: English base + target locale overrides.

    Keys are dotted paths into the nested catalog (``nav.home``). Every
    English key is present in the result; unsupported locales get English.
    """
    en = _flatten(_catalog(DEFAULT_LOCALE))
    if locale not in SUPPORTED_LOCALES or locale == DEFAULT_LOCALE:
        return en

    merged = dict(en)
    merged.update(_flatten(_catalog(locale)))
    return merged


def t(locale: str, key: str) -> str:
    """Look up one dotted key, falling back to English and then to the key."""
    return get_translations(locale).get(key, key)


def get_seo_text(locale: str) -> dict[str, str]:
    """Return the SEO bundle for ``locale``, or the whole English bundle.

    Unlike :func:`get_translations` this never mixes locales: a locale
    without its own ``seo`` section gets the default bundle unchanged.
    """
    bundle = _catalog(locale).get("seo") if locale in SUPPORTED_LOCALES else None
    if not bundle:
        bundle = _catalog(DEFAULT_LOCALE)["seo"]
    return dict(bundle)
