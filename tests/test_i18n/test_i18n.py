"""Tests for the i18n message catalog."""

import json
import re
from pathlib import Path

import pytest

from folio.i18n import (
    DEFAULT_LOCALE,
    LOCALE_NAMES,
    SUPPORTED_LOCALES,
    _cache,
    _dir,
    coerce_locale,
    get_seo_text,
    get_translations,
    is_supported,
    load_all,
    t,
)


@pytest.fixture
def reset_cache():
    """Reload pristine catalogs after a test edits the cache."""
    _cache.clear()
    load_all()
    yield
    _cache.clear()
    load_all()


class TestI18nConfig:
    def test_default_locale_is_english(self):
        assert DEFAULT_LOCALE == "en"

    def test_supported_locales(self):
        assert SUPPORTED_LOCALES == ("en", "gr")

    def test_is_supported(self):
        assert is_supported("en")
        assert is_supported("gr")
        assert not is_supported("fr")
        assert not is_supported("GR")
        assert not is_supported(None)

    def test_coerce_locale(self):
        assert coerce_locale("gr") == "gr"
        assert coerce_locale(" GR ") == "gr"
        assert coerce_locale("fr") == "en"
        assert coerce_locale("") == "en"
        assert coerce_locale(None) == "en"

    def test_every_locale_has_a_name(self):
        assert set(LOCALE_NAMES) == set(SUPPORTED_LOCALES)
        assert LOCALE_NAMES["gr"] == "Ελληνικά"


class TestLoadAll:
    def test_load_all_populates_cache(self):
        _cache.clear()
        load_all()
        assert set(_cache) == set(SUPPORTED_LOCALES)
        for locale in SUPPORTED_LOCALES:
            assert isinstance(_cache[locale], dict)
            assert len(_cache[locale]) > 0

    def test_all_locales_parse(self):
        for locale in SUPPORTED_LOCALES:
            with open(_dir / f"{locale}.json", encoding="utf-8") as f:
                data = json.load(f)
            assert isinstance(data, dict)
            assert "seo" in data


class TestGetTranslations:
    def test_keys_are_flattened(self):
        en = get_translations("en")
        assert en["nav.home"] == "Home"
        assert en["pages.contact.title"] == "Contact"
        assert en["seo.homeTitle"] == "My Portfolio"

    def test_greek_values(self):
        gr = get_translations("gr")
        assert gr["nav.home"] == "Αρχική"
        assert gr["footer.rights"] == "Με επιφύλαξη παντός δικαιώματος."

    def test_greek_has_every_english_key(self):
        en_keys = set(get_translations("en"))
        assert en_keys <= set(get_translations("gr"))

    def test_missing_greek_key_falls_back_to_english(self):
        # gr.json does not translate the dialog close label
        assert "close" not in _cache.get("gr", {}).get("projects", {})
        assert get_translations("gr")["projects.close"] == "Close"

    def test_unsupported_locale_returns_english(self):
        assert get_translations("fr") == get_translations("en")

    def test_values_are_strings(self):
        for locale in SUPPORTED_LOCALES:
            for key, value in get_translations(locale).items():
                assert isinstance(value, str), f"{locale}.{key} is not a string"

    def test_result_is_a_copy(self):
        get_translations("en")["nav.home"] = "changed"
        assert get_translations("en")["nav.home"] == "Home"


class TestT:
    def test_lookup(self):
        assert t("gr", "nav.about") == "Σχετικά"

    def test_fallback_to_english(self, reset_cache):
        del _cache["gr"]["nav"]["about"]
        assert t("gr", "nav.about") == "About"

    def test_unknown_key_returns_key(self):
        assert t("en", "nav.unknown") == "nav.unknown"


class TestGetSeoText:
    def test_english_bundle(self):
        seo = get_seo_text("en")
        assert seo["homeTitle"] == "My Portfolio"

    def test_greek_bundle(self):
        assert get_seo_text("gr")["homeTitle"] == "Το Portfolio μου"

    def test_unsupported_locale_returns_default_bundle(self):
        assert get_seo_text("fr") == get_seo_text("en")

    def test_partial_bundle_is_not_merged(self, reset_cache):
        _cache["gr"]["seo"] = {"homeTitle": "Μόνο αυτό"}
        assert get_seo_text("gr") == {"homeTitle": "Μόνο αυτό"}

    def test_missing_bundle_falls_back_whole(self, reset_cache):
        del _cache["gr"]["seo"]
        assert get_seo_text("gr") == get_seo_text("en")

    def test_every_page_has_title_and_description(self):
        for locale in SUPPORTED_LOCALES:
            seo = get_seo_text(locale)
            for page in ("home", "about", "projects", "contact"):
                assert seo[f"{page}Title"]
                assert seo[f"{page}Description"]


# ---------------------------------------------------------------------------
# Code ↔ JSON sync: every _t["key"] in UI code must exist in the catalog.
# ---------------------------------------------------------------------------

_UI_ROOT = Path(__file__).resolve().parent.parent.parent / "folio" / "ui"
_KEY_RE = re.compile(r'_t\["([^"]+)"\]')
# Any quoted dotted key, including keys held in tables such as NAV_LINKS
_QUOTED_KEY_RE = re.compile(r'"([a-z]+(?:\.[A-Za-z]+)+)"')


def _collect_keys_from_code() -> set[str]:
    keys: set[str] = set()
    for py_file in _UI_ROOT.rglob("*.py"):
        keys.update(_KEY_RE.findall(py_file.read_text(encoding="utf-8")))
    return keys


class TestCodeCatalogSync:
    def test_code_references_keys(self):
        assert "hero.name" in _collect_keys_from_code()

    def test_all_code_keys_exist_in_english(self):
        missing = _collect_keys_from_code() - set(get_translations("en"))
        assert not missing, f"Keys used in code but missing from en.json: {sorted(missing)}"

    def test_nav_link_label_keys_exist(self):
        from folio.ui.components.nav_links import NAV_LINKS

        en = get_translations("en")
        for link in NAV_LINKS:
            assert link.label_key in en

    def test_no_orphan_keys_in_catalog(self):
        """Every non-SEO key in en.json is referenced somewhere in the UI code."""
        referenced: set[str] = set()
        for py_file in _UI_ROOT.rglob("*.py"):
            referenced.update(_QUOTED_KEY_RE.findall(py_file.read_text(encoding="utf-8")))
        ui_keys = {k for k in get_translations("en") if not k.startswith("seo.")}
        orphans = ui_keys - referenced
        assert not orphans, f"Keys in en.json but never used in code: {sorted(orphans)}"
