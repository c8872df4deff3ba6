"""i18n state — session locale, persisted choice and reactive translations."""

import logging
from datetime import date

import reflex as rx

from folio.config import settings
from folio.i18n import DEFAULT_LOCALE, get_translations
from folio.i18n.routing import normalize_path, to_localized_path
from folio.i18n.store import LocaleStore, UnsupportedLocaleError
from folio.ui.components.nav_links import NAV_LINKS

_log = logging.getLogger(__name__)


class _SessionEnvironment:
    """Browser environment over a session's local-storage var and current route."""

    def __init__(self, state: "I18nState"):
        self.state = state

    def read_preference(self) -> str | None:
        return self.state.stored_locale or None

    def write_preference(self, locale: str) -> None:
        self.state.stored_locale = locale

    def current_path(self) -> str | None:
        return self.state.router.page.path or "/"


class I18nState(rx.State):
    locale: str = DEFAULT_LOCALE
    translations: dict[str, str] = get_translations(DEFAULT_LOCALE)
    stored_locale: str = rx.LocalStorage("", name=settings.locale_storage_key, sync=True)
    locale_resolved: bool = False
    copyright_year: int = date.today().year

    @rx.var
    def nav_hrefs(self) -> dict[str, str]:
        return {link.path: to_localized_path(link.path, self.locale) for link in NAV_LINKS}

    @rx.var
    def current_base_path(self) -> str:
        return normalize_path(self.router.page.path or "/")

    def _locale_store(self) -> LocaleStore:
        store = LocaleStore(
            _SessionEnvironment(self),
            locale=self.locale,
            initialized=self.locale_resolved,
        )
        store.subscribe(self._apply_locale)
        return store

    def _apply_locale(self, locale: str):
        self.locale = locale
        self.translations = get_translations(locale)

    def initialize(self):
        self.copyright_year = date.today().year
        store = self._locale_store()
        store.initialize()
        self.locale_resolved = store.initialized

    def set_locale(self, locale: str):
        store = self._locale_store()
        try:
            store.set_locale(locale)
        except UnsupportedLocaleError:
            _log.warning("Rejected locale switch to %r", locale)
            return
        self.locale_resolved = True
        return rx.redirect(store.localized_path(self.current_base_path))
