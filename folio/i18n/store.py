"""Locale store — the single writable locale cell of a session."""

import logging
from collections.abc import Callable

from folio import hooks
from folio.i18n import DEFAULT_LOCALE, SUPPORTED_LOCALES, Locale, is_supported
from folio.i18n.resolver import Environment, HeadlessEnvironment, resolve_initial_locale
from folio.i18n.routing import locale_prefix, to_localized_path

_log = logging.getLogger(__name__)


class UnsupportedLocaleError(ValueError):
    """Raised by :meth:`LocaleStore.set_locale` for a locale outside the supported set."""


class LocaleStore:
    """Current locale for one session.

    ``set_locale`` is the only writer. Each successful call persists the new
    value through the environment once and notifies subscribers; a rejected
    call changes nothing and writes nothing.
    """

    def __init__(
        self,
        env: Environment | None = None,
        locale: Locale = DEFAULT_LOCALE,
        initialized: bool = False,
    ):
        self.env = env or HeadlessEnvironment()
        self._locale: Locale = locale if is_supported(locale) else DEFAULT_LOCALE
        self._initialized = initialized
        self._subscribers: list[Callable[[Locale], None]] = []

    @property
    def locale(self) -> Locale:
        return self._locale

    @property
    def prefix(self) -> str:
        return locale_prefix(self._locale)

    @property
    def initialized(self) -> bool:
        return self._initialized

    def initialize(self) -> Locale:
        """Resolve the session locale; later calls keep the first result."""
        if self._initialized:
            return self._locale
        self.set_locale(resolve_initial_locale(self.env))
        self._initialized = True
        return self._locale

    def set_locale(self, locale: str) -> None:
        if not is_supported(locale):
            raise UnsupportedLocaleError(
                f"Unsupported locale {locale!r}, expected one of {', '.join(SUPPORTED_LOCALES)}"
            )
        previous = self._locale
        self._locale = locale
        self.env.write_preference(locale)
        if previous != locale:
            _log.debug("Locale changed from %s to %s", previous, locale)
        for callback in list(self._subscribers):
            callback(locale)
        hooks.emit(hooks.LOCALE_CHANGED, previous=previous, locale=locale)

    def subscribe(self, callback: Callable[[Locale], None]) -> Callable[[], None]:
        """Register ``callback`` for locale changes; returns an unsubscribe function."""
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def localized_path(self, path: str) -> str:
        return to_localized_path(path, self._locale)
