"""Initial locale resolution.

Precedence, highest first: stored preference, URL prefix, default locale.
Browser access goes through an :class:`Environment` so the same code runs
in a browser session and headless (API routes, page compilation).
"""

import logging
from collections.abc import MutableMapping
from typing import Protocol

from folio import hooks
from folio.config import settings
from folio.i18n import DEFAULT_LOCALE, Locale, is_supported
from folio.i18n.routing import locale_from_path

_log = logging.getLogger(__name__)


class Environment(Protocol):
    def read_preference(self) -> str | None: ...

    def write_preference(self, locale: str) -> None: ...

    def current_path(self) -> str | None: ...


class HeadlessEnvironment:
    """No URL, no storage: resolution always lands on the default locale."""

    def read_preference(self) -> str | None:
        return None

    def write_preference(self, locale: str) -> None:
        return None

    def current_path(self) -> str | None:
        return None


class BrowserEnvironment:
    """Environment backed by a client storage mapping and the current URL path."""

    def __init__(
        self,
        storage: MutableMapping[str, str],
        path: str = "/",
        storage_key: str = "",
    ):
        self.storage = storage
        self.path = path
        self.storage_key = storage_key or settings.locale_storage_key

    def read_preference(self) -> str | None:
        return self.storage.get(self.storage_key) or None

    def write_preference(self, locale: str) -> None:
        self.storage[self.storage_key] = locale

    def current_path(self) -> str | None:
        return self.path


def resolve_initial_locale(env: Environment) -> Locale:
    stored = env.read_preference()
    if stored is not None:
        if is_supported(stored):
            return stored
        _log.info("Ignoring unsupported stored locale preference %r", stored)
        hooks.emit(hooks.LOCALE_PREFERENCE_IGNORED, value=stored)

    path = env.current_path()
    if path:
        from_url = locale_from_path(path)
        if from_url is not None:
            return from_url

    return DEFAULT_LOCALE
