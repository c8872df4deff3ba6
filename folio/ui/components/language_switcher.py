"""Compact language switcher for the site header."""

import reflex as rx

from folio.i18n import LOCALE_NAMES, SUPPORTED_LOCALES
from folio.ui.state.i18n_state import I18nState

_t = I18nState.translations


def language_switcher() -> rx.Component:
    return rx.hstack(
        rx.tooltip(rx.icon("languages", size=16), content=_t["nav.language"]),
        rx.select.root(
            rx.select.trigger(aria_label=_t["nav.language"]),
            rx.select.content(
                *[
                    rx.select.item(LOCALE_NAMES[locale], value=locale)
                    for locale in SUPPORTED_LOCALES
                ],
            ),
            value=I18nState.locale,
            on_change=I18nState.set_locale,
            size="1",
        ),
        spacing="2",
        align="center",
    )
